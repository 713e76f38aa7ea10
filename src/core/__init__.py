"""
Core ordering primitives, domain values and behaviour-as-value helpers.

This package holds the pure building blocks: the last-character ordering
function, the TextValue model and the list/combinator helpers that accept
behaviour (functions, lambdas, closures) as parameters.
"""
