"""
Functional helpers

Операции, принимающие поведение (функции, lambda, closures) как параметр.
"""

from src.core.functional.combinator import (
    StringCombinator,
    combine_pairwise,
    first_halves,
)
from src.core.functional.list_ops import less_than, remove_if, replace_all

__all__ = [
    # Combinator
    "StringCombinator",
    "combine_pairwise",
    "first_halves",
    # List operations
    "less_than",
    "remove_if",
    "replace_all",
]
