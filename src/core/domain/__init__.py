"""
Domain models and value objects.

Contains the TextValue model ordered by the last-character comparator.
"""

from src.core.domain.text_value import TextValue, compare_text_values

__all__ = [
    "TextValue",
    "compare_text_values",
]
