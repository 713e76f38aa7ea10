"""
Ordering modules

Функции упорядочивания строк, передаваемые в сортировку как значения.
"""

from src.core.ordering.last_char import (
    # Constants
    EMPTY_TEXT_SENTINEL_CODE_POINT,
    # Types
    EmptyTextPolicy,
    LastCharComparator,
    LastCharConfig,
    OrderingFunction,
    # Exceptions
    EmptyTextValueError,
    # Functions
    compare_last_char,
    last_char,
    last_char_key,
    sort_by_last_char,
    sort_by_last_char_in_place,
)

__all__ = [
    # Constants
    "EMPTY_TEXT_SENTINEL_CODE_POINT",
    # Types
    "EmptyTextPolicy",
    "LastCharComparator",
    "LastCharConfig",
    "OrderingFunction",
    # Exceptions
    "EmptyTextValueError",
    # Functions
    "compare_last_char",
    "last_char",
    "last_char_key",
    "sort_by_last_char",
    "sort_by_last_char_in_place",
]
