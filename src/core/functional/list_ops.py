"""
List Operations — in-place операции над списками с поведением-параметром

- remove_if: удаление элементов по предикату
- replace_all: замена каждого элемента результатом унарной функции
- less_than: фабрика предикатов (closure над порогом)

Операции изменяют только переданный список и ничего больше.
"""

import logging
from typing import Any, Callable, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


def remove_if(values: list[T], predicate: Callable[[T], bool]) -> bool:
    """
    Удаление на месте всех элементов, для которых predicate возвращает True.

    Предикат вызывается ровно один раз для каждого элемента. Если предикат
    бросает исключение, список не изменяется.

    Args:
        values: Изменяемый список
        predicate: Функция элемент -> bool

    Returns:
        True если хотя бы один элемент был удалён

    Examples:
        >>> values = [1, 4, 6, 8]
        >>> remove_if(values, lambda e: e < 5)
        True
        >>> values
        [6, 8]
    """
    kept = [value for value in values if not predicate(value)]
    removed = len(values) - len(kept)
    if removed:
        values[:] = kept
    logger.debug("remove_if removed %d of %d elements", removed, removed + len(kept))
    return removed > 0


def replace_all(values: list[T], operator: Callable[[T], T]) -> None:
    """
    Замена на месте каждого элемента на operator(element).

    Examples:
        >>> words = ["Adam", "und", "Eva"]
        >>> replace_all(words, str.upper)
        >>> words
        ['ADAM', 'UND', 'EVA']
    """
    values[:] = [operator(value) for value in values]
    logger.debug("replace_all transformed %d elements", len(values))


def less_than(threshold: Any) -> Callable[[Any], bool]:
    """
    Предикат "значение меньше threshold".

    Examples:
        >>> below_five = less_than(5)
        >>> below_five(4), below_five(5)
        (True, False)
    """

    def predicate(value: Any) -> bool:
        return value < threshold

    return predicate
