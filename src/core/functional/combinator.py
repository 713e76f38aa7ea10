"""
StringCombinator — single-method контракт для объединения двух строк

Любая функция или lambda с сигнатурой (str, str) -> str удовлетворяет
протоколу StringCombinator, отдельный класс не нужен:

    >>> shout: StringCombinator = lambda s1, s2: (s1 + s2).upper()
    >>> shout("ab", "c")
    'ABC'
"""

from typing import Protocol, Sequence


class StringCombinator(Protocol):
    """Объединяет две строки в одну"""

    def __call__(self, s1: str, s2: str) -> str: ...


def first_halves(s1: str, s2: str) -> str:
    """
    Первая половина s1 + первая половина s2.

    При нечётной длине средний символ отбрасывается (len // 2).

    Examples:
        >>> first_halves("Katze", "Hund")
        'KaHu'
        >>> first_halves("", "Hund")
        'Hu'
    """
    return s1[: len(s1) // 2] + s2[: len(s2) // 2]


def combine_pairwise(
    combinator: StringCombinator,
    lefts: Sequence[str],
    rights: Sequence[str],
) -> list[str]:
    """
    Поэлементное применение combinator к двум последовательностям.

    Args:
        combinator: Функция (s1, s2) -> str
        lefts: Первые аргументы
        rights: Вторые аргументы

    Returns:
        [combinator(l, r) for l, r in zip(lefts, rights)]

    Raises:
        ValueError: Если длины последовательностей различаются
    """
    if len(lefts) != len(rights):
        raise ValueError(
            f"Sequences must have equal length, got {len(lefts)} and {len(rights)}"
        )
    return [combinator(left, right) for left, right in zip(lefts, rights)]
