"""
Last-Character Ordering — сравнение строк по последнему символу

Модуль предоставляет единственную функцию упорядочивания и её обёртки:
- compare_last_char: знаковое сравнение двух строк по последнему символу
- LastCharComparator: тот же контракт как callable-объект с конфигурацией
- last_char_key: адаптер для key= (sorted, list.sort, min, max)
- sort_by_last_char / sort_by_last_char_in_place

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. compare_last_char(a, b) == -compare_last_char(b, a) (антисимметрия)
2. compare_last_char(a, a) == 0 для любой непустой строки
3. Равные последние символы дальше не различаются, порядок таких
   элементов задаёт стабильная сортировка Python
4. Пустая строка → EmptyTextValueError (при политике RAISE)
"""

import functools
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Final, Iterable, Optional

logger = logging.getLogger(__name__)

# Сигнатура функции упорядочивания: (a, b) -> отрицательное / 0 / положительное
OrderingFunction = Callable[[str, str], int]


# =============================================================================
# КОНФИГУРАЦИЯ
# =============================================================================

# Code point, который получает пустая строка при политике SENTINEL.
# Меньше любого реального символа (ord >= 0), поэтому пустые строки идут первыми.
EMPTY_TEXT_SENTINEL_CODE_POINT: Final[int] = -1


class EmptyTextPolicy(str, Enum):
    """Поведение при пустой строке на входе"""

    RAISE = "RAISE"
    SENTINEL = "SENTINEL"


@dataclass(frozen=True)
class LastCharConfig:
    """Конфигурация LastCharComparator.

    - RAISE: пустая строка → EmptyTextValueError (default)
    - SENTINEL: последний символ пустой строки = sentinel_code_point
    """

    empty_policy: EmptyTextPolicy = EmptyTextPolicy.RAISE
    sentinel_code_point: int = EMPTY_TEXT_SENTINEL_CODE_POINT


# =============================================================================
# EXCEPTIONS
# =============================================================================


class EmptyTextValueError(ValueError):
    """
    Попытка взять последний символ пустой строки.

    У пустой строки нет последнего символа, поэтому сравнение не определено.
    Ошибка не подавляется и доходит до вызывающего кода.
    """

    def __init__(self, position: str):
        self.position = position
        super().__init__(position)

    def __str__(self) -> str:
        return (
            f"Cannot order by last character: "
            f"argument '{self.position}' is an empty string"
        )


# =============================================================================
# LAST CHARACTER
# =============================================================================


def _require_str(value: str, position: str) -> None:
    if not isinstance(value, str):
        raise TypeError(
            f"Argument '{position}' must be str, got {type(value).__name__}"
        )


def last_char(text: str, position: str = "text") -> str:
    """
    Последний символ строки.

    Args:
        text: Непустая строка
        position: Имя аргумента для сообщения об ошибке

    Returns:
        Строка длины 1

    Raises:
        EmptyTextValueError: Если text == ""
        TypeError: Если text не str

    Examples:
        >>> last_char("Semmel")
        'l'
        >>> last_char("Käse")
        'e'
    """
    _require_str(text, position)
    if not text:
        raise EmptyTextValueError(position)
    return text[-1]


def compare_last_char(a: str, b: str) -> int:
    """
    Сравнение двух строк по последнему символу (code point).

    Args:
        a: Первая строка (непустая)
        b: Вторая строка (непустая)

    Returns:
        ord(last(a)) - ord(last(b)):
        - < 0 если последний символ a идёт раньше
        - 0 если последние символы равны
        - > 0 если последний символ a идёт позже

    Raises:
        EmptyTextValueError: Если a или b пустая

    Examples:
        >>> compare_last_char("Käse", "Semmel") < 0
        True
        >>> compare_last_char("Semmel", "Aufstrich") > 0
        True
        >>> compare_last_char("Hund", "Wand")
        0
    """
    return ord(last_char(a, "a")) - ord(last_char(b, "b"))


# Адаптер для API, которые принимают key= вместо comparator
last_char_key = functools.cmp_to_key(compare_last_char)


# =============================================================================
# CONFIGURABLE COMPARATOR
# =============================================================================


class LastCharComparator:
    """
    Comparator по последнему символу как callable-объект.

    Экземпляр сам является OrderingFunction: его можно передать в
    functools.cmp_to_key или в любой код, ожидающий (a, b) -> int.
    С конфигурацией по умолчанию ведёт себя в точности как compare_last_char.
    """

    def __init__(self, config: Optional[LastCharConfig] = None):
        """
        Args:
            config: конфигурация (default: LastCharConfig())
        """
        self.config = config or LastCharConfig()

    def code_point(self, text: str, position: str = "text") -> int:
        """Code point последнего символа с учётом политики для пустой строки."""
        _require_str(text, position)
        if not text and self.config.empty_policy is EmptyTextPolicy.SENTINEL:
            return self.config.sentinel_code_point
        return ord(last_char(text, position))

    def __call__(self, a: str, b: str) -> int:
        return self.code_point(a, "a") - self.code_point(b, "b")

    def key(self) -> Callable[[str], Any]:
        """Key-функция для sorted()/list.sort()."""
        return functools.cmp_to_key(self)

    def __repr__(self) -> str:
        return f"LastCharComparator(empty_policy={self.config.empty_policy.value})"


# =============================================================================
# SORTING
# =============================================================================


def sort_by_last_char(
    values: Iterable[str],
    comparator: OrderingFunction = compare_last_char,
) -> list[str]:
    """
    Новый список, отсортированный по последнему символу (по возрастанию).

    Сортировка стабильная: строки с одинаковым последним символом
    сохраняют исходный относительный порядок.

    Args:
        values: Строки для сортировки
        comparator: Функция упорядочивания (default: compare_last_char)

    Returns:
        Отсортированный список

    Examples:
        >>> sort_by_last_char(["Käse", "Semmel", "Aufstrich"])
        ['Käse', 'Aufstrich', 'Semmel']
    """
    result = sorted(values, key=functools.cmp_to_key(comparator))
    logger.debug("Sorted %d values by last character", len(result))
    return result


def sort_by_last_char_in_place(
    values: list[str],
    comparator: OrderingFunction = compare_last_char,
) -> None:
    """
    Сортировка списка на месте по последнему символу.

    Если comparator бросает исключение, список может остаться частично
    переупорядоченным (поведение list.sort).
    """
    values.sort(key=functools.cmp_to_key(comparator))
    logger.debug("Sorted %d values in place by last character", len(values))
