"""
TextValue — неизменяемое текстовое значение для упорядочивания

Immutable Pydantic модель: непустая строка, у которой всегда есть
последний символ. Пустое значение отклоняется при создании, а не при
сравнении.
"""

from pydantic import BaseModel, Field

from src.core.ordering.last_char import compare_last_char


class TextValue(BaseModel):
    """
    Непустое текстовое значение.

    Immutable модель (frozen=True).
    """

    value: str = Field(..., min_length=1, description="Непустая строка")

    model_config = {"frozen": True}

    @property
    def last_char(self) -> str:
        """Последний символ значения"""
        return self.value[-1]

    def __str__(self) -> str:
        return self.value


def compare_text_values(a: TextValue, b: TextValue) -> int:
    """
    Сравнение двух TextValue по последнему символу.

    Делегирует compare_last_char; EmptyTextValueError здесь невозможен,
    так как модель не допускает пустых строк.
    """
    return compare_last_char(a.value, b.value)
