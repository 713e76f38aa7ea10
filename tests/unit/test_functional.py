"""
Тесты для functional helpers

Проверяет:
1. StringCombinator: функции и lambda как реализации протокола
2. first_halves и combine_pairwise
3. remove_if / replace_all / less_than
"""

import logging

import pytest

from src.core.functional import (
    StringCombinator,
    combine_pairwise,
    first_halves,
    less_than,
    remove_if,
    replace_all,
)


# =============================================================================
# ТЕСТЫ: StringCombinator
# =============================================================================


class TestFirstHalves:
    """Тесты first_halves"""

    def test_example(self):
        """Katze + Hund → KaHu"""
        assert first_halves("Katze", "Hund") == "KaHu"

    def test_odd_length_drops_middle(self):
        """При нечётной длине берётся len // 2 символов"""
        assert first_halves("abc", "defgh") == "ade"

    def test_empty_and_single_char(self):
        """Пустые и односимвольные строки дают пустую половину"""
        assert first_halves("", "") == ""
        assert first_halves("a", "Hund") == "Hu"


class TestCombinePairwise:
    """Тесты combine_pairwise"""

    def test_with_named_function(self):
        """Именованная функция как combinator"""
        result = combine_pairwise(first_halves, ["Katze", "Adam"], ["Hund", "Eva"])
        assert result == ["KaHu", "AdE"]

    def test_with_lambda(self):
        """Lambda как combinator"""
        joiner: StringCombinator = lambda s1, s2: f"{s1}-{s2}"
        assert combine_pairwise(joiner, ["a", "b"], ["c", "d"]) == ["a-c", "b-d"]

    def test_with_closure(self):
        """Closure над разделителем как combinator"""

        def joined_by(separator: str) -> StringCombinator:
            return lambda s1, s2: s1 + separator + s2

        assert combine_pairwise(joined_by(" und "), ["Adam"], ["Eva"]) == ["Adam und Eva"]

    def test_empty_sequences(self):
        """Пустые последовательности → пустой результат"""
        assert combine_pairwise(first_halves, [], []) == []

    def test_length_mismatch_raises(self):
        """Разная длина → ValueError"""
        with pytest.raises(ValueError, match="equal length"):
            combine_pairwise(first_halves, ["a"], [])


# =============================================================================
# ТЕСТЫ: List operations
# =============================================================================


class TestRemoveIf:
    """Тесты remove_if"""

    def test_example(self):
        """[1, 4, 6, 8] без значений < 5 → [6, 8]"""
        values = [1, 4, 6, 8]
        assert remove_if(values, lambda e: e < 5) is True
        assert values == [6, 8]

    def test_with_less_than_closure(self):
        """less_than(5) эквивалентен lambda e: e < 5"""
        values = [1, 4, 6, 8]
        remove_if(values, less_than(5))
        assert values == [6, 8]

    def test_nothing_removed(self):
        """Ничего не удалено → False, список без изменений"""
        values = [6, 8]
        assert remove_if(values, less_than(5)) is False
        assert values == [6, 8]

    def test_everything_removed(self):
        """Все элементы удалены"""
        values = [1, 2]
        assert remove_if(values, less_than(5)) is True
        assert values == []

    def test_mutates_same_list_object(self):
        """Изменяется тот же объект списка"""
        values = [1, 6]
        alias = values
        remove_if(values, less_than(5))
        assert alias is values
        assert alias == [6]

    def test_predicate_error_leaves_list_unchanged(self):
        """Исключение в предикате пропагирует, список не изменяется"""
        values = [1, "x", 6]
        with pytest.raises(TypeError):
            remove_if(values, less_than(5))
        assert values == [1, "x", 6]

    def test_logs_debug(self, caplog):
        """remove_if пишет DEBUG запись"""
        with caplog.at_level(logging.DEBUG, logger="src.core.functional.list_ops"):
            remove_if([1, 4, 6, 8], less_than(5))
        assert "removed 2 of 4" in caplog.text


class TestReplaceAll:
    """Тесты replace_all"""

    def test_uppercase_example(self):
        """Adam, und, Eva → ADAM, UND, EVA"""
        words = ["Adam", "und", "Eva"]
        assert replace_all(words, str.upper) is None
        assert words == ["ADAM", "UND", "EVA"]

    def test_with_lambda(self):
        """Lambda как оператор"""
        values = [1, 2, 3]
        replace_all(values, lambda e: e * 10)
        assert values == [10, 20, 30]

    def test_empty_list(self):
        """Пустой список остаётся пустым"""
        values: list[str] = []
        replace_all(values, str.upper)
        assert values == []


class TestLessThan:
    """Тесты less_than"""

    def test_boundary(self):
        """Порог не включается"""
        predicate = less_than(5)
        assert predicate(4) is True
        assert predicate(5) is False
        assert predicate(6) is False

    def test_independent_closures(self):
        """Каждый вызов захватывает свой порог"""
        below_two, below_ten = less_than(2), less_than(10)
        assert below_two(5) is False
        assert below_ten(5) is True
