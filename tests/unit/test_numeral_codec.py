"""
Тесты для модуля Numeral Codec

Проверяет:
1. Декодирование римской записи (аддитивные и вычитательные пары)
2. Кодирование целых в каноническую запись
3. Нулевой символ "Z" и отрицательные значения
4. Переполнение |value| > 3999
5. Permissive/strict поведение на неканонических записях
6. Инвариант обратимости to_int64(to_roman(n)) == n
"""

import pytest

from src.core.errors import ErrorKind, InvalidNumeral, RomanOverflow
from src.core.numerals import (
    ADDITIVE_RULE,
    NUMERAL_SYMBOLS,
    ROMAN_BOUND,
    SUBTRACTIVE_RULE,
    WEIGHT_TABLE,
    ZERO_SYMBOL,
    is_canonical,
    is_numeral_symbol,
    to_int64,
    to_roman,
)

# =============================================================================
# ТАБЛИЦЫ ПРАВИЛ
# =============================================================================


class TestRuleTables:
    """Тесты констант"""

    def test_weight_table_strictly_descending(self) -> None:
        """Веса строго убывают и заканчиваются нулём"""
        weights = [weight for weight, _ in WEIGHT_TABLE]
        assert weights == sorted(weights, reverse=True)
        assert len(set(weights)) == len(weights)
        assert WEIGHT_TABLE[-1] == (0, ZERO_SYMBOL)

    def test_subtractive_pairs_are_net_worth(self) -> None:
        """Стоимость пары = старший номинал - младший"""
        for (low, high), value in SUBTRACTIVE_RULE.items():
            assert value == ADDITIVE_RULE[high] - ADDITIVE_RULE[low]

    def test_tables_are_read_only(self) -> None:
        """Таблицы правил неизменяемы"""
        with pytest.raises(TypeError):
            ADDITIVE_RULE["Q"] = 7  # type: ignore[index]
        with pytest.raises(TypeError):
            SUBTRACTIVE_RULE[("V", "X")] = 5  # type: ignore[index]

    def test_numeral_symbols_include_zero(self) -> None:
        assert NUMERAL_SYMBOLS == frozenset("IVXLCDMZ")
        assert is_numeral_symbol("Z")
        assert is_numeral_symbol("M")
        assert not is_numeral_symbol("i")
        assert not is_numeral_symbol("-")


# =============================================================================
# ДЕКОДИРОВАНИЕ
# =============================================================================


class TestToInt64:
    """Тесты для to_int64"""

    def test_zero_symbol(self) -> None:
        assert to_int64("Z") == 0

    def test_single_symbols(self) -> None:
        """Одиночные символы дают свой номинал"""
        for symbol, value in ADDITIVE_RULE.items():
            assert to_int64(symbol) == value

    def test_additive_composition(self) -> None:
        assert to_int64("III") == 3
        assert to_int64("VIII") == 8
        assert to_int64("MDCLXVI") == 1666

    def test_subtractive_pairs(self) -> None:
        """Вычитательная пара заменяет уже добавленный номинал"""
        assert to_int64("IV") == 4
        assert to_int64("IX") == 9
        assert to_int64("XL") == 40
        assert to_int64("XC") == 90
        assert to_int64("CD") == 400
        assert to_int64("CM") == 900

    def test_mixed_composition(self) -> None:
        assert to_int64("XIV") == 14
        assert to_int64("MCMXCIV") == 1994
        assert to_int64("MMMCMXCIX") == 3999

    def test_negative_prefix(self) -> None:
        """Ведущий минус инвертирует значение"""
        assert to_int64("-IV") == -4
        assert to_int64("-MMMCMXCIX") == -3999

    def test_non_canonical_accepted_by_default(self) -> None:
        """Permissive-режим: неканоническая запись даёт правдоподобное значение"""
        assert to_int64("IIX") == 10
        assert to_int64("IIII") == 4
        assert to_int64("VX") == 5
        assert to_int64("IC") == 1

    def test_unknown_pair_adds_nothing(self) -> None:
        """Пара вне SUBTRACTIVE_RULE: старший символ не добавляет номинала"""
        assert to_int64("IC") == 1
        assert to_int64("XM") == 10
        assert to_int64("VL") == 5
        assert to_int64("MIM") == 1001

    def test_non_canonical_rejected_in_strict_mode(self) -> None:
        with pytest.raises(InvalidNumeral) as exc_info:
            to_int64("IIX", strict=True)
        assert exc_info.value.kind == ErrorKind.INVALID_NUMERAL
        assert exc_info.value.text == "IIX"

    def test_canonical_accepted_in_strict_mode(self) -> None:
        assert to_int64("IX", strict=True) == 9
        assert to_int64("Z", strict=True) == 0

    def test_zero_mixed_with_other_symbols_rejected(self) -> None:
        """Ноль никогда не смешивается с другими символами"""
        with pytest.raises(InvalidNumeral):
            to_int64("XZ")
        with pytest.raises(InvalidNumeral):
            to_int64("ZZ")

    def test_empty_and_foreign_symbols_rejected(self) -> None:
        with pytest.raises(InvalidNumeral):
            to_int64("")
        with pytest.raises(InvalidNumeral):
            to_int64("XA")
        with pytest.raises(InvalidNumeral):
            to_int64("-")


# =============================================================================
# КОДИРОВАНИЕ
# =============================================================================


class TestToRoman:
    """Тесты для to_roman"""

    def test_zero(self) -> None:
        assert to_roman(0) == "Z"

    def test_weights(self) -> None:
        assert to_roman(1) == "I"
        assert to_roman(4) == "IV"
        assert to_roman(9) == "IX"
        assert to_roman(40) == "XL"
        assert to_roman(90) == "XC"
        assert to_roman(400) == "CD"
        assert to_roman(900) == "CM"
        assert to_roman(1000) == "M"

    def test_composite_values(self) -> None:
        assert to_roman(8) == "VIII"
        assert to_roman(14) == "XIV"
        assert to_roman(1994) == "MCMXCIV"
        assert to_roman(ROMAN_BOUND) == "MMMCMXCIX"

    def test_negative_values(self) -> None:
        assert to_roman(-3) == "-III"
        assert to_roman(-4) == "-IV"
        assert to_roman(-ROMAN_BOUND) == "-MMMCMXCIX"

    @pytest.mark.parametrize("value", [4000, -4000, 10**6, -(2**63)])
    def test_overflow(self, value: int) -> None:
        with pytest.raises(RomanOverflow, match="Roman number overflow") as exc_info:
            to_roman(value)
        assert exc_info.value.value == value


# =============================================================================
# ИНВАРИАНТЫ
# =============================================================================


class TestInvariants:
    """Инварианты кодека"""

    def test_roundtrip_full_range(self) -> None:
        """Инвариант: to_int64(to_roman(n)) == n на всём диапазоне"""
        for n in range(-ROMAN_BOUND, ROMAN_BOUND + 1):
            assert to_int64(to_roman(n)) == n

    def test_rendering_is_canonical(self) -> None:
        """Рендеринг всегда даёт каноническую запись"""
        for n in (-3999, -49, -1, 0, 1, 49, 444, 3888):
            assert is_canonical(to_roman(n))

    def test_is_canonical(self) -> None:
        assert is_canonical("XIV")
        assert is_canonical("-IV")
        assert is_canonical("Z")
        assert not is_canonical("IIX")
        assert not is_canonical("VX")
        assert not is_canonical("IIII")
        assert not is_canonical("XZ")
        assert not is_canonical("MMMM")
