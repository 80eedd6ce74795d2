"""
Тесты для модуля Decimal Codec

Проверяет разбор десятичного текста в limbs (группы по 4 цифры от
младшего конца) и форматирование с дополнением внутренних limbs нулями.
"""

import pytest

from limbint.core.math.decimal_codec import format_decimal, parse_decimal


class TestParseDecimal:
    """Тесты для parse_decimal"""

    def test_leftmost_group_is_short(self) -> None:
        assert parse_decimal("123456789") == (False, [6789, 2345, 1])

    def test_negative(self) -> None:
        assert parse_decimal("-1234567") == (True, [4567, 123])

    def test_explicit_plus(self) -> None:
        assert parse_decimal("+42") == (False, [42])

    def test_inner_zero_groups(self) -> None:
        assert parse_decimal("100000000") == (False, [0, 0, 1])

    def test_leading_zeros_trimmed(self) -> None:
        assert parse_decimal("00000000123") == (False, [123])

    def test_negative_zero_is_zero(self) -> None:
        assert parse_decimal("-0") == (False, [0])
        assert parse_decimal("-0000") == (False, [0])

    @pytest.mark.parametrize(
        "text",
        ["", "-", "+", "12a4", "1 000", " 12", "12 ", "1e10", "1,000", "--1", "+-1", "0x10"],
    )
    def test_rejects_malformed(self, text: str) -> None:
        with pytest.raises(ValueError, match="invalid decimal integer literal"):
            parse_decimal(text)


class TestFormatDecimal:
    """Тесты для format_decimal"""

    def test_zero(self) -> None:
        assert format_decimal(False, [0]) == "0"

    def test_pads_inner_limbs(self) -> None:
        assert format_decimal(False, [7, 0, 12]) == "1200000007"
        assert format_decimal(False, [5, 1]) == "10005"
        assert format_decimal(False, [50, 1]) == "10050"
        assert format_decimal(False, [500, 1]) == "10500"

    def test_top_limb_unpadded(self) -> None:
        assert format_decimal(False, [0, 1]) == "10000"

    def test_negative(self) -> None:
        assert format_decimal(True, [1]) == "-1"

    @pytest.mark.parametrize(
        "text",
        ["0", "7", "-9999", "10000", "-100000000", "123456789012345678901234567890"],
    )
    def test_parse_format_round_trip(self, text: str) -> None:
        assert format_decimal(*parse_decimal(text)) == text
