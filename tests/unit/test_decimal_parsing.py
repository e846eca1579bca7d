"""
Тесты для разбора десятичных литералов

Проверяет:
1. Корректные литералы → (unscaled, scale)
2. ParseError: EMPTY, INVALID_DIGIT, OVERFLOW
3. Известную особенность: вырожденные литералы принимаются как 0
4. Границы int64 в литерале
"""

import pytest

from fixed_decimal import INT64_MAX, INT64_MIN, Decimal, ParseError, ParseErrorKind, parse_decimal
from fixed_decimal.domain.parsing import parse_decimal_literal

# =============================================================================
# КОРРЕКТНЫЕ ЛИТЕРАЛЫ
# =============================================================================


class TestParseValid:
    """Корректные литералы"""

    @pytest.mark.parametrize(
        "text, unscaled, scale",
        [
            ("1.00", 100, 2),
            ("-1.25", -125, 2),
            ("0", 0, 0),
            ("42", 42, 0),
            ("0.0010", 10, 4),
            ("-0.1", -1, 1),
            (".5", 5, 1),
            ("007", 7, 0),
        ],
    )
    def test_literal(self, text: str, unscaled: int, scale: int) -> None:
        assert Decimal.parse(text) == Decimal(unscaled, scale)

    def test_module_level_function(self) -> None:
        assert parse_decimal("1.50") == Decimal(150, 2)

    def test_literal_tuple(self) -> None:
        assert parse_decimal_literal("-12.50") == (-1250, 2)

    def test_int64_bounds(self) -> None:
        assert Decimal.parse(str(INT64_MAX)) == Decimal(INT64_MAX, 0)
        assert Decimal.parse(str(INT64_MIN)) == Decimal(INT64_MIN, 0)
        assert Decimal.parse("-922337203685477.5808") == Decimal(INT64_MIN, 4)


# =============================================================================
# ОШИБКИ
# =============================================================================


class TestParseErrors:
    """ParseError и его kind"""

    def test_empty(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            Decimal.parse("")
        assert exc_info.value.kind is ParseErrorKind.EMPTY
        assert exc_info.value.description == "cannot parse decimal from empty string"

    @pytest.mark.parametrize("text", ["2g", "1,5", " 1", "1 ", "+1", "1-", "--1", ".-1", "1e5", "١"])
    def test_invalid_digit(self, text: str) -> None:
        with pytest.raises(ParseError) as exc_info:
            Decimal.parse(text)
        assert exc_info.value.kind is ParseErrorKind.INVALID_DIGIT
        assert str(exc_info.value) == "invalid digit found in string"

    def test_invalid_digit_position(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            Decimal.parse("12x4")
        assert exc_info.value.position == 2

    def test_magnitude_overflow(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            Decimal.parse(str(INT64_MAX + 1))
        assert exc_info.value.kind is ParseErrorKind.OVERFLOW

    def test_very_long_literal_rejected_early(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            Decimal.parse("9" * 10_000)
        assert exc_info.value.kind is ParseErrorKind.OVERFLOW
        assert exc_info.value.position == 18

    def test_parse_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            Decimal.parse("abc")


# =============================================================================
# ИЗВЕСТНАЯ ОСОБЕННОСТЬ: вырожденные литералы
# =============================================================================


class TestPermissiveLiterals:
    """Вырожденные литералы принимаются, а не отвергаются"""

    @pytest.mark.parametrize("text", ["-", ".", "-."])
    def test_degenerate_literals_are_zero(self, text: str) -> None:
        assert Decimal.parse(text) == Decimal(0, 0)

    def test_trailing_period(self) -> None:
        assert Decimal.parse("5.") == Decimal(5, 0)
        assert Decimal.parse("-5.") == Decimal(-5, 0)

    def test_repeated_period_is_ignored(self) -> None:
        assert Decimal.parse("1.2.3") == Decimal(123, 2)

    def test_negative_zero(self) -> None:
        assert Decimal.parse("-0.00") == Decimal(0, 2)
