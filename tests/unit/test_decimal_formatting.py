"""
Тесты для строкового представления Decimal

Проверяет:
1. scale == 0: целое со знаком
2. Вставку точки и дополнение нулями
3. Знак для отрицательных значений с |value| < 1
4. Отсутствие округления и отбрасывания хвостовых нулей
"""

import pytest

from fixed_decimal import INT64_MAX, INT64_MIN, Decimal, render_decimal


class TestRender:
    """Тесты render_decimal и str(Decimal)"""

    @pytest.mark.parametrize(
        "unscaled, scale, expected",
        [
            (150, 2, "1.50"),
            (10, 4, "0.0010"),
            (-1, 1, "-0.1"),
            (0, 0, "0"),
            (-42, 0, "-42"),
            (0, 3, "0.000"),
            (5, 1, "0.5"),
            (123, 3, "0.123"),
            (-12345, 2, "-123.45"),
            (100, 2, "1.00"),
        ],
    )
    def test_render(self, unscaled: int, scale: int, expected: str) -> None:
        assert render_decimal(unscaled, scale) == expected
        assert str(Decimal(unscaled, scale)) == expected

    def test_int64_bounds(self) -> None:
        assert str(Decimal(INT64_MAX, 0)) == "9223372036854775807"
        assert str(Decimal(INT64_MIN, 0)) == "-9223372036854775808"
        assert str(Decimal(INT64_MIN, 19)) == "-0.9223372036854775808"
        assert str(Decimal(INT64_MAX, 3)) == "9223372036854775.807"

    def test_large_scale_never_scientific(self) -> None:
        rendered = str(Decimal(1, 30))
        assert rendered == "0." + "0" * 29 + "1"
        assert "e" not in rendered.lower()

    def test_str_differs_from_repr(self) -> None:
        value = Decimal(150, 2)
        assert str(value) == "1.50"
        assert repr(value) == "Decimal(unscaled=150, scale=2)"

    def test_f_string(self) -> None:
        assert f"{Decimal(-5, 2)}" == "-0.05"
