"""
Formatting: каноническое строковое представление Decimal

Точное представление с десятичной точкой:
- без экспоненциальной записи
- без округления и без отбрасывания хвостовых нулей
- количество дробных цифр всегда равно scale
"""

MINUS = "-"
PERIOD = "."


def render_decimal(unscaled: int, scale: int) -> str:
    """
    Рендер пары (unscaled, scale) в строку с десятичной точкой.

    Алгоритм:
        scale == 0: str(unscaled)
        len(digits) <= scale: "0." + нули до scale + digits
        иначе: точка на позиции len(digits) - scale

    Args:
        unscaled: Целое значение со знаком
        scale: Количество дробных цифр (>= 0)

    Returns:
        Строка вида "-12.50"

    Examples:
        >>> render_decimal(150, 2)
        '1.50'
        >>> render_decimal(10, 4)
        '0.0010'
        >>> render_decimal(-1, 1)
        '-0.1'
    """
    if scale == 0:
        return str(unscaled)

    sign = MINUS if unscaled < 0 else ""
    digits = str(abs(unscaled))

    if len(digits) <= scale:
        padding = "0" * (scale - len(digits))
        return f"{sign}0{PERIOD}{padding}{digits}"

    point = len(digits) - scale
    return f"{sign}{digits[:point]}{PERIOD}{digits[point:]}"
