"""
Decimal: точное десятичное число с фиксированной точкой

Immutable Pydantic модель: целое unscaled (int64) и scale (uint32).
Представляемое значение = unscaled / 10^scale.

Два отношения, которые НЕЛЬЗЯ смешивать:
- строгое равенство (==): совпадают и unscaled, и scale.
  Decimal(10, 1) != Decimal(100, 2), хотя оба равны 1.0
- слабый порядок (compare, <, <=, >, >=): только по значению.
  Decimal(10, 1).compare(Decimal(100, 2)) == 0

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Ни одна операция не изменяет существующий экземпляр
2. Каждый арифметический шаг проверяется (checked_int), без wraparound
3. Переполнение → DecimalOverflowError, нулевой делитель → DecimalDivisionByZero
4. Сравнение только повышает scale и всегда разрешимо

ВЫРАВНИВАНИЕ SCALE:
    +, -          оба операнда к max(scale)
    *             без выравнивания, scale = scale_a + scale_b
    /             делимое повышается до scale делителя (никогда не понижается),
                  scale = scale_делимого - scale_делителя
    %             выравнивание как у /, scale = scale_делимого
                  (не уменьшается: (a / b) * b + a % b восстанавливает a)
"""

from typing import Any

from pydantic import BaseModel, Field

from fixed_decimal.domain.formatting import render_decimal
from fixed_decimal.domain.parsing import parse_decimal_literal
from fixed_decimal.math.checked_int import (
    INT64_MAX,
    INT64_MIN,
    MAX_POW10_EXPONENT,
    UINT32_MAX,
    DecimalDivisionByZero,
    checked_add,
    checked_div,
    checked_mul,
    checked_neg,
    checked_pow10,
    checked_rem,
    checked_scale_add,
    checked_sub,
    ensure_int64,
)


# =============================================================================
# DECIMAL MODEL
# =============================================================================


class Decimal(BaseModel):
    """
    Десятичное число с фиксированной точкой.

    Immutable модель (frozen=True): результат операции всегда отдельное значение.

    Examples:
        >>> Decimal(51, 2) + Decimal(49, 2)
        Decimal(unscaled=100, scale=2)
        >>> str(Decimal(15, 1) * Decimal(3333, 4))
        '0.49995'
    """

    unscaled: int = Field(
        ..., strict=True, ge=INT64_MIN, le=INT64_MAX, description="Значащие цифры со знаком (int64)"
    )
    scale: int = Field(
        0, strict=True, ge=0, le=UINT32_MAX, description="Количество дробных цифр (uint32)"
    )

    model_config = {"frozen": True}  # Immutable

    def __init__(self, unscaled: int, scale: int = 0, **data: Any) -> None:
        super().__init__(unscaled=unscaled, scale=scale, **data)

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def parse(cls, text: str) -> "Decimal":
        """
        Разбор десятичного литерала.

        Args:
            text: Строка вида "-1.25"

        Returns:
            Decimal с scale, равным числу цифр после точки

        Raises:
            ParseError: для пустой строки, постороннего символа или
                слишком длинного литерала
        """
        unscaled, scale = parse_decimal_literal(text)
        return cls(unscaled, scale)

    # -------------------------------------------------------------------------
    # Scale
    # -------------------------------------------------------------------------

    def adjust_scale(self, target_scale: int) -> "Decimal":
        """
        Приведение к новому scale.

        Повышение scale сохраняет значение, понижение отбрасывает лишние
        дробные цифры (усечение к нулю, без округления).

        Args:
            target_scale: Новый scale в [0, UINT32_MAX]

        Returns:
            Decimal с scale == target_scale

        Raises:
            ValueError: если target_scale вне [0, UINT32_MAX]
            DecimalOverflowError: если 10^разница или произведение
                не помещается в int64

        Examples:
            >>> Decimal(1, 0).adjust_scale(2)
            Decimal(unscaled=100, scale=2)
            >>> Decimal(125, 2).adjust_scale(1)
            Decimal(unscaled=12, scale=1)
        """
        if not 0 <= target_scale <= UINT32_MAX:
            raise ValueError(f"scale must be in [0, {UINT32_MAX}], got {target_scale}")

        if self.scale == target_scale:
            return self

        if self.scale > target_scale:
            factor = checked_pow10(self.scale - target_scale)
            return Decimal(checked_div(self.unscaled, factor), target_scale)

        factor = checked_pow10(target_scale - self.scale)
        return Decimal(checked_mul(self.unscaled, factor), target_scale)

    def _aligned_with(self, other: "Decimal") -> tuple["Decimal", "Decimal"]:
        """Оба операнда на max(scale)."""
        scale = max(self.scale, other.scale)
        return self.adjust_scale(scale), other.adjust_scale(scale)

    def _dividend_for(self, divisor: "Decimal") -> "Decimal":
        if divisor.unscaled == 0:
            raise DecimalDivisionByZero(f"division of {self} by zero-valued {divisor!r}")
        if divisor.scale > self.scale:
            return self.adjust_scale(divisor.scale)
        return self

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def __add__(self, other: object) -> "Decimal":
        if not isinstance(other, Decimal):
            return NotImplemented
        left, right = self._aligned_with(other)
        return Decimal(checked_add(left.unscaled, right.unscaled), left.scale)

    def __sub__(self, other: object) -> "Decimal":
        if not isinstance(other, Decimal):
            return NotImplemented
        left, right = self._aligned_with(other)
        return Decimal(checked_sub(left.unscaled, right.unscaled), left.scale)

    def __mul__(self, other: object) -> "Decimal":
        if isinstance(other, Decimal):
            return Decimal(
                checked_mul(self.unscaled, other.unscaled),
                checked_scale_add(self.scale, other.scale),
            )
        if isinstance(other, int) and not isinstance(other, bool):
            factor = ensure_int64(other, "mul operand")
            return Decimal(checked_mul(self.unscaled, factor), self.scale)
        return NotImplemented

    def __rmul__(self, other: object) -> "Decimal":
        # Decimal * Decimal всегда обрабатывается в __mul__ левого операнда
        if isinstance(other, int) and not isinstance(other, bool):
            return self.__mul__(other)
        return NotImplemented

    def __truediv__(self, other: object) -> "Decimal":
        """
        Деление с усечением к нулю.

        Raises:
            DecimalDivisionByZero: если other.unscaled == 0
            DecimalOverflowError: при переполнении выравнивания или частного
        """
        if not isinstance(other, Decimal):
            return NotImplemented
        dividend = self._dividend_for(other)
        return Decimal(
            checked_div(dividend.unscaled, other.unscaled),
            dividend.scale - other.scale,
        )

    def __mod__(self, other: object) -> "Decimal":
        """
        Остаток от деления (знак делимого).

        Scale результата равен выровненному scale делимого.
        """
        if not isinstance(other, Decimal):
            return NotImplemented
        dividend = self._dividend_for(other)
        return Decimal(checked_rem(dividend.unscaled, other.unscaled), dividend.scale)

    def __neg__(self) -> "Decimal":
        return Decimal(checked_neg(self.unscaled), self.scale)

    def __abs__(self) -> "Decimal":
        if self.unscaled < 0:
            return -self
        return self

    # -------------------------------------------------------------------------
    # Строгое равенство
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Decimal):
            return NotImplemented
        return self.unscaled == other.unscaled and self.scale == other.scale

    def __hash__(self) -> int:
        return hash((self.unscaled, self.scale))

    # -------------------------------------------------------------------------
    # Слабый порядок
    # -------------------------------------------------------------------------

    def compare(self, other: "Decimal") -> int:
        """
        Сравнение по представляемому значению, независимо от scale.

        Операнд с меньшим scale повышается до большего. Понижение не
        используется: оно отбросило бы младшие цифры.

        Повышение выполняется на неограниченных int: результат сравнения
        не является значением Decimal, поэтому переполнения здесь нет и
        сравнение разрешимо для любых пар.

        Returns:
            -1 если self < other, 0 если значения равны, 1 если self > other

        Examples:
            >>> Decimal(1, 0).compare(Decimal(2, 1))
            1
            >>> Decimal(1, 0).compare(Decimal(10, 1))
            0
        """
        left = _upscaled_unscaled(self, other.scale)
        right = _upscaled_unscaled(other, self.scale)
        return (left > right) - (left < right)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Decimal):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Decimal):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Decimal):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Decimal):
            return NotImplemented
        return self.compare(other) >= 0

    # -------------------------------------------------------------------------
    # Отображение
    # -------------------------------------------------------------------------

    def __str__(self) -> str:
        return render_decimal(self.unscaled, self.scale)


# =============================================================================
# HELPERS
# =============================================================================


def _upscaled_unscaled(value: Decimal, scale: int) -> int:
    """
    unscaled значения value, приведённый к max(value.scale, scale).

    Для разницы scale больше MAX_POW10_EXPONENT + 1 любое ненулевое
    значение по модулю превосходит любой int64, поэтому вместо 10^разница
    достаточно сохранить знак.
    """
    if scale <= value.scale:
        return value.unscaled
    diff = scale - value.scale
    if diff > MAX_POW10_EXPONENT + 1:
        diff = MAX_POW10_EXPONENT + 2
    return value.unscaled * 10**diff


def parse_decimal(text: str) -> Decimal:
    """Разбор литерала в Decimal (см. Decimal.parse)."""
    return Decimal.parse(text)
