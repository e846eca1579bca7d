"""
Checked Integers: Fixed-Width Arithmetic Primitives

Модуль эмулирует целочисленную арифметику фиксированной ширины поверх
неограниченных int Python:
- int64 для unscaled-значений Decimal
- uint32 для scale
- Возведение 10 в степень с проверкой переполнения
- Деление и остаток с усечением к нулю (а не floor, как // и % в Python)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Каждый результат проверяется на попадание в диапазон своего типа
2. Переполнение никогда не «заворачивается» → DecimalOverflowError
3. Деление на ноль → DecimalDivisionByZero (до вычислений)
4. Все операции детерминированы и не имеют побочных эффектов
"""

import logging
from typing import Final

logger = logging.getLogger(__name__)

# =============================================================================
# ГРАНИЦЫ ТИПОВ
# =============================================================================

# Диапазон signed 64-bit (unscaled)
INT64_MIN: Final[int] = -(2**63)
INT64_MAX: Final[int] = 2**63 - 1

# Диапазон unsigned 32-bit (scale)
UINT32_MAX: Final[int] = 2**32 - 1

# Максимальная степень 10, помещающаяся в int64 (10^18 < 2^63 < 10^19)
MAX_POW10_EXPONENT: Final[int] = 18


# =============================================================================
# EXCEPTIONS
# =============================================================================


class DecimalArithmeticError(ArithmeticError):
    """
    Базовая ошибка арифметики Decimal.

    Ошибки этой иерархии означают неправильное использование типа
    (операнды вне представимого диапазона), а не штатную ситуацию.
    Библиотека их не перехватывает.
    """


class DecimalOverflowError(DecimalArithmeticError, OverflowError):
    """Результат не помещается в int64 (unscaled) или uint32 (scale)."""


class DecimalDivisionByZero(DecimalArithmeticError, ZeroDivisionError):
    """Деление или остаток по делителю с нулевым unscaled."""


# =============================================================================
# ПРОВЕРКА ДИАПАЗОНОВ
# =============================================================================


def ensure_int64(value: int, operation: str) -> int:
    """
    Проверка попадания результата в диапазон int64.

    Args:
        value: Точный результат операции (неограниченный int)
        operation: Имя операции для сообщения об ошибке

    Returns:
        value без изменений

    Raises:
        DecimalOverflowError: если value вне [INT64_MIN, INT64_MAX]
    """
    if not INT64_MIN <= value <= INT64_MAX:
        logger.debug("int64 overflow in %s", operation)
        raise DecimalOverflowError(f"int64 overflow in {operation}: {value} out of range")
    return value


def ensure_uint32(value: int, operation: str) -> int:
    """
    Проверка попадания результата в диапазон uint32.

    Raises:
        DecimalOverflowError: если value вне [0, UINT32_MAX]
    """
    if not 0 <= value <= UINT32_MAX:
        logger.debug("uint32 overflow in %s", operation)
        raise DecimalOverflowError(f"uint32 overflow in {operation}: {value} out of range")
    return value


# =============================================================================
# CHECKED INT64
# =============================================================================


def checked_add(a: int, b: int) -> int:
    """a + b в int64."""
    return ensure_int64(a + b, "add")


def checked_sub(a: int, b: int) -> int:
    """a - b в int64."""
    return ensure_int64(a - b, "sub")


def checked_mul(a: int, b: int) -> int:
    """a * b в int64."""
    return ensure_int64(a * b, "mul")


def checked_neg(a: int) -> int:
    """-a в int64 (-INT64_MIN переполняется)."""
    return ensure_int64(-a, "neg")


def checked_div(a: int, b: int) -> int:
    """
    Целочисленное деление с усечением к нулю.

    В отличие от // результат округляется к нулю, а не к -inf:
    -7 / 2 = -3 (а не -4).

    Args:
        a: Делимое
        b: Делитель

    Returns:
        trunc(a / b)

    Raises:
        DecimalDivisionByZero: если b == 0
        DecimalOverflowError: для INT64_MIN / -1

    Examples:
        >>> checked_div(7, 2)
        3
        >>> checked_div(-7, 2)
        -3
    """
    if b == 0:
        logger.debug("division by zero in div")
        raise DecimalDivisionByZero("attempt to divide by zero")

    quotient = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        quotient = -quotient
    return ensure_int64(quotient, "div")


def checked_rem(a: int, b: int) -> int:
    """
    Остаток от деления с усечением к нулю.

    Знак остатка совпадает со знаком делимого:
    a == checked_div(a, b) * b + checked_rem(a, b).

    Raises:
        DecimalDivisionByZero: если b == 0
        DecimalOverflowError: для INT64_MIN % -1 (как и для деления)

    Examples:
        >>> checked_rem(-7, 2)
        -1
        >>> checked_rem(7, -2)
        1
    """
    if b == 0:
        logger.debug("division by zero in rem")
        raise DecimalDivisionByZero("attempt to calculate the remainder with a divisor of zero")

    quotient = checked_div(a, b)
    return a - quotient * b


def checked_pow10(exponent: int) -> int:
    """
    10^exponent в int64.

    Степень проверяется до вычисления: exponent может достигать UINT32_MAX,
    и прямое 10 ** exponent было бы неприемлемо дорогим.

    Raises:
        ValueError: если exponent < 0
        DecimalOverflowError: если exponent > MAX_POW10_EXPONENT
    """
    if exponent < 0:
        raise ValueError(f"exponent must be non-negative, got {exponent}")
    if exponent > MAX_POW10_EXPONENT:
        logger.debug("int64 overflow in pow10")
        raise DecimalOverflowError(f"int64 overflow in pow10: 10^{exponent} out of range")
    return 10**exponent


# =============================================================================
# CHECKED UINT32
# =============================================================================


def checked_scale_add(a: int, b: int) -> int:
    """Сумма двух scale в uint32."""
    return ensure_uint32(a + b, "scale add")
