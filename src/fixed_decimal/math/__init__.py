"""
Core math modules для fixed-decimal

Целочисленные примитивы фиксированной ширины с гарантией отсутствия wraparound.
"""

from fixed_decimal.math.checked_int import (
    # Bounds
    INT64_MAX,
    INT64_MIN,
    MAX_POW10_EXPONENT,
    UINT32_MAX,
    # Exceptions
    DecimalArithmeticError,
    DecimalDivisionByZero,
    DecimalOverflowError,
    # Range checks
    ensure_int64,
    ensure_uint32,
    # Checked int64
    checked_add,
    checked_div,
    checked_mul,
    checked_neg,
    checked_pow10,
    checked_rem,
    checked_sub,
    # Checked uint32
    checked_scale_add,
)

__all__ = [
    # Checked Integers: Bounds
    "INT64_MAX",
    "INT64_MIN",
    "MAX_POW10_EXPONENT",
    "UINT32_MAX",
    # Checked Integers: Exceptions
    "DecimalArithmeticError",
    "DecimalDivisionByZero",
    "DecimalOverflowError",
    # Checked Integers: Range checks
    "ensure_int64",
    "ensure_uint32",
    # Checked Integers: int64
    "checked_add",
    "checked_div",
    "checked_mul",
    "checked_neg",
    "checked_pow10",
    "checked_rem",
    "checked_sub",
    # Checked Integers: uint32
    "checked_scale_add",
]
