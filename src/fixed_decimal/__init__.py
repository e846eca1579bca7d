"""
Exact fixed-point decimal arithmetic.

Decimal хранит значение как целое unscaled (int64) и scale (uint32):
представляемое значение = unscaled / 10^scale. Без ошибок двоичной
плавающей точки, для денежных величин.
"""

from fixed_decimal.contracts import (
    DecimalContractValidator,
    decimal_from_payload,
    decimal_to_payload,
    validate_decimal_payload,
)
from fixed_decimal.domain import (
    Decimal,
    ParseError,
    ParseErrorKind,
    parse_decimal,
    render_decimal,
)
from fixed_decimal.math import (
    INT64_MAX,
    INT64_MIN,
    UINT32_MAX,
    DecimalArithmeticError,
    DecimalDivisionByZero,
    DecimalOverflowError,
)

__all__ = [
    "Decimal",
    "ParseError",
    "ParseErrorKind",
    "parse_decimal",
    "render_decimal",
    "DecimalArithmeticError",
    "DecimalDivisionByZero",
    "DecimalOverflowError",
    "INT64_MAX",
    "INT64_MIN",
    "UINT32_MAX",
    "DecimalContractValidator",
    "decimal_from_payload",
    "decimal_to_payload",
    "validate_decimal_payload",
]
