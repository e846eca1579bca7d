"""
Domain models для fixed-decimal

Decimal, его парсер и форматтер.
"""

from fixed_decimal.domain.fixed_point import Decimal, parse_decimal
from fixed_decimal.domain.formatting import render_decimal
from fixed_decimal.domain.parsing import ParseError, ParseErrorKind, parse_decimal_literal

__all__ = [
    # Model
    "Decimal",
    # Parsing
    "ParseError",
    "ParseErrorKind",
    "parse_decimal",
    "parse_decimal_literal",
    # Formatting
    "render_decimal",
]
