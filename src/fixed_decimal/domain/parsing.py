"""
Parsing: разбор десятичного литерала

Однопроходный конечный автомат без возвратов:
    START → (цифра | "-") → INTEGER → "." → FRACTION

- "-" допускается только первым символом и лишь выставляет флаг знака
- "." переводит в FRACTION (повторная "." ничего не меняет)
- каждая цифра дописывается к magnitude, в FRACTION увеличивает scale
- любой другой символ → ParseError(INVALID_DIGIT)

ИЗВЕСТНАЯ ОСОБЕННОСТЬ:
    Вырожденные литералы "-", ".", "-." принимаются как 0 со scale 0,
    а "5." как 5 со scale 0. Это допустимо: парсер не валидирует
    бизнес-ввод, а лишь читает результат render_decimal.

Разбор никогда не бросает ничего, кроме ParseError.
"""

import logging
from enum import Enum
from string import digits
from typing import Final, Optional

from fixed_decimal.math.checked_int import INT64_MAX, INT64_MIN, UINT32_MAX

logger = logging.getLogger(__name__)

DIGITS: Final[frozenset[str]] = frozenset(digits)
MINUS: Final[str] = "-"
PERIOD: Final[str] = "."

# Наибольшая допустимая magnitude до применения знака (|INT64_MIN|)
MAX_MAGNITUDE: Final[int] = -INT64_MIN


# =============================================================================
# ERRORS
# =============================================================================


class ParseErrorKind(str, Enum):
    """Причина отказа в разборе"""

    EMPTY = "empty"
    INVALID_DIGIT = "invalid_digit"
    OVERFLOW = "overflow"


_DESCRIPTIONS: Final[dict[ParseErrorKind, str]] = {
    ParseErrorKind.EMPTY: "cannot parse decimal from empty string",
    ParseErrorKind.INVALID_DIGIT: "invalid digit found in string",
    ParseErrorKind.OVERFLOW: "number too large to fit in decimal",
}


class ParseError(ValueError):
    """
    Единственная восстанавливаемая ошибка библиотеки.

    Вызывающий код ветвится по kind; description это фиксированный
    человекочитаемый текст для каждого kind.
    """

    def __init__(self, kind: ParseErrorKind, position: Optional[int] = None) -> None:
        self.kind = kind
        self.position = position
        super().__init__(self.description)

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self.kind]


# =============================================================================
# STATE MACHINE
# =============================================================================


class _ScanState(Enum):
    START = "start"
    INTEGER = "integer"
    FRACTION = "fraction"


def parse_decimal_literal(text: str) -> tuple[int, int]:
    """
    Разбор литерала в пару (unscaled, scale).

    Args:
        text: Строка вида "-12.50"

    Returns:
        (unscaled, scale)

    Raises:
        ParseError: EMPTY для пустой строки, INVALID_DIGIT для постороннего
            символа, OVERFLOW если magnitude не помещается в int64 или
            scale не помещается в uint32

    Examples:
        >>> parse_decimal_literal("1.00")
        (100, 2)
        >>> parse_decimal_literal("-1.25")
        (-125, 2)
        >>> parse_decimal_literal("-.")
        (0, 0)
    """
    if not text:
        logger.debug("rejecting empty decimal literal")
        raise ParseError(ParseErrorKind.EMPTY)

    state = _ScanState.START
    negative = False
    magnitude = 0
    scale = 0

    for position, char in enumerate(text):
        if char in DIGITS:
            magnitude = magnitude * 10 + ord(char) - ord("0")
            if state is _ScanState.FRACTION:
                scale += 1
            else:
                state = _ScanState.INTEGER
            if magnitude > MAX_MAGNITUDE or scale > UINT32_MAX:
                logger.debug("decimal literal overflows at position %d", position)
                raise ParseError(ParseErrorKind.OVERFLOW, position)
        elif char == PERIOD:
            state = _ScanState.FRACTION
        elif char == MINUS and state is _ScanState.START:
            negative = True
            state = _ScanState.INTEGER
        else:
            logger.debug("invalid character %r at position %d", char, position)
            raise ParseError(ParseErrorKind.INVALID_DIGIT, position)

    unscaled = -magnitude if negative else magnitude
    if not INT64_MIN <= unscaled <= INT64_MAX:
        raise ParseError(ParseErrorKind.OVERFLOW)
    return unscaled, scale
