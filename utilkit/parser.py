"""
Numeric parser for utilkit.

Converts text to a signed integer the way C's stoi does: leading whitespace
is skipped, an optional sign and a run of decimal digits are consumed, and the
caller is told whether the whole input was used.
"""

import logging
import re

from .context import current_bits, int_bounds
from .result import (
    INVALID_ARGUMENT,
    NOT_ALL_CHARACTERS_USED,
    OUT_OF_RANGE,
    ParseResult,
)

logger = logging.getLogger(__name__)

# C isspace() set, then sign, then ASCII digits only
_LEADING_INT = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")


def match_prefix(text: str) -> tuple[str, int] | None:
    """
    Find the longest leading integer in ``text``.

    Returns:
        (token, consumed) where token is the signed digit run and consumed is
        the number of characters used, or None if the text has no leading
        integer.
    """
    match = _LEADING_INT.match(text)
    if match is None:
        return None
    return match.group(1), match.end()


def to_bounded_int(token: str, lo: int, hi: int) -> int | None:
    """Convert a signed digit run, or return None if it falls outside [lo, hi]."""
    digits = token.lstrip("+-").lstrip("0")
    # A d-digit number is at least 8 ** (d - 1); int() never sees more digits
    # than the bounds allow
    if 3 * (len(digits) - 1) >= max(-lo, hi).bit_length():
        return None
    value = int(digits or "0")
    if token.startswith("-"):
        value = -value
    return value if lo <= value <= hi else None


def parse_number(text: str) -> ParseResult:
    """
    Parse a base-10 signed integer.

    The whole input must be consumed; a valid prefix followed by anything
    else is a failure, not the prefix value.

    Args:
        text: Text to parse

    Returns:
        ParseResult with the value, or with one of the errors
        "Invalid argument", "Out of range",
        "Not all characters were used in conversion".

    Examples:
        parse_number("42")       # ParseResult(value=42, error='')
        parse_number("  -7")     # ParseResult(value=-7, error='')
        parse_number("123abc")   # Not all characters were used in conversion
        parse_number("abc")      # Invalid argument
    """
    matched = match_prefix(text)
    if matched is None:
        logger.debug("No leading integer in %r", text)
        return ParseResult.fail(INVALID_ARGUMENT)

    token, consumed = matched
    value = to_bounded_int(token, *int_bounds(current_bits()))
    if value is None:
        logger.debug("%r does not fit in %d bits", text, current_bits())
        return ParseResult.fail(OUT_OF_RANGE)

    if consumed != len(text):
        logger.debug(
            "Only %d of %d characters of %r converted", consumed, len(text), text
        )
        return ParseResult.fail(NOT_ALL_CHARACTERS_USED)

    return ParseResult.ok(value)
