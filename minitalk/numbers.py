"""Conversions between decimal text and 32-bit signed integers."""

from __future__ import annotations

import operator
import re

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_NUMBER = re.compile(r"[\t\n\v\f\r ]*([+-]?)([0-9]*)")


def _wrap_int32(value: int) -> int:
    return (value - INT_MIN) % 2**32 + INT_MIN


def atoi(text: str) -> int:
    """Parse a leading decimal integer from ``text``.

    Leading whitespace is skipped and a single optional sign is accepted.
    Parsing stops at the first non-digit; text with no digits yields 0.
    The result wraps around to the 32-bit signed range.
    """
    match = _NUMBER.match(text)
    sign, digits = match.group(1), match.group(2)
    value = int(digits) if digits else 0
    if sign == "-":
        value = -value
    return _wrap_int32(value)


def itoa(n: int) -> str:
    """Return the decimal text of a 32-bit signed integer."""
    value = operator.index(n)
    if not INT_MIN <= value <= INT_MAX:
        raise OverflowError(f"{value} does not fit in a 32-bit signed integer")
    return str(value)