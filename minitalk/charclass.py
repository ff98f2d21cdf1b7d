"""ASCII character classification and case conversion.

Each function takes either an integer character code or a one-character
string. Codes outside the ASCII range are accepted and never match.
"""

from __future__ import annotations

import operator
from typing import Union

CharLike = Union[int, str]

_UPPER = range(ord("A"), ord("Z") + 1)
_LOWER = range(ord("a"), ord("z") + 1)
_DIGITS = range(ord("0"), ord("9") + 1)
_PRINTABLE = range(32, 127)
_CASE_OFFSET = ord("a") - ord("A")


def _code(c: CharLike) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return operator.index(c)


def is_alpha(c: CharLike) -> bool:
    """Return True for an ASCII letter."""
    code = _code(c)
    return code in _UPPER or code in _LOWER


def is_digit(c: CharLike) -> bool:
    """Return True for an ASCII decimal digit."""
    return _code(c) in _DIGITS


def is_alnum(c: CharLike) -> bool:
    """Return True for an ASCII letter or digit."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: CharLike) -> bool:
    """Return True for a code in the range 0..127."""
    return 0 <= _code(c) <= 127


def is_print(c: CharLike) -> bool:
    """Return True for a printable ASCII character, space included."""
    return _code(c) in _PRINTABLE


def to_lower(c: CharLike) -> CharLike:
    """Lower-case an ASCII upper-case letter; anything else is returned as is."""
    code = _code(c)
    if code in _UPPER:
        code += _CASE_OFFSET
    return chr(code) if isinstance(c, str) else code


def to_upper(c: CharLike) -> CharLike:
    """Upper-case an ASCII lower-case letter; anything else is returned as is."""
    code = _code(c)
    if code in _LOWER:
        code -= _CASE_OFFSET
    return chr(code) if isinstance(c, str) else code