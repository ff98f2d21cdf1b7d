"""A small printf supporting the %c %s %p %d %i %u %x %X and %% conversions."""

from __future__ import annotations

import operator
import sys
from typing import Any, Callable, Dict

_INT_MIN = -(2**31)
_UINT_MASK = 2**32 - 1
_POINTER_MASK = 2**64 - 1


def _signed32(value: Any) -> int:
    number = operator.index(value)
    return (number - _INT_MIN) % 2**32 + _INT_MIN


def _unsigned32(value: Any) -> int:
    return operator.index(value) & _UINT_MASK


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(operator.index(value) & 0xFF)


def _string(value: Any) -> str:
    return "(null)" if value is None else str(value)


def _pointer(value: Any) -> str:
    if value is None:
        address = 0
    elif isinstance(value, int):
        address = value & _POINTER_MASK
    else:
        address = id(value)
    return f"0x{address:x}"


_CONVERSIONS: Dict[str, Callable[[Any], str]] = {
    "c": _char,
    "s": _string,
    "p": _pointer,
    "d": lambda value: str(_signed32(value)),
    "i": lambda value: str(_signed32(value)),
    "u": lambda value: str(_unsigned32(value)),
    "x": lambda value: f"{_unsigned32(value):x}",
    "X": lambda value: f"{_unsigned32(value):X}",
}


def render(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with its conversions replaced by ``args``.

    An unknown conversion character is dropped without consuming an
    argument, and a lone ``%`` at the end of ``fmt`` is ignored.
    Raises TypeError when there are fewer arguments than conversions.
    """
    values = iter(args)
    chars = iter(fmt)
    pieces = []
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        if spec == "%":
            pieces.append("%")
            continue
        convert = _CONVERSIONS.get(spec)
        if convert is None:
            continue
        try:
            value = next(values)
        except StopIteration:
            raise TypeError("not enough arguments for format string") from None
        pieces.append(convert(value))
    return "".join(pieces)


def printf(fmt: str, *args: Any) -> int:
    """Write the rendered text to standard output and return its length."""
    text = render(fmt, *args)
    sys.stdout.write(text)
    sys.stdout.flush()
    return len(text)