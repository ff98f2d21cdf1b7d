"""String helpers: search, compare, bounded copy, slicing, trimming and splitting.

Positions are returned as indices into the string, and ``None`` stands for
"not found". A search for the NUL character finds the position just past
the end of the string, where a terminated string keeps its terminator.
"""

from __future__ import annotations

import operator
from typing import Callable, List, MutableSequence, Optional, Tuple, Union

CharLike = Union[int, str]

_NUL = "\0"


def _char(c: CharLike) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(operator.index(c) & 0xFF)


def _code_at(s: str, index: int) -> int:
    return ord(s[index]) if index < len(s) else 0


def _check_non_negative(**values: int) -> None:
    for name, value in values.items():
        if value < 0:
            raise ValueError(f"{name} must not be negative, got {value}")


def strlen(s: str) -> int:
    """Return the number of characters in ``s``."""
    return len(s)


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Return the index of the first ``c`` in ``s``, or None.

    Searching for NUL yields ``len(s)`` when ``s`` holds no NUL itself.
    """
    ch = _char(c)
    index = s.find(ch)
    if index >= 0:
        return index
    return len(s) if ch == _NUL else None


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Return the index of the last ``c`` in ``s``, or None.

    Searching for NUL yields ``len(s)``.
    """
    ch = _char(c)
    if ch == _NUL:
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters of two strings.

    Returns the difference of the first differing character codes, with the
    end of a string counting as code 0, or 0 when the compared parts match.
    """
    _check_non_negative(n=n)
    for index in range(n):
        a = _code_at(s1, index)
        b = _code_at(s2, index)
        if a != b or a == 0:
            return a - b
    return 0


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Find ``needle`` within the first ``length`` characters of ``haystack``.

    Returns the start index of the first match that ends within the bound,
    0 for an empty needle, or None.
    """
    _check_non_negative(length=length)
    if not needle:
        return 0
    width = len(needle)
    last_start = min(len(haystack) - 1, length - width)
    for start in range(last_start + 1):
        if strncmp(haystack[start:], needle, width) == 0:
            return start
    return None


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters, terminator included.

    Returns the text that fits (at most ``size - 1`` characters) and the
    full length of ``src``, which exceeds the copy when it was truncated.
    """
    _check_non_negative(size=size)
    return src[:max(size - 1, 0)], len(src)


def strlcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters.

    Returns the resulting text and the length it would have had without
    truncation: ``len(src) + min(size, len(dst))``.
    """
    _check_non_negative(size=size)
    dlen = len(dst)
    if size <= dlen:
        return dst, len(src) + size
    return dst + src[:size - dlen - 1], len(src) + dlen


def substr(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` starting at ``start``.

    A start past the end yields an empty string.
    """
    _check_non_negative(start=start, length=length)
    return s[start:start + length]


def strjoin(s1: str, s2: str) -> str:
    """Return the concatenation of ``s1`` and ``s2``."""
    return s1 + s2


def strtrim(s: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``s``."""
    if not charset:
        return s
    return s.strip(charset)


def split(s: str, sep: CharLike) -> List[str]:
    """Split ``s`` on the character ``sep``, dropping empty pieces."""
    ch = _char(sep)
    return [piece for piece in s.split(ch) if piece]


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` applied to each character."""
    return "".join(func(index, ch) for index, ch in enumerate(s))


def striteri(buffer: MutableSequence, func: Callable[[int, object], object]) -> None:
    """Replace each item of ``buffer`` in place with ``func(index, item)``."""
    for index, item in enumerate(list(buffer)):
        buffer[index] = func(index, item)