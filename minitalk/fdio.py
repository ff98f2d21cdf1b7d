"""Writing characters, strings and numbers straight to file descriptors."""

from __future__ import annotations

import operator
import os
from typing import Union

from minitalk.numbers import itoa

CharLike = Union[int, str]


def _write_all(fd: int, data: bytes) -> None:
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]


def put_char_fd(c: CharLike, fd: int) -> None:
    """Write one character to ``fd``; an int is written as a single byte."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        data = c.encode("utf-8")
    else:
        data = bytes([operator.index(c) & 0xFF])
    _write_all(fd, data)


def put_str_fd(s: str, fd: int) -> None:
    """Write ``s`` to ``fd``."""
    _write_all(fd, s.encode("utf-8"))


def put_endl_fd(s: str, fd: int) -> None:
    """Write ``s`` followed by a newline to ``fd``."""
    _write_all(fd, s.encode("utf-8") + b"\n")


def put_nbr_fd(n: int, fd: int) -> None:
    """Write the decimal text of a 32-bit signed integer to ``fd``."""
    _write_all(fd, itoa(n).encode("ascii"))