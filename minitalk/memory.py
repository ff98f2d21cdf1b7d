"""Byte-buffer helpers: fill, zero, allocate, copy, move, search and compare."""

from __future__ import annotations

from typing import Optional, Union

Bytes = Union[bytes, bytearray, memoryview]


def _check_length(length: int, *sizes: int) -> None:
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    for size in sizes:
        if length > size:
            raise ValueError(f"length {length} exceeds buffer size {size}")


def memset(buffer: bytearray, value: int, length: int) -> bytearray:
    """Fill the first ``length`` bytes of ``buffer`` with ``value`` (low 8 bits)."""
    _check_length(length, len(buffer))
    buffer[:length] = bytes([value & 0xFF]) * length
    return buffer


def bzero(buffer: bytearray, length: int) -> None:
    """Set the first ``length`` bytes of ``buffer`` to zero."""
    memset(buffer, 0, length)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def memcpy(dst: bytearray, src: Bytes, n: int) -> bytearray:
    """Copy the first ``n`` bytes of ``src`` to the start of ``dst``."""
    _check_length(n, len(dst), len(src))
    dst[:n] = bytes(src[:n])
    return dst


def memmove(buffer: bytearray, dst_offset: int, src_offset: int, n: int) -> bytearray:
    """Copy ``n`` bytes inside ``buffer`` from ``src_offset`` to ``dst_offset``.

    The regions may overlap; the result is as if the source were copied first.
    """
    if dst_offset < 0 or src_offset < 0:
        raise ValueError("offsets must not be negative")
    _check_length(n, len(buffer) - dst_offset, len(buffer) - src_offset)
    if dst_offset != src_offset:
        buffer[dst_offset:dst_offset + n] = bytes(buffer[src_offset:src_offset + n])
    return buffer


def memchr(data: Bytes, value: int, n: int) -> Optional[int]:
    """Return the index of the first byte equal to ``value`` within ``n`` bytes, or None."""
    _check_length(n, len(data))
    index = bytes(data[:n]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(a: Bytes, b: Bytes, n: int) -> int:
    """Compare the first ``n`` bytes of two buffers.

    Returns the difference of the first differing bytes, or 0 when equal.
    """
    if a is b:
        return 0
    _check_length(n, len(a), len(b))
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0