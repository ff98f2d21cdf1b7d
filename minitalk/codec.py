"""Turning messages into a stream of bits and bits back into bytes.

Each byte is sent as eight bits, most significant first.
"""

from __future__ import annotations

from typing import Iterator, Optional, Union

BITS_PER_BYTE = 8


def encode_bits(message: Union[str, bytes, bytearray]) -> Iterator[int]:
    """Yield the bits of ``message``, most significant bit of each byte first.

    A str is encoded as UTF-8.
    """
    data = message.encode("utf-8") if isinstance(message, str) else bytes(message)
    for byte in data:
        for shift in range(BITS_PER_BYTE - 1, -1, -1):
            yield (byte >> shift) & 1


class BitDecoder:
    """Collects bits and hands back each byte once eight have arrived."""

    def __init__(self) -> None:
        self._value = 0
        self._count = 0

    def feed(self, bit: int) -> Optional[int]:
        """Add one bit; return the completed byte, or None while one is pending."""
        if bit not in (0, 1):
            raise ValueError(f"a bit must be 0 or 1, got {bit!r}")
        self._value = (self._value << 1) | int(bit)
        self._count += 1
        if self._count < BITS_PER_BYTE:
            return None
        byte = self._value
        self._value = 0
        self._count = 0
        return byte