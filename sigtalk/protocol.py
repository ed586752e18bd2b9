"""Bit-level wire protocol carried over the two user signals.

Every byte of a message is sent most significant bit first, one signal
per bit: SIGUSR1 stands for 0 and SIGUSR2 for 1.  A message ends with
one all-zero byte.
"""

from __future__ import annotations

import signal
from typing import Iterator, Optional, Union

__all__ = [
    "BITS_PER_BYTE",
    "TERMINATOR",
    "ZERO_SIGNAL",
    "ONE_SIGNAL",
    "encode_bits",
    "BitDecoder",
]

BITS_PER_BYTE = 8
TERMINATOR = 0
ZERO_SIGNAL = signal.SIGUSR1
ONE_SIGNAL = signal.SIGUSR2


def _as_bytes(message: Union[str, bytes, bytearray]) -> bytes:
    if isinstance(message, str):
        return message.encode("utf-8")
    if isinstance(message, (bytes, bytearray)):
        return bytes(message)
    raise TypeError("message must be str or bytes")


def encode_bits(message: Union[str, bytes, bytearray]) -> Iterator[int]:
    """Yield the bits of message, MSB first, followed by a zero byte."""
    for byte in _as_bytes(message) + bytes([TERMINATOR]):
        for shift in range(BITS_PER_BYTE - 1, -1, -1):
            yield (byte >> shift) & 1


class BitDecoder:
    """Collects bits into bytes, MSB first."""

    def __init__(self) -> None:
        self._value = 0
        self._count = 0

    @property
    def pending(self) -> int:
        """Number of bits received towards the current byte."""
        return self._count

    def feed(self, bit: int) -> Optional[int]:
        """Add one bit; return the byte once eight bits are in, else None."""
        if bit not in (0, 1):
            raise ValueError(f"bit must be 0 or 1, got {bit!r}")
        self._value = ((self._value << 1) | bit) & 0xFF
        self._count += 1
        if self._count < BITS_PER_BYTE:
            return None
        byte = self._value
        self._value = 0
        self._count = 0
        return byte