"""Wire format: each byte is sent as eight signals, least significant bit first."""

from __future__ import annotations

import signal
from dataclasses import dataclass
from typing import Iterator, Optional, Union

ZERO_SIGNAL = signal.SIGUSR1
ONE_SIGNAL = signal.SIGUSR2

BITS_PER_BYTE = 8
_NEWLINE_MARKER = ord("\\")


def _as_bytes(message: Union[str, bytes, bytearray]) -> bytes:
    if isinstance(message, str):
        return message.encode("utf-8")
    if isinstance(message, (bytes, bytearray)):
        return bytes(message)
    raise TypeError(f"expected str or bytes, not {type(message).__name__}")


def encode_bits(message: Union[str, bytes, bytearray]) -> Iterator[int]:
    """Yield the bits of ``message``, byte by byte, least significant bit first.

    Text is encoded as UTF-8. Transmission ends at the first NUL byte.
    """
    data = _as_bytes(message)
    for byte in data.split(b"\0", 1)[0]:
        for shift in range(BITS_PER_BYTE):
            yield (byte >> shift) & 1


@dataclass
class BitDecoder:
    """Collects bits, least significant first, into whole bytes."""

    bit_count: int = 0
    value: int = 0

    def feed(self, bit: int) -> Optional[int]:
        """Take one bit; return the finished byte after every eighth, else None."""
        if bit not in (0, 1) or isinstance(bit, bool):
            raise ValueError(f"a bit must be 0 or 1, got {bit!r}")
        self.value |= bit << self.bit_count
        self.bit_count += 1
        if self.bit_count < BITS_PER_BYTE:
            return None
        finished = self.value
        self.reset()
        return finished

    def reset(self) -> None:
        """Drop any partly received byte."""
        self.bit_count = 0
        self.value = 0


def render_byte(value: int) -> bytes:
    """Return the output for one received byte; a backslash stands for a newline."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected an integer byte, not {type(value).__name__}")
    if not 0 <= value <= 0xFF:
        raise ValueError(f"byte value out of range: {value}")
    if value == _NEWLINE_MARKER:
        return b"\n"
    return bytes((value,))