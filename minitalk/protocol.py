"""Bit-level encoding of bytes as sequences of one-bit signals.

Each byte travels as eight bits, least significant bit first. A one is
carried by SIGUSR1 and a zero by SIGUSR2.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional

BITS_PER_BYTE = 8


def _check_bit(bit: int) -> int:
    if bit not in (0, 1):
        raise ValueError(f"a bit must be 0 or 1, got {bit!r}")
    return int(bit)


def byte_to_bits(byte: int) -> list[int]:
    """Return the eight bits of byte, least significant first."""
    if not 0 <= byte <= 0xFF:
        raise ValueError(f"byte out of range: {byte}")
    return [(byte >> shift) & 1 for shift in range(BITS_PER_BYTE)]


def encode(data: bytes | str) -> Iterator[int]:
    """Yield the bits of data byte by byte; text is sent as UTF-8."""
    if isinstance(data, str):
        data = data.encode("utf-8")
    for byte in data:
        yield from byte_to_bits(byte)


@dataclass
class BitDecoder:
    """Assembles incoming bits, least significant first, into bytes."""

    value: int = 0
    count: int = 0

    def feed(self, bit: int) -> Optional[int]:
        """Take one bit; return the finished byte after every eighth bit."""
        if _check_bit(bit):
            self.value |= 1 << self.count
        self.count += 1
        if self.count < BITS_PER_BYTE:
            return None
        byte = self.value
        self.reset()
        return byte

    def reset(self) -> None:
        """Discard any partly assembled byte."""
        self.value = 0
        self.count = 0


def decode(bits: Iterable[int]) -> bytes:
    """Assemble bits into bytes; an incomplete trailing byte is left out."""
    decoder = BitDecoder()
    out = bytearray()
    for bit in bits:
        byte = decoder.feed(bit)
        if byte is not None:
            out.append(byte)
    return bytes(out)