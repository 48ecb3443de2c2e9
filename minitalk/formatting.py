"""printf-style formatting with the conversions c, s, d, i, u, x, X, p and %."""

from __future__ import annotations

import sys
from typing import Any, Iterator, Optional

_VALID_CONVERSIONS = frozenset("csidupxX%")
_UINT_MASK = 0xFFFFFFFF
_POINTER_MASK = 0xFFFFFFFFFFFFFFFF


def _as_int32(value: int) -> int:
    """Reduce an integer to the range of a signed 32-bit int."""
    value &= _UINT_MASK
    return value - (1 << 32) if value & 0x80000000 else value


def format_hex(num: int, upper: bool = False) -> str:
    """Return num, taken as an unsigned 32-bit value, in hexadecimal."""
    return format(num & _UINT_MASK, "X" if upper else "x")


def format_pointer(address: Optional[int]) -> str:
    """Return an address as 0x-prefixed lower-case hex, or "(nil)" for null."""
    if not address:
        return "(nil)"
    return "0x" + format(address & _POINTER_MASK, "x")


def _format_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(int(value) & 0xFF)


def _format_string_arg(value: Optional[str]) -> str:
    return "(null)" if value is None else str(value)


def _convert(conversion: str, args: Iterator[Any]) -> str:
    if conversion == "%":
        return "%"
    try:
        value = next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{conversion}") from None
    if conversion == "c":
        return _format_char(value)
    if conversion == "s":
        return _format_string_arg(value)
    if conversion in "di":
        return str(_as_int32(int(value)))
    if conversion == "u":
        return str(int(value) & _UINT_MASK)
    if conversion in "xX":
        return format_hex(int(value), conversion == "X")
    return format_pointer(value)


def format_string(fmt: str, *args: Any) -> str:
    """Expand the conversions in fmt with args and return the text.

    A percent sign followed by an unknown conversion character is dropped
    together with that character; a trailing lone percent sign is dropped.
    """
    pieces: list[str] = []
    values = iter(args)
    chars = iter(fmt)
    for char in chars:
        if char != "%":
            pieces.append(char)
            continue
        conversion = next(chars, None)
        if conversion is None:
            break
        if conversion in _VALID_CONVERSIONS:
            pieces.append(_convert(conversion, values))
    return "".join(pieces)


def printf(fmt: str, *args: Any) -> int:
    """Write the expansion of fmt to standard output; return its length."""
    text = format_string(fmt, *args)
    sys.stdout.write(text)
    sys.stdout.flush()
    return len(text)