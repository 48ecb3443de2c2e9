"""Writing characters, text and numbers to text streams."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from minitalk.chars import itoa


def _target(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(c: int | str, stream: Optional[TextIO] = None) -> None:
    """Write one character, given as a string or a code, to stream."""
    if isinstance(c, int):
        c = chr(c & 0xFF)
    elif not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    _target(stream).write(c)


def put_str(text: str, stream: Optional[TextIO] = None) -> None:
    """Write text to stream."""
    _target(stream).write(text)


def put_endl(text: str, stream: Optional[TextIO] = None) -> None:
    """Write text followed by a newline to stream."""
    out = _target(stream)
    out.write(text)
    out.write("\n")


def put_nbr(n: int, stream: Optional[TextIO] = None) -> None:
    """Write the decimal text of n to stream."""
    _target(stream).write(itoa(n))