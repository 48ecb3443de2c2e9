"""Searching, slicing, joining and transforming text."""

from __future__ import annotations

from typing import Callable, MutableSequence, Optional

_NUL = "\0"


def _char(c: int | str) -> str:
    """Return c as a one-character string."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, int):
        return chr(c)
    raise TypeError(f"expected a character or an int, got {type(c).__name__}")


def _non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def split(text: str, sep: int | str) -> list[str]:
    """Split text on sep, dropping the empty words that runs of sep produce.

    A NUL separator never matches inside the text, so the whole text is
    one word (or none when the text is empty).
    """
    sep = _char(sep)
    return [word for word in text.split(sep) if word]


def strchr(text: str, c: int | str) -> Optional[int]:
    """Return the index of the first c in text, or None.

    Searching for NUL finds the end of the text.
    """
    c = _char(c)
    if c == _NUL:
        return len(text)
    index = text.find(c)
    return None if index < 0 else index


def strrchr(text: str, c: int | str) -> Optional[int]:
    """Return the index of the last c in text, or None.

    Searching for NUL finds the end of the text.
    """
    c = _char(c)
    if c == _NUL:
        return len(text)
    index = text.rfind(c)
    return None if index < 0 else index


def strnstr(big: str, little: str, n: int) -> Optional[int]:
    """Return where little first occurs wholly within the first n chars of big.

    An empty little is found at index 0; otherwise None when absent.
    """
    _non_negative("n", n)
    if not little:
        return 0
    if n == 0:
        return None
    index = big[:n].find(little)
    return None if index < 0 else index


def strncmp(a: str, b: str, n: int) -> int:
    """Compare at most n characters of a and b.

    Returns 0 when they agree, otherwise the code difference of the first
    differing pair, the end of a text counting as code 0.
    """
    _non_negative("n", n)
    for pos in range(n):
        left = ord(a[pos]) if pos < len(a) else 0
        right = ord(b[pos]) if pos < len(b) else 0
        if left != right or left == 0:
            return left - right
    return 0


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy src into a buffer of size chars, keeping room for the terminator.

    Returns the copied text and the full length of src, so truncation
    happened when the length is not less than size.
    """
    _non_negative("size", size)
    if size == 0:
        return "", len(src)
    return src[:size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append src to dst within a buffer of size chars, keeping a terminator.

    Returns the resulting text and the length the full concatenation would
    have. When dst already fills the buffer it is returned unchanged along
    with size plus the length of src.
    """
    _non_negative("size", size)
    if size == 0:
        return dst, len(src)
    if len(dst) >= size:
        return dst, size + len(src)
    room = size - 1 - len(dst)
    return dst + src[:room], len(dst) + len(src)


def substr(text: str, start: int, length: int) -> str:
    """Return at most length characters of text starting at start."""
    _non_negative("start", start)
    _non_negative("length", length)
    if start > len(text):
        return ""
    return text[start:start + length]


def strjoin(a: Optional[str], b: Optional[str]) -> Optional[str]:
    """Concatenate a and b; a missing side yields the other, both missing None."""
    if a is None and b is None:
        return None
    if a is None:
        return b
    if b is None:
        return a
    return a + b


def strtrim(text: Optional[str], charset: Optional[str]) -> Optional[str]:
    """Strip characters of charset from both ends of text.

    A missing charset returns the text unchanged; a missing text gives None.
    """
    if text is None:
        return None
    if not charset:
        return text
    return text.strip(charset)


def strmapi(text: Optional[str], f: Callable[[int, str], str]) -> Optional[str]:
    """Build a new text from f(index, char) for every character of text."""
    if text is None:
        return None
    return "".join(f(index, char) for index, char in enumerate(text))


def striteri(
    chars: Optional[MutableSequence[str]],
    f: Optional[Callable[[int, str], Optional[str]]],
) -> None:
    """Apply f(index, char) to every character of chars in place.

    A returned character replaces the one passed in; None keeps it.
    """
    if chars is None or f is None:
        return
    for index, char in enumerate(chars):
        replacement = f(index, char)
        if replacement is not None:
            chars[index] = replacement