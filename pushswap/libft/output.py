"""Writing characters, strings and numbers to a text stream."""

from __future__ import annotations

from typing import TextIO, Union

Char = Union[str, int]


def _as_char(c: Char) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected a character or an int, got {type(c).__name__}")
    return chr(c & 0xFF)


def putchar_fd(c: Char, stream: TextIO) -> None:
    """Write one character; an int is truncated to a byte first."""
    stream.write(_as_char(c))


def putstr_fd(s: str, stream: TextIO) -> None:
    """Write ``s`` unchanged."""
    stream.write(s)


def putendl_fd(s: str, stream: TextIO) -> None:
    """Write ``s`` followed by a newline."""
    stream.write(s + "\n")


def putnbr_fd(n: int, stream: TextIO) -> None:
    """Write the decimal text of ``n``."""
    stream.write(str(n))