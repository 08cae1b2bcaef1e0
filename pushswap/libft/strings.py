"""C-style string routines on Python strings and byte buffers.

Searches return an index, or None where nothing is found.
"""

from __future__ import annotations

from itertools import islice, zip_longest
from typing import Optional, Union

_WHITESPACE = " \t\n\v\f\r"
_INT_MIN = -(2**31)
_INT_RANGE = 2**32

Char = Union[str, int]
Text = Union[str, bytes, bytearray]


def _as_bytes(src: Union[str, bytes, bytearray]) -> bytes:
    if isinstance(src, str):
        return src.encode("utf-8")
    return bytes(src)


def _as_char(c: Char) -> str:
    """Turn a one-character string or an int (truncated to a byte) into a character."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(c & 0xFF)


def _terminated_length(buf: bytearray, limit: int) -> int:
    """Length of the NUL-terminated string in ``buf``, scanning at most ``limit`` bytes."""
    index = buf.find(0, 0, limit)
    return limit if index < 0 else index


def _check_room(dst: bytearray, size: int) -> None:
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    if size > len(dst):
        raise ValueError(f"size {size} exceeds buffer length {len(dst)}")


def strlen(s: Text) -> int:
    """Number of characters in ``s``."""
    return len(s)


def strlcpy(dst: bytearray, src: Union[str, bytes, bytearray], size: int) -> int:
    """Copy ``src`` into ``dst`` as a NUL-terminated string of at most ``size`` bytes.

    Returns the length of ``src``; a result of ``size`` or more means truncation.
    """
    _check_room(dst, size)
    data = _as_bytes(src)
    if size > 0:
        count = min(len(data), size - 1)
        dst[:count] = data[:count]
        dst[count] = 0
    return len(data)


def strlcat(dst: bytearray, src: Union[str, bytes, bytearray], size: int) -> int:
    """Append ``src`` to the NUL-terminated string in ``dst``, within ``size`` bytes.

    Returns the length the full concatenation would have had.
    """
    _check_room(dst, size)
    data = _as_bytes(src)
    dst_len = _terminated_length(dst, size)
    if size <= dst_len:
        return size + len(data)
    count = min(len(data), size - 1 - dst_len)
    dst[dst_len:dst_len + count] = data[:count]
    dst[dst_len + count] = 0
    return dst_len + len(data)


def strchr(s: str, c: Char) -> Optional[int]:
    """Index of the first ``c`` in ``s``; a NUL character finds the end of ``s``."""
    ch = _as_char(c)
    if ch == "\0":
        return len(s)
    index = s.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: Char) -> Optional[int]:
    """Index of the last ``c`` in ``s``; a NUL character finds the end of ``s``."""
    ch = _as_char(c)
    if ch == "\0":
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters; the result is the difference of the first mismatch."""
    for a, b in islice(zip_longest(s1, s2, fillvalue="\0"), max(n, 0)):
        if a != b:
            return ord(a) - ord(b)
    return 0


def strnstr(big: str, little: str, length: int) -> Optional[int]:
    """Index of ``little`` within the first ``length`` characters of ``big``, or None."""
    if not little:
        return 0
    index = big[:max(length, 0)].find(little)
    return None if index < 0 else index


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way C ``atoi`` does.

    Leading whitespace and one sign are accepted; parsing stops at the first
    non-digit. The result wraps to a signed 32-bit integer.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("+", "-"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = []
    for ch in rest:
        if not "0" <= ch <= "9":
            break
        digits.append(ch)
    value = sign * int("".join(digits)) if digits else 0
    return (value - _INT_MIN) % _INT_RANGE + _INT_MIN


def strdup(s: Text) -> Text:
    """Return a copy of ``s``."""
    return s[:]