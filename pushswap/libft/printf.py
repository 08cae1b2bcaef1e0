"""A small formatted-output routine with the conversions c, s, p, d, i, u, x, X and %.

Every function writes to ``stream`` (standard output by default) and
returns the number of characters it wrote.
"""

from __future__ import annotations

import sys
from typing import Iterator, Optional, TextIO

LOWER_HEX = "0123456789abcdef"
UPPER_HEX = "0123456789ABCDEF"

_UINT_MASK = 0xFFFFFFFF
_ULONG_MASK = 0xFFFFFFFFFFFFFFFF


def _resolve(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def _emit(text: str, stream: Optional[TextIO]) -> int:
    _resolve(stream).write(text)
    return len(text)


def _to_int32(n: int) -> int:
    return (n + 2**31) % 2**32 - 2**31


def putchar(c, stream: Optional[TextIO] = None) -> int:
    """Write one character; an int is truncated to a byte first."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return _emit(c, stream)
    return _emit(chr(int(c) & 0xFF), stream)


def putstr(s: Optional[str], stream: Optional[TextIO] = None) -> int:
    """Write ``s``, or ``(null)`` when it is None."""
    return _emit("(null)" if s is None else s, stream)


def puthex(n: int, base: str, stream: Optional[TextIO] = None) -> int:
    """Write ``n`` as an unsigned 64-bit value in base 16 using the digits in ``base``."""
    if len(base) != 16:
        raise ValueError(f"base must hold 16 digits, got {len(base)}")
    n &= _ULONG_MASK
    digits = []
    while True:
        n, rest = divmod(n, 16)
        digits.append(base[rest])
        if not n:
            break
    return _emit("".join(reversed(digits)), stream)


def putptr(p, stream: Optional[TextIO] = None) -> int:
    """Write an address as ``0x`` and lower-case hex, or ``(nil)`` for a null one.

    An int is taken as the address itself; any other object uses its identity.
    """
    if p is None or p == 0:
        return _emit("(nil)", stream)
    address = p if isinstance(p, int) and not isinstance(p, bool) else id(p)
    return putstr("0x", stream) + puthex(address, LOWER_HEX, stream)


def putnbr(n: int, stream: Optional[TextIO] = None) -> int:
    """Write the signed decimal text of ``n``."""
    return _emit(str(n), stream)


def putuint(n: int, stream: Optional[TextIO] = None) -> int:
    """Write ``n`` as an unsigned 32-bit decimal value."""
    return _emit(str(n & _UINT_MASK), stream)


def _convert(spec: str, values: Iterator, stream: Optional[TextIO]) -> int:
    if spec == "%":
        return putchar("%", stream)
    if spec not in "cspdiuxX":
        return -1
    try:
        value = next(values)
    except StopIteration:
        raise TypeError(f"not enough arguments for conversion %{spec}") from None
    if spec == "c":
        return putchar(value, stream)
    if spec == "s":
        return putstr(value, stream)
    if spec == "p":
        return putptr(value, stream)
    if spec in "di":
        return putnbr(_to_int32(value), stream)
    if spec == "u":
        return putuint(value, stream)
    return puthex(value & _UINT_MASK, LOWER_HEX if spec == "x" else UPPER_HEX, stream)


def printf(fmt: str, *args, stream: Optional[TextIO] = None) -> int:
    """Write ``fmt`` with its conversions filled from ``args``.

    An unknown conversion writes nothing and counts as -1 in the total;
    a lone ``%`` at the end is written as is.
    """
    values = iter(args)
    chars = iter(fmt)
    total = 0
    for ch in chars:
        if ch != "%":
            total += putchar(ch, stream)
            continue
        spec = next(chars, None)
        if spec is None:
            total += putchar("%", stream)
            break
        total += _convert(spec, values, stream)
    return total