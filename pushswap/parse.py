"""Turning command-line arguments into the list of integers to sort."""

from __future__ import annotations

from typing import Iterable, List

from pushswap.libft.chars import isdigit
from pushswap.libft.transform import split

INT_MAX = 2147483647
INT_MIN = -2147483648

_SPACES = "\t\n\v\f\r "


class ParseError(ValueError):
    """The arguments are not a list of distinct 32-bit integers."""


def atol(text: str) -> int:
    """Parse a leading decimal integer: whitespace, one optional sign, then digits."""
    rest = text.lstrip(_SPACES)
    sign = 1
    if rest[:1] in ("+", "-"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    value = 0
    for ch in rest:
        if not isdigit(ch):
            break
        value = value * 10 + (ord(ch) - ord("0"))
    return sign * value


def is_valid_number(token: str) -> bool:
    """True when ``token`` is an optionally signed decimal within the 32-bit range."""
    if not token:
        return False
    digits = token[1:] if token[0] in "+-" else token
    if not digits or not all(isdigit(ch) for ch in digits):
        return False
    return INT_MIN <= atol(token) <= INT_MAX


def _tokens(args: Iterable[str]) -> Iterable[str]:
    for arg in args:
        yield from split(arg, " ")


def count_args(args: Iterable[str]) -> int:
    """Number of space-separated numbers across ``args``.

    Raises ParseError if any of them is not a valid number.
    """
    count = 0
    for token in _tokens(args):
        if not is_valid_number(token):
            raise ParseError(f"invalid number: {token!r}")
        count += 1
    return count


def parse_args(args: Iterable[str]) -> List[int]:
    """The numbers in ``args``, in order; raises ParseError on a bad or repeated one."""
    args = list(args)
    count_args(args)
    values: List[int] = []
    seen = set()
    for token in _tokens(args):
        value = atol(token)
        if value in seen:
            raise ParseError(f"duplicate number: {value}")
        seen.add(value)
        values.append(value)
    return values