"""String building: slicing, joining, trimming, splitting and mapping."""

from __future__ import annotations

from typing import Callable, List, MutableSequence, Optional


def substr(s: str, start: int, length: int) -> str:
    """Up to ``length`` characters of ``s`` from ``start``; empty when ``start`` is past the end."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(s):
        return ""
    return s[start:start + length]


def strjoin(s1: Optional[str], s2: Optional[str]) -> Optional[str]:
    """Concatenate two strings; a missing one is treated as absent, both missing gives None."""
    if s1 is None and s2 is None:
        return None
    if s1 is None:
        return s2
    if s2 is None:
        return s1
    return s1 + s2


def strtrim(s: Optional[str], charset: Optional[str]) -> Optional[str]:
    """Strip characters of ``charset`` from both ends of ``s``.

    When the leading trim reaches the last character of ``s``, the result
    is empty, even if that character is not in ``charset``.
    """
    if s is None or charset is None:
        return None
    start = 0
    while start < len(s) and s[start] in charset:
        start += 1
    end = len(s) - 1
    if start >= end:
        return ""
    while end > start and s[end] in charset:
        end -= 1
    return s[start:end + 1]


def split(s: str, sep: str) -> List[str]:
    """Split ``s`` on the single character ``sep``, dropping empty pieces."""
    if len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    return [piece for piece in s.split(sep) if piece]


def itoa(n: int) -> str:
    """Decimal text of ``n``."""
    return str(n)


def strmapi(s: Optional[str], f: Optional[Callable[[int, str], str]]) -> Optional[str]:
    """New string of ``f(index, char)`` for every character of ``s``."""
    if s is None or f is None:
        return None
    return "".join(f(index, ch) for index, ch in enumerate(s))


def striteri(chars: MutableSequence, f: Callable[[int, object], object]) -> None:
    """Call ``f(index, char)`` on every element; a non-None result replaces it in place."""
    for index, ch in enumerate(chars):
        result = f(index, ch)
        if result is not None:
            chars[index] = result