import pytest

from pushswap.libft.strings import atoi
from pushswap.libft.transform import (
    itoa,
    split,
    striteri,
    strjoin,
    strmapi,
    strtrim,
    substr,
)


@pytest.mark.parametrize("s,start,length", [("hello", 1, 3), ("hello", 0, 100), ("hello", 4, 1), ("", 0, 0)])
def test_substr_within_bounds(s, start, length):
    result = substr(s, start, length)
    assert result == s[start:start + length]
    assert len(result) <= length


def test_substr_start_past_end():
    assert substr("abc", 3, 2) == ""
    assert substr("abc", 50, 2) == ""


def test_substr_negative_raises():
    with pytest.raises(ValueError):
        substr("abc", -1, 2)


def test_strjoin():
    assert strjoin("foo", "bar") == "foo" + "bar"
    assert strjoin(None, "bar") == "bar"
    assert strjoin("foo", None) == "foo"
    assert strjoin(None, None) is None


def test_strtrim_both_ends():
    assert strtrim("xxhixx", "x") == "hi"
    assert strtrim("  spaced out ", " ") == "spaced out"


def test_strtrim_all_removed_and_empty():
    assert strtrim("xxxx", "x") == ""
    assert strtrim("", "x") == ""


def test_strtrim_last_character_quirk():
    assert strtrim("xa", "x") == ""


def test_strtrim_none():
    assert strtrim(None, "x") is None
    assert strtrim("abc", None) is None


@pytest.mark.parametrize("s", ["  a b  c ", "word", "", "   ", "one  two"])
def test_split_on_space_matches_whitespace_split(s):
    assert split(s, " ") == s.split()


def test_split_pieces_never_empty_and_rejoin():
    s = ",,a,,bc,d,"
    pieces = split(s, ",")
    assert all(pieces)
    assert ",".join(pieces) == s.strip(",").replace(",,", ",")


def test_split_bad_separator():
    with pytest.raises(ValueError):
        split("a b", "ab")


@pytest.mark.parametrize("n", [0, 7, -7, 2147483647, -2147483648, 1000])
def test_itoa_round_trip(n):
    text = itoa(n)
    assert int(text) == n
    assert atoi(text) == n


def test_itoa_zero():
    assert itoa(0) == "0"


def test_strmapi():
    assert strmapi("hello", lambda i, c: c.upper()) == "hello".upper()
    assert strmapi("abc", lambda i, c: str(i)) == "".join(map(str, range(3)))
    assert strmapi(None, lambda i, c: c) is None
    assert strmapi("abc", None) is None


def test_striteri_in_place():
    chars = list("hello")
    assert striteri(chars, lambda i, c: c.upper() if i % 2 == 0 else None) is None
    assert "".join(chars) == "HeLlO"


def test_striteri_bytearray():
    data = bytearray(b"abc")
    striteri(data, lambda i, c: c - 32)
    assert data == bytearray(b"ABC")