import io

import pytest

from pushswap.libft.output import putchar_fd, putendl_fd, putnbr_fd, putstr_fd


def test_putchar_fd_writes_character():
    out = io.StringIO()
    putchar_fd("z", out)
    assert out.getvalue() == "z"


def test_putchar_fd_int_is_truncated_to_a_byte():
    out = io.StringIO()
    putchar_fd(ord("A") + 256, out)
    assert out.getvalue() == "A"


def test_putchar_fd_rejects_long_string():
    with pytest.raises(ValueError):
        putchar_fd("ab", io.StringIO())


def test_putchar_fd_rejects_other_types():
    with pytest.raises(TypeError):
        putchar_fd(1.5, io.StringIO())


def test_putstr_fd_writes_text_unchanged():
    out = io.StringIO()
    putstr_fd("hello world", out)
    putstr_fd("", out)
    assert out.getvalue() == "hello world"


def test_putendl_fd_appends_newline():
    out = io.StringIO()
    putendl_fd("line", out)
    putendl_fd("", out)
    assert out.getvalue() == "line\n\n"


@pytest.mark.parametrize("n", [0, 7, -42, 2147483647, -2147483648])
def test_putnbr_fd_round_trips(n):
    out = io.StringIO()
    putnbr_fd(n, out)
    assert int(out.getvalue()) == n


def test_putnbr_fd_negative_has_single_sign():
    out = io.StringIO()
    putnbr_fd(-2147483648, out)
    assert out.getvalue() == "-2147483648"