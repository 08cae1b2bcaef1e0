import random

import pytest

from pushswap.cli import main, solve
from pushswap.parse import ParseError
from pushswap.stacks import Stacks


def test_solve_three_reversed():
    assert solve(["3", "2", "1"]) == ["sa", "rra"]


def test_solve_sorted_input_needs_no_moves():
    assert solve(["1 2 3"]) == []


@pytest.mark.parametrize(
    "args",
    [["1", "1"], ["abc"], [""], ["2147483648"], ["1", "-"], ["4 2 4"]],
)
def test_solve_rejects_bad_input(args):
    with pytest.raises(ParseError):
        solve(args)


def test_main_without_arguments_prints_nothing(capsys):
    assert main([]) == 0
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == ""


def test_main_prints_moves(capsys):
    assert main(["2 1 3"]) == 0
    captured = capsys.readouterr()
    assert captured.out == "sa\n"
    assert captured.err == ""


@pytest.mark.parametrize("args", [["1", "1"], ["x"], ["+"], ["1 2", "2"]])
def test_main_reports_error(capsys, args):
    assert main(args) == 1
    captured = capsys.readouterr()
    assert captured.err == "Error\n"
    assert captured.out == ""


def test_main_output_matches_solve(capsys):
    args = ["5", "4 3", "2", "1", "9", "-7"]
    assert main(args) == 0
    out = capsys.readouterr().out
    assert out.splitlines() == solve(args)