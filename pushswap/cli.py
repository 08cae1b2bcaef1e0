"""The command that prints the moves sorting its arguments."""

from __future__ import annotations

import sys
from typing import Iterable, List, Optional, Sequence

from pushswap.parse import ParseError, parse_args
from pushswap.sort import sort_stack
from pushswap.stacks import Stacks


def solve(args: Iterable[str]) -> List[str]:
    """The moves that sort the numbers given in ``args``.

    Raises ParseError when the arguments are invalid, repeated or hold no number.
    """
    values = parse_args(args)
    if not values:
        raise ParseError("no numbers given")
    moves: List[str] = []
    sort_stack(Stacks(values, emit=moves.append))
    return moves


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print one move per line; on bad input print ``Error`` to standard error and return 1."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 0
    try:
        moves = solve(args)
    except ParseError:
        sys.stderr.write("Error\n")
        return 1
    sys.stdout.write("".join(f"{move}\n" for move in moves))
    return 0


if __name__ == "__main__":
    sys.exit(main())