"""The two stacks of the puzzle and the moves that rearrange them."""

from __future__ import annotations

import sys
from collections import deque
from typing import Callable, Deque, Iterable, Optional


def _print_op(name: str) -> None:
    sys.stdout.write(name + "\n")


def _swap(stack: Deque[int]) -> bool:
    if len(stack) < 2:
        return False
    stack[0], stack[1] = stack[1], stack[0]
    return True


def _rotate(stack: Deque[int]) -> bool:
    if not stack:
        return False
    stack.rotate(-1)
    return True


def _reverse_rotate(stack: Deque[int]) -> bool:
    if len(stack) < 2:
        return False
    stack.rotate(1)
    return True


class Stacks:
    """Stack ``a`` holding the values to sort and an initially empty stack ``b``.

    The top of each stack is index 0. Every move that takes effect reports
    its name to ``emit``, which by default writes it on its own line to
    standard output. A move on a stack too short for it does nothing and
    reports nothing.
    """

    def __init__(
        self,
        values: Iterable[int] = (),
        emit: Optional[Callable[[str], None]] = None,
    ) -> None:
        self.a: Deque[int] = deque(values)
        self.b: Deque[int] = deque()
        self._emit = emit if emit is not None else _print_op

    def sa(self) -> None:
        """Swap the two top values of ``a``."""
        if _swap(self.a):
            self._emit("sa")

    def sb(self) -> None:
        """Swap the two top values of ``b``."""
        if _swap(self.b):
            self._emit("sb")

    def ss(self) -> None:
        """Swap the tops of both stacks.

        If ``a`` is too short nothing happens; if only ``b`` is too short,
        ``a`` is swapped but the move is not reported.
        """
        if not _swap(self.a):
            return
        if _swap(self.b):
            self._emit("ss")

    def pa(self) -> None:
        """Move the top of ``b`` onto ``a``."""
        if not self.b:
            return
        self.a.appendleft(self.b.popleft())
        self._emit("pa")

    def pb(self) -> None:
        """Move the top of ``a`` onto ``b``."""
        if not self.a:
            return
        self.b.appendleft(self.a.popleft())
        self._emit("pb")

    def ra(self) -> None:
        """Move the top of ``a`` to its bottom."""
        if _rotate(self.a):
            self._emit("ra")

    def rb(self) -> None:
        """Move the top of ``b`` to its bottom."""
        if _rotate(self.b):
            self._emit("rb")

    def rr(self) -> None:
        """Rotate both stacks.

        If ``b`` is empty nothing happens; if only ``a`` is empty, ``b`` is
        rotated but the move is not reported.
        """
        if not _rotate(self.b):
            return
        if _rotate(self.a):
            self._emit("rr")

    def rra(self) -> None:
        """Move the bottom of ``a`` to its top."""
        if _reverse_rotate(self.a):
            self._emit("rra")

    def rrb(self) -> None:
        """Move the bottom of ``b`` to its top; the move is reported as ``rra``."""
        if _reverse_rotate(self.b):
            self._emit("rra")

    def rrr(self) -> None:
        """Reverse-rotate both stacks.

        If ``b`` is too short nothing happens; if only ``a`` is too short,
        ``b`` is reverse-rotated but the move is not reported.
        """
        if not _reverse_rotate(self.b):
            return
        if _reverse_rotate(self.a):
            self._emit("rrr")

    def format_stack(self, which: str = "a") -> str:
        """Render stack ``a`` or ``b`` from top to bottom, ending in ``NULL``."""
        if which == "a":
            stack = self.a
        elif which == "b":
            stack = self.b
        else:
            raise ValueError(f"no stack named {which!r}")
        return "".join(f"{value} -> " for value in stack) + "NULL"

    def __repr__(self) -> str:
        return f"Stacks(a={list(self.a)!r}, b={list(self.b)!r})"