"""How many moves it takes to bring each value of ``b`` into place in ``a``."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence

INT_MAX = 2147483647


@dataclass(frozen=True)
class Cost:
    """Signed rotation counts for one value of ``b``.

    A positive count means rotations, a negative one reverse rotations.
    """

    cost_a: int
    cost_b: int
    total_cost: int
    value: int


def target_position(value: int, stack_a: Sequence[int]) -> int:
    """Position in ``stack_a`` of the smallest value above ``value``.

    When there is none, the position of the smallest value in ``stack_a``.
    """
    best_pos = 0
    best_val = INT_MAX
    for pos, current in enumerate(stack_a):
        if value < current < best_val:
            best_val = current
            best_pos = pos
    if best_val == INT_MAX:
        for pos, current in enumerate(stack_a):
            if current < best_val:
                best_val = current
                best_pos = pos
    return best_pos


def _signed_distance(pos: int, size: int) -> int:
    return pos if pos <= size // 2 else -(size - pos)


def calc_costs(stack_a: Sequence[int], stack_b: Sequence[int]) -> List[Cost]:
    """The cost of every value of ``stack_b``, in stack order."""
    size_a = len(stack_a)
    size_b = len(stack_b)
    costs = []
    for i, value in enumerate(stack_b):
        cost_b = _signed_distance(i, size_b)
        cost_a = _signed_distance(target_position(value, stack_a), size_a)
        if (cost_a >= 0) == (cost_b >= 0):
            total = max(abs(cost_a), abs(cost_b))
        else:
            total = abs(cost_a) + abs(cost_b)
        costs.append(Cost(cost_a, cost_b, total, value))
    return costs