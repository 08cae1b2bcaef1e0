"""Sorting stack ``a`` with the puzzle's moves."""

from __future__ import annotations

import heapq
from operator import attrgetter

from pushswap.cost import Cost, calc_costs
from pushswap.stacks import Stacks


def sort_three(stacks: Stacks) -> None:
    """Put the three top values of ``a`` in ascending order.

    Only the first three values are looked at. A stack of two values is
    swapped when out of order; a shorter one is left alone.
    """
    a = stacks.a
    if len(a) < 3:
        if len(a) == 2 and a[0] > a[1]:
            stacks.sa()
        return
    first, second, third = a[0], a[1], a[2]
    if first > second and second < third and first < third:
        stacks.sa()
    elif first > second and second > third:
        stacks.sa()
        stacks.rra()
    elif first > second and second < third and first > third:
        stacks.ra()
    elif first < second and second > third and first < third:
        stacks.sa()
        stacks.ra()
    elif first < second and second > third and first > third:
        stacks.rra()


def _sort_two(stacks: Stacks) -> None:
    """Leave the larger of exactly two values of ``b`` on top."""
    b = stacks.b
    if len(b) == 2 and b[0] < b[1]:
        stacks.sb()


def sort_five(stacks: Stacks) -> None:
    """Sort a stack of four or five values.

    The two smallest values are moved to ``b`` until three remain in ``a``,
    the three are sorted, and ``b`` is pushed back. With four values only
    one of the two smallest is moved, so the result is not always sorted.
    """
    smallest = set(heapq.nsmallest(2, stacks.a))
    while len(stacks.a) > 3:
        if stacks.a[0] in smallest:
            stacks.pb()
        else:
            stacks.ra()
    _sort_two(stacks)
    sort_three(stacks)
    stacks.pa()
    stacks.pa()


def _move_to_a(stacks: Stacks, cost: Cost) -> None:
    """Rotate both stacks so the value of ``cost`` and its target are on top."""
    cost_a, cost_b = cost.cost_a, cost.cost_b
    while cost_a > 0 and cost_b > 0:
        stacks.rr()
        cost_a -= 1
        cost_b -= 1
    while cost_a < 0 and cost_b < 0:
        stacks.rrr()
        cost_a += 1
        cost_b += 1
    for _ in range(max(cost_a, 0)):
        stacks.ra()
    for _ in range(max(-cost_a, 0)):
        stacks.rra()
    for _ in range(max(cost_b, 0)):
        stacks.rb()
    for _ in range(max(-cost_b, 0)):
        stacks.rrb()


def _min_to_top(stacks: Stacks) -> None:
    """Rotate ``a`` the shorter way until its smallest value is on top."""
    a = stacks.a
    if not a:
        return
    smallest = min(a)
    position = a.index(smallest)
    while a[0] != smallest:
        if position <= len(a) // 2:
            stacks.ra()
        else:
            stacks.rra()


def big_sort(stacks: Stacks) -> None:
    """Sort ``a`` by moving all but three values to ``b`` and inserting back the cheapest first."""
    while len(stacks.a) > 3:
        stacks.pb()
    sort_three(stacks)
    while stacks.b:
        costs = calc_costs(stacks.a, stacks.b)
        cheapest = min(costs, key=attrgetter("total_cost"))
        _move_to_a(stacks, cheapest)
        stacks.pa()
    _min_to_top(stacks)


def sort_stack(stacks: Stacks) -> None:
    """Sort ``a`` with the strategy suited to its size."""
    size = len(stacks.a)
    if size <= 3:
        sort_three(stacks)
    elif size <= 5:
        sort_five(stacks)
    else:
        big_sort(stacks)