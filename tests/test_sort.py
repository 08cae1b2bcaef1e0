import random
from itertools import permutations

import pytest

from pushswap.sort import big_sort, sort_five, sort_stack, sort_three
from pushswap.stacks import Stacks


def _make(values):
    ops = []
    return Stacks(values, emit=ops.append), ops


@pytest.mark.parametrize("values", list(permutations([1, 2, 3])))
def test_sort_three_sorts_every_permutation(values):
    stacks, ops = _make(values)
    sort_three(stacks)
    assert list(stacks.a) == [1, 2, 3]
    assert len(ops) <= 2


def test_sort_three_swap_only():
    stacks, ops = _make([2, 1, 3])
    sort_three(stacks)
    assert ops == ["sa"]


def test_sort_three_reverse_order():
    stacks, ops = _make([3, 2, 1])
    sort_three(stacks)
    assert ops == ["sa", "rra"]


def test_sort_three_sorted_emits_nothing():
    stacks, ops = _make([1, 2, 3])
    sort_three(stacks)
    assert ops == []
    assert list(stacks.a) == [1, 2, 3]


def test_sort_three_two_values():
    stacks, ops = _make([5, -4])
    sort_three(stacks)
    assert list(stacks.a) == [-4, 5]
    assert ops == ["sa"]


@pytest.mark.parametrize("values", list(permutations([10, 20, 30, 40, 50])))
def test_sort_five_sorts_every_permutation(values):
    stacks, ops = _make(values)
    sort_five(stacks)
    assert list(stacks.a) == [10, 20, 30, 40, 50]
    assert not stacks.b
    assert len(ops) <= 12


def test_sort_five_four_values_in_order():
    stacks, _ = _make([1, 2, 3, 4])
    sort_five(stacks)
    assert list(stacks.a) == [1, 2, 3, 4]
    assert not stacks.b


@pytest.mark.parametrize("seed", range(10))
def test_big_sort_sorts_random_values(seed):
    rng = random.Random(seed)
    values = rng.sample(range(-1000, 1000), 40)
    stacks, ops = _make(values)
    big_sort(stacks)
    assert list(stacks.a) == sorted(values)
    assert not stacks.b
    assert ops


def test_big_sort_keeps_values():
    values = [8, -3, 2147483647, -2147483648, 0, 17, 5]
    stacks, _ = _make(values)
    big_sort(stacks)
    assert list(stacks.a) == sorted(values)


@pytest.mark.parametrize("size", [1, 2, 3, 5, 6, 7, 12, 100])
def test_sort_stack_sorts_any_size(size):
    values = random.Random(size).sample(range(10000), size)
    stacks, _ = _make(values)
    sort_stack(stacks)
    assert list(stacks.a) == sorted(values)
    assert not stacks.b


def test_sort_stack_empty():
    stacks, ops = _make([])
    sort_stack(stacks)
    assert list(stacks.a) == []
    assert ops == []