import itertools
import random

import pytest

from pushswap.parsing import INT_MAX, INT_MIN
from pushswap.sorter import (
    little_sort_4,
    little_sort_5,
    move_to_top,
    push_swap,
    solve,
    tiny_sort,
)
from pushswap.stacks import Operation, Stacks


def _replay(values, ops):
    stacks = Stacks(values)
    stacks.run(ops)
    return stacks


def test_solve_already_sorted_needs_nothing():
    assert solve([1, 2, 3, 4, 5, 6, 7]) == []


def test_solve_two_values_is_one_swap():
    assert solve([2, 1]) == [Operation.SA]


def test_tiny_sort_descending_three():
    stacks = Stacks([3, 2, 1])
    tiny_sort(stacks)
    assert stacks.history == [Operation.RA, Operation.SA]
    assert list(stacks.a) == [1, 2, 3]


@pytest.mark.parametrize("perm", list(itertools.permutations([10, 20, 30])))
def test_tiny_sort_all_permutations(perm):
    stacks = Stacks(perm)
    if list(perm) != sorted(perm):
        tiny_sort(stacks)
    assert list(stacks.a) == sorted(perm)
    assert len(stacks.history) <= 2


@pytest.mark.parametrize("perm", list(itertools.permutations([4, -1, 7, 0])))
def test_little_sort_4_all_permutations(perm):
    stacks = Stacks(perm)
    little_sort_4(stacks)
    assert stacks.is_solved()
    assert _replay(perm, stacks.history).is_solved()


@pytest.mark.parametrize("perm", list(itertools.permutations([5, 1, 9, -3, 2])))
def test_little_sort_5_all_permutations(perm):
    stacks = Stacks(perm)
    little_sort_5(stacks)
    assert stacks.is_solved()
    assert len(stacks.history) <= 12


def test_move_to_top_uses_forward_rotation_in_first_half():
    stacks = Stacks([1, 2, 3, 4, 5])
    move_to_top(stacks, 2)
    assert stacks.a[0] == 2
    assert set(stacks.history) == {Operation.RA}


def test_move_to_top_uses_reverse_rotation_in_second_half():
    stacks = Stacks([1, 2, 3, 4, 5])
    move_to_top(stacks, 4)
    assert stacks.a[0] == 4
    assert set(stacks.history) == {Operation.RRA}
    assert sorted(stacks.a) == [1, 2, 3, 4, 5]


def test_push_swap_on_empty_stack_does_nothing():
    stacks = Stacks([])
    push_swap(stacks)
    assert stacks.history == []
    assert list(stacks.a) == []


@pytest.mark.parametrize("size", [6, 7, 10, 25, 100])
def test_solve_sorts_random_inputs(size):
    rng = random.Random(size)
    values = rng.sample(range(-1000, 1000), size)
    ops = solve(values)
    stacks = _replay(values, ops)
    assert stacks.is_solved()
    assert sorted(stacks.a) == sorted(values)


def test_push_swap_leaves_b_empty_and_a_sorted():
    values = random.Random(3).sample(range(500), 50)
    stacks = Stacks(values)
    push_swap(stacks)
    assert not stacks.b
    assert list(stacks.a) == sorted(values)


def test_solve_handles_integer_extremes():
    values = [INT_MAX, INT_MIN, INT_MAX - 1, 0, INT_MIN + 1, 5, -5, 100]
    ops = solve(values)
    assert _replay(values, ops).is_solved()


def test_solve_is_deterministic():
    values = random.Random(11).sample(range(10_000), 40)
    first = solve(values)
    second = solve(values)
    assert len(first) > 0
    assert first == second
    assert _replay(values, first).is_solved()


def test_solve_returns_only_operations():
    values = random.Random(7).sample(range(100), 30)
    ops = solve(values)
    assert all(isinstance(op, Operation) for op in ops)
    assert len(ops) > 0
    assert _replay(values, ops).is_solved()