"""The sorting strategy that produces a sequence of operations."""

from __future__ import annotations

import struct
from collections.abc import Iterable
from dataclasses import dataclass

from .parsing import INT_MAX
from .stacks import Operation, Stacks, is_sorted

_LARGE_THRESHOLD = 6
_KEEP_IN_A = 5


def _repeat(stacks: Stacks, op: Operation, count: int) -> None:
    for _ in range(max(count, 0)):
        stacks.apply(op)


def _to_int32(value: int) -> int:
    return (value + 2**31) % 2**32 - 2**31


def _to_float32(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


def _average(values: Iterable[int]) -> float:
    """Mean of the values in single precision, the sum kept to 32 bits."""
    values = list(values)
    if not values:
        return 0.0
    total = _to_int32(sum(values))
    return _to_float32(_to_float32(float(total)) / len(values))


def _above_median(index: int, length: int) -> bool:
    return index > length // 2 - 1


def move_to_top(stacks: Stacks, value: int) -> None:
    """Bring the given value of stack a to its top by the shorter direction."""
    a = list(stacks.a)
    length = len(a)
    pos = a.index(value) if value in a else length
    if pos <= length // 2:
        _repeat(stacks, Operation.RA, pos)
    else:
        _repeat(stacks, Operation.RRA, length - pos)


def tiny_sort(stacks: Stacks) -> None:
    """Sort a stack a of two or three values."""
    a = stacks.a
    if len(a) < 2:
        return
    if len(a) == 2:
        stacks.apply(Operation.SA)
    first, second, last = a[0], a[1], a[-1]
    if first > second and first > last:
        stacks.apply(Operation.RA)
    elif second > first and second > last:
        stacks.apply(Operation.RRA)
    if a[0] > a[1]:
        stacks.apply(Operation.SA)


def little_sort_4(stacks: Stacks) -> None:
    """Sort a stack a of four values."""
    move_to_top(stacks, max(stacks.a))
    stacks.apply(Operation.PB)
    tiny_sort(stacks)
    stacks.apply(Operation.PA)
    stacks.apply(Operation.RA)


def _second_smallest(values: list[int], smallest: int) -> int:
    candidates = [v for v in values if smallest < v < INT_MAX]
    return min(candidates) if candidates else values[0]


def little_sort_5(stacks: Stacks) -> None:
    """Sort a stack a of five values, using stack b as scratch space."""
    values = list(stacks.a)
    smallest = min(values)
    second = _second_smallest(values, smallest)
    move_to_top(stacks, smallest)
    stacks.apply(Operation.PB)
    move_to_top(stacks, second)
    stacks.apply(Operation.PB)
    tiny_sort(stacks)
    stacks.apply(Operation.PA)
    stacks.apply(Operation.PA)


def _push_to_b(stacks: Stacks) -> None:
    """Move values below the running average to b until five remain in a."""
    a = stacks.a
    while len(a) > _KEEP_IN_A:
        average = _average(a)
        max_rotations = len(a)
        rotations = 0
        while _to_float32(float(a[0])) >= average and rotations < max_rotations:
            stacks.apply(Operation.RA)
            rotations += 1
        stacks.apply(Operation.PB)
    if not is_sorted(a):
        little_sort_5(stacks)


@dataclass(frozen=True)
class _Move:
    """Where a value of b sits and where its target in a sits."""

    index: int
    target_index: int
    above: bool
    target_above: bool
    price: int


def _plan_moves(a: list[int], b: list[int]) -> list[_Move]:
    len_a, len_b = len(a), len(b)
    smallest_a = min(a)
    moves = []
    for index, value in enumerate(b):
        larger = [v for v in a if v > value]
        target = min(larger) if larger else smallest_a
        target_index = a.index(target)
        above = _above_median(index, len_b)
        target_above = _above_median(target_index, len_a)
        if above and target_above:
            price = len_b - index + len_a - target_index
        elif not above and not target_above:
            price = index + target_index
        elif not above:
            price = index + (len_a - target_index)
        else:
            price = (len_b - index) + target_index
        moves.append(_Move(index, target_index, above, target_above, price))
    return moves


def _cheapest(moves: list[_Move]) -> _Move:
    cheapest = moves[0]
    for move in moves:
        if move.price < cheapest.price:
            cheapest = move
    return cheapest


def _bring_to_top(stacks: Stacks, move: _Move) -> None:
    len_a, len_b = len(stacks.a), len(stacks.b)
    if move.above and move.target_above:
        from_b = len_b - move.index
        from_a = len_a - move.target_index
        if from_b > from_a:
            _repeat(stacks, Operation.RRR, from_a)
            _repeat(stacks, Operation.RRB, from_b - from_a)
        else:
            _repeat(stacks, Operation.RRR, from_b)
            _repeat(stacks, Operation.RRA, from_a - from_b)
    elif not move.above and not move.target_above:
        if move.index > move.target_index:
            _repeat(stacks, Operation.RR, move.target_index)
            _repeat(stacks, Operation.RB, move.index - move.target_index)
        else:
            _repeat(stacks, Operation.RR, move.index)
            _repeat(stacks, Operation.RA, move.target_index - move.index)
    elif not move.above:
        _repeat(stacks, Operation.RB, move.index)
        _repeat(stacks, Operation.RRA, len_a - move.target_index)
    else:
        _repeat(stacks, Operation.RRB, len_b - move.index)
        _repeat(stacks, Operation.RA, move.target_index)


def _final_rotation(stacks: Stacks) -> None:
    a = list(stacks.a)
    index = a.index(min(a))
    if index == 0:
        return
    if _above_median(index, len(a)):
        _repeat(stacks, Operation.RRA, len(a) - index)
    else:
        _repeat(stacks, Operation.RA, index)


def push_swap(stacks: Stacks) -> None:
    """Sort stack a, recording every operation in the stacks' history."""
    size = len(stacks.a)
    if size == 0:
        return
    if size <= 3:
        tiny_sort(stacks)
    elif size < _LARGE_THRESHOLD:
        if size == 4:
            little_sort_4(stacks)
        else:
            little_sort_5(stacks)
    else:
        _push_to_b(stacks)
        while stacks.b:
            move = _cheapest(_plan_moves(list(stacks.a), list(stacks.b)))
            _bring_to_top(stacks, move)
            stacks.apply(Operation.PA)
        _final_rotation(stacks)


def solve(values: Iterable[int]) -> list[Operation]:
    """Return the operations that sort the values, none if already sorted."""
    stacks = Stacks(values)
    if not is_sorted(stacks.a):
        push_swap(stacks)
    return list(stacks.history)