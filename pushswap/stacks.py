"""The two stacks of the puzzle and the eleven operations on them."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from enum import Enum


class Operation(str, Enum):
    """An instruction that rearranges the stacks."""

    SA = "sa"
    SB = "sb"
    SS = "ss"
    PA = "pa"
    PB = "pb"
    RA = "ra"
    RB = "rb"
    RR = "rr"
    RRA = "rra"
    RRB = "rrb"
    RRR = "rrr"

    def __str__(self) -> str:
        return self.value


def is_sorted(values: Iterable[int]) -> bool:
    """Return True if the values never decrease from first to last."""
    previous = None
    for value in values:
        if previous is not None and previous > value:
            return False
        previous = value
    return True


def _swap(stack: deque[int]) -> None:
    if len(stack) >= 2:
        first = stack.popleft()
        second = stack.popleft()
        stack.appendleft(first)
        stack.appendleft(second)


def _rotate(stack: deque[int]) -> None:
    if len(stack) >= 2:
        stack.rotate(-1)


def _reverse_rotate(stack: deque[int]) -> None:
    if len(stack) >= 2:
        stack.rotate(1)


def _push(source: deque[int], destination: deque[int]) -> None:
    if source:
        destination.appendleft(source.popleft())


class Stacks:
    """Stacks a and b, with the top of each stack at index 0.

    Every operation applied is appended to ``history``, in order.
    """

    def __init__(self, values: Iterable[int]) -> None:
        self.a: deque[int] = deque(values)
        self.b: deque[int] = deque()
        self.history: list[Operation] = []

    def __repr__(self) -> str:
        return f"Stacks(a={list(self.a)}, b={list(self.b)})"

    def apply(self, op: Operation | str) -> None:
        """Apply one operation; a name that is not an operation raises ValueError."""
        op = Operation(op)
        a, b = self.a, self.b
        if op is Operation.SA:
            _swap(a)
        elif op is Operation.SB:
            _swap(b)
        elif op is Operation.SS:
            _swap(a)
            _swap(b)
        elif op is Operation.PA:
            _push(b, a)
        elif op is Operation.PB:
            _push(a, b)
        elif op is Operation.RA:
            _rotate(a)
        elif op is Operation.RB:
            _rotate(b)
        elif op is Operation.RR:
            _rotate(a)
            _rotate(b)
        elif op is Operation.RRA:
            _reverse_rotate(a)
        elif op is Operation.RRB:
            _reverse_rotate(b)
        else:
            _reverse_rotate(a)
            _reverse_rotate(b)
        self.history.append(op)

    def run(self, ops: Iterable[Operation | str]) -> None:
        """Apply each operation in turn."""
        for op in ops:
            self.apply(op)

    def is_solved(self) -> bool:
        """Return True if stack a is in ascending order and stack b is empty."""
        return not self.b and is_sorted(self.a)