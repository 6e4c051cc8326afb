"""Command-line entry points: the sorter and the instruction checker."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator, Sequence
from typing import TextIO

from .parsing import ArgumentError, parse_arguments
from .sorter import solve
from .stacks import Stacks

_MAX_INSTRUCTION_LENGTH = 4


def _report_error() -> int:
    sys.stderr.write("Error\n")
    return 1


def read_instructions(stream: TextIO) -> Iterator[str]:
    """Yield instructions read one line at a time until an empty line or end of input.

    At most four characters of a line are kept; the character read after
    the fourth is consumed and dropped.
    """
    while True:
        chars: list[str] = []
        while True:
            char = stream.read(1)
            if not char or char == "\n":
                break
            if len(chars) == _MAX_INSTRUCTION_LENGTH:
                break
            chars.append(char)
        if not chars:
            return
        yield "".join(chars)


def check_instructions(values: Iterable[int], instructions: Iterable[str]) -> bool:
    """Apply the instructions to a stack holding the values.

    Return True as soon as an instruction leaves the stacks solved, without
    consuming the instructions that follow; return False if they run out
    first. An unknown instruction raises ValueError.
    """
    stacks = Stacks(values)
    for instruction in instructions:
        stacks.apply(instruction)
        if stacks.is_solved():
            return True
    return False


def main(argv: Sequence[str] | None = None) -> int:
    """Print the operations that sort the numbers given as arguments."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 0
    if len(args) == 1 and not args[0]:
        return _report_error()
    try:
        values = parse_arguments(args)
    except ArgumentError:
        return _report_error()
    for op in solve(values):
        sys.stdout.write(f"{op}\n")
    return 0


def checker_main(argv: Sequence[str] | None = None) -> int:
    """Read instructions from standard input and report whether they sort the numbers."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args or not args[0]:
        return 0
    try:
        values = parse_arguments(args)
    except ArgumentError:
        return _report_error()
    try:
        solved = check_instructions(values, read_instructions(sys.stdin))
    except ValueError:
        return _report_error()
    sys.stdout.write("OK\n" if solved else "KO\n")
    return 0