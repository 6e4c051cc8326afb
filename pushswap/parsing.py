"""Validation of command-line arguments and conversion to stack values."""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1
MAX_TOKEN_LENGTH = 12

_ATOI = re.compile(r"[\t\n\v\f\r ]*([+-]?)([0-9]*)")


class ArgumentError(ValueError):
    """Raised when the arguments do not describe a valid list of integers."""


def _is_digit(char: str) -> bool:
    return len(char) == 1 and "0" <= char <= "9"


def _check_minus(text: str, index: int) -> None:
    following = text[index + 1 : index + 2]
    if not _is_digit(following):
        raise ArgumentError("invalid character in argument")
    if index > 0 and text[index - 1] != " ":
        raise ArgumentError("invalid character in argument")


def check_single_argument(text: str) -> None:
    """Validate one argument that holds space-separated integers."""
    if not text:
        raise ArgumentError("empty argument")
    digit_count = 0
    for index, char in enumerate(text):
        if _is_digit(char):
            digit_count += 1
        elif char not in (" ", "-"):
            raise ArgumentError("invalid character in argument")
        if char == "-":
            _check_minus(text, index)
    if digit_count == 0:
        raise ArgumentError("no digits found in argument")


def check_all_arguments(args: Iterable[str]) -> None:
    """Validate several arguments, each of which holds a single integer."""
    for arg in args:
        for index, char in enumerate(arg):
            if _is_digit(char):
                continue
            if char != "-":
                raise ArgumentError("invalid character in argument")
            _check_minus(arg, index)


def has_bad_spacing(text: str) -> bool:
    """Return True if the text starts with a space or holds two spaces in a row."""
    return text.startswith(" ") or "  " in text


def parse_int(text: str) -> int:
    """Read a leading, optionally signed run of digits; anything else yields 0."""
    match = _ATOI.match(text)
    sign, digits = match.groups()
    if not digits:
        return 0
    value = int(digits)
    return -value if sign == "-" else value


def build_values(tokens: Iterable[str]) -> list[int]:
    """Convert tokens to integers, rejecting long tokens, repeats and overflow."""
    values: list[int] = []
    seen: set[int] = set()
    for token in tokens:
        if len(token) > MAX_TOKEN_LENGTH:
            raise ArgumentError("not an integer")
        number = parse_int(token)
        if number in seen:
            raise ArgumentError("repeated number")
        if not INT_MIN <= number <= INT_MAX:
            raise ArgumentError("not an integer")
        seen.add(number)
        values.append(number)
    return values


def parse_arguments(args: Sequence[str]) -> list[int]:
    """Validate the program's arguments and return the values for stack a.

    A single argument may hold several space-separated numbers; several
    arguments must hold one number each.
    """
    args = list(args)
    if not args:
        return []
    if len(args) == 1:
        check_single_argument(args[0])
        text = args[0]
    else:
        check_all_arguments(args)
        text = "".join(f"{arg} " for arg in args)
    if has_bad_spacing(text):
        raise ArgumentError("invalid argument")
    return build_values(token for token in text.split(" ") if token)