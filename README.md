# pushswap

Sort a list of distinct integers using only two stacks, `a` and `b`, and a
fixed set of operations. The package can also check whether a given list of
operations really sorts a given input.

## Operations

| Name  | Effect                                      |
|-------|---------------------------------------------|
| `sa`  | swap the top two elements of `a`            |
| `sb`  | swap the top two elements of `b`            |
| `ss`  | `sa` and `sb` together                      |
| `pa`  | move the top of `b` onto `a`                |
| `pb`  | move the top of `a` onto `b`                |
| `ra`  | rotate `a` up: the top goes to the bottom   |
| `rb`  | rotate `b` up                               |
| `rr`  | `ra` and `rb` together                      |
| `rra` | rotate `a` down: the bottom goes to the top |
| `rrb` | rotate `b` down                             |
| `rrr` | `rra` and `rrb` together                    |

An operation on a stack too short for it leaves that stack unchanged.

The first number given is the top of stack `a`. The input counts as sorted
when `a` is in ascending order from top to bottom and `b` is empty.

## Installation

```
pip install .
```

## Command line

Print a list of operations that sorts the numbers, one per line:

```
push-swap 3 2 5 1 4
push-swap "3 2 5 1 4"
```

Numbers may be given as separate arguments, one number each, or as a single
argument holding numbers separated by single spaces. Input that is already
sorted produces no output. The command prints `Error` to standard error and
exits with status 1 on:

- a single empty argument;
- characters other than digits, spaces and a leading `-`;
- a leading space or two spaces in a row;
- a number token longer than 12 characters or outside the 32-bit signed range;
- a repeated number.

With no arguments it prints nothing and exits with status 0.

Check a list of operations read from standard input, one per line:

```
push-swap 3 2 5 1 4 | push-swap-checker 3 2 5 1 4
```

The checker applies the operations in turn. It prints `OK` as soon as one of
them leaves `a` sorted and `b` empty, and `KO` if the input ends (or an empty
line is read) before that happens. An unknown operation, or invalid numbers,
make it print `Error` to standard error and exit with status 1. With no
arguments, or an empty first argument, it does nothing.

## Library use

```python
from pushswap.sorter import solve
from pushswap.stacks import Stacks

ops = solve([3, 2, 5, 1, 4])
stacks = Stacks([3, 2, 5, 1, 4])
stacks.run(ops)
assert stacks.is_solved()
```

- `pushswap.stacks.Operation` is the enumeration of the eleven operations;
  `Stacks` holds the two stacks as `a` and `b`, applies operations with
  `apply` and `run` (raising `ValueError` on an unknown name), and records
  each one in `history`. `is_sorted` tells whether values never decrease.
- `pushswap.sorter.solve` returns the operations that sort a list of values;
  `push_swap` sorts a `Stacks` in place, and `tiny_sort`, `little_sort_4`,
  `little_sort_5` and `move_to_top` are the steps it uses for small stacks.
- `pushswap.parsing.parse_arguments` turns command-line style arguments into a
  list of integers and raises `pushswap.parsing.ArgumentError` on bad input.
- `pushswap.cli.check_instructions` replays instructions against a list of
  values and reports whether they sort it; `read_instructions` reads them
  from a text stream.

## Running the tests

```
pip install ".[test]"
pytest
```