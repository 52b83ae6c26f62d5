# pushswap

Sort a list of integers with two stacks, `a` and `b`, and a fixed set of
operations, or check whether a sequence of operations sorts a list.

## Operations

| Name  | Effect                                          |
|-------|-------------------------------------------------|
| `sa`  | swap the first two elements of `a`              |
| `sb`  | swap the first two elements of `b`              |
| `ss`  | `sa` and `sb` together                          |
| `pa`  | move the top of `b` to the top of `a`           |
| `pb`  | move the top of `a` to the top of `b`           |
| `ra`  | rotate `a` up: the first element becomes last   |
| `rb`  | rotate `b` up                                   |
| `rr`  | `ra` and `rb` together                          |
| `rra` | rotate `a` down: the last element becomes first |
| `rrb` | rotate `b` down                                 |
| `rrr` | `rra` and `rrb` together                        |

Operations that cannot act, such as swapping or rotating a stack with fewer
than two elements or pushing from an empty stack, leave the stacks unchanged.

## Installing

```
pip install .
```

This installs two commands, `push-swap` and `checker`.

## Sorting

Give the numbers as arguments, separately or in one quoted string:

```
push-swap 3 2 1
push-swap "4 67 3 87 23"
```

The operations that sort stack `a` in ascending order are printed one per
line. Nothing is printed when the input is already sorted or when no
arguments are given.

Input is rejected with `Error` on standard error and exit status 1 when an
argument is empty or made only of spaces, a word is not a whole decimal
integer (leading whitespace and one optional sign are allowed), a value lies
outside the 32-bit signed range, or a value appears twice.

## Checking

`checker` takes the same arguments and reads operations from standard input,
one per line:

```
push-swap 3 2 1 | checker 3 2 1
```

It prints `OK` when the operations leave `a` sorted and `b` empty, and `KO`
otherwise. Every line must be exactly an operation name followed by a
newline; anything else, as well as invalid arguments, prints `Error` on
standard error and exits with status 1. With no arguments it does nothing.

## Using it from Python

```python
from pushswap.cli import run_checker
from pushswap.parse import parse_arguments
from pushswap.sort import solve
from pushswap.stack import StackPair, parse_operation

nodes = parse_arguments(["3 2 1"])
operations = solve(nodes)          # list of Operation members
print([str(op) for op in operations])

pair = StackPair(parse_arguments(["3 2 1"]))
pair.apply(parse_operation("sa"))  # or pair.apply("sa")
print(pair.a_values(), pair.b_values())   # [2, 3, 1] []

print(run_checker(parse_arguments(["3 2 1"]), operations))  # True
```

- `pushswap.stack` holds `Node`, the `Operation` enum, `parse_operation` and
  `StackPair`, which records every applied operation in `history`.
- `pushswap.parse` turns arguments into nodes (`parse_arguments`,
  `parse_int`, `join_arguments`, `split_words`, `check_doubles`,
  `build_nodes`). Invalid input raises `pushswap.parse.InputError`.
- `pushswap.sort` provides `solve`, `sort_stacks` and the helpers
  `is_sorted`, `find_min`, `find_max` and `position_of`.
- `pushswap.cli` provides `read_commands`, `run_checker` and the command
  entry points `push_swap_main`, `checker_main` and `main`.

## Running the tests

```
pip install .[test]
pytest
```