"""Command-line entry points: the sorter and the checker."""

from __future__ import annotations

import sys
from typing import Iterable, Iterator, Sequence, TextIO

from pushswap.parse import InputError, parse_arguments
from pushswap.sort import is_sorted, solve
from pushswap.stack import Node, Operation, StackPair, parse_operation


def _parse_line(line: str) -> Operation:
    """Parse one instruction line, which must end with a newline."""
    if not line.endswith("\n"):
        raise InputError(f"instruction without newline: {line!r}")
    try:
        return parse_operation(line[:-1])
    except ValueError:
        raise InputError(f"unknown instruction: {line!r}") from None


def read_commands(stream: TextIO) -> Iterator[Operation]:
    """Yield the operations read line by line from ``stream``.

    Each line must be exactly an operation name followed by a newline;
    anything else raises InputError when it is reached.
    """
    for line in stream:
        yield _parse_line(line)


def run_checker(nodes: Iterable[Node], lines: Iterable[Operation | str]) -> bool:
    """Apply the instructions to a fresh pair of stacks.

    ``lines`` holds operations or raw instruction lines (with their newline).
    Returns True when ``a`` ends sorted and ``b`` empty.
    """
    pair = StackPair(nodes)
    for line in lines:
        operation = line if isinstance(line, Operation) else _parse_line(line)
        pair.apply(operation)
    return is_sorted(pair.a_values()) and not pair.b


def _report_error() -> int:
    sys.stderr.write("Error\n")
    return 1


def push_swap_main(argv: Sequence[str] | None = None) -> int:
    """Print the operations that sort the numbers given as arguments."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        nodes = parse_arguments(args)
    except InputError:
        return _report_error()
    for operation in solve(nodes):
        sys.stdout.write(f"{operation}\n")
    return 0


def checker_main(
    argv: Sequence[str] | None = None, stdin: TextIO | None = None
) -> int:
    """Read instructions from ``stdin`` and report OK or KO for the arguments."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 0
    stream = sys.stdin if stdin is None else stdin
    try:
        nodes = parse_arguments(args)
        sorted_ok = run_checker(nodes, read_commands(stream))
    except InputError:
        return _report_error()
    sys.stdout.write("OK\n" if sorted_ok else "KO\n")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run the sorter."""
    return push_swap_main(argv)


if __name__ == "__main__":
    sys.exit(main())