"""The sorting strategy that emits operations on a StackPair."""

from __future__ import annotations

from collections import deque
from typing import Iterable, Sequence

from pushswap.parse import INT_MAX, INT_MIN
from pushswap.stack import Node, Operation, StackPair


def is_sorted(values: Sequence[int]) -> bool:
    """True if no value is greater than the one after it."""
    return all(left <= right for left, right in zip(values, values[1:]))


def find_min(values: Iterable[int]) -> int:
    """Smallest value; the largest 32-bit integer for no values."""
    return min(values, default=INT_MAX)


def find_max(values: Iterable[int]) -> int:
    """Largest value; the smallest 32-bit integer for no values."""
    return max(values, default=INT_MIN)


def position_of(values: Sequence[int], value: int) -> int:
    """Distance of ``value`` from the top. Raises ValueError if absent."""
    return list(values).index(value)


def _bring_to_top(
    pair: StackPair,
    stack: deque[Node],
    value: int,
    rotate: Operation,
    reverse: Operation,
) -> None:
    located = position_of([node.value for node in stack], value)
    operation = rotate if located < len(stack) // 2 else reverse
    while stack[0].value != value:
        pair.apply(operation)


def _sort_small(pair: StackPair, length: int) -> None:
    a = pair.a
    if length == 2:
        if a[0].value > a[1].value:
            pair.apply(Operation.SA)
    elif length == 3:
        if a[0].value > a[1].value:
            pair.apply(Operation.SA)
        if a[0].value > a[2].value:
            pair.apply(Operation.RRA)
        elif a[1].value > a[2].value:
            pair.apply(Operation.RRA)
            pair.apply(Operation.SA)
    else:
        while len(a) > 3:
            _bring_to_top(pair, a, find_min(pair.a_values()), Operation.RA, Operation.RRA)
            pair.apply(Operation.PB)
        sort_stacks(pair)
        while pair.b:
            pair.apply(Operation.PA)


def _sort_by_ranges(pair: StackPair, length: int) -> None:
    start = 0
    end = int(length * 0.05 + 10)
    while pair.a:
        index = pair.a[0].index
        if start <= index <= end:
            pair.apply(Operation.PB)
            start += 1
            end += 1
        elif index > end:
            pair.apply(Operation.RA)
        else:
            pair.apply(Operation.PB)
            pair.apply(Operation.RB)
            start += 1
            end += 1
    while pair.b:
        _bring_to_top(pair, pair.b, find_max(pair.b_values()), Operation.RB, Operation.RRB)
        pair.apply(Operation.PA)


def sort_stacks(pair: StackPair) -> None:
    """Sort stack ``a`` in place, recording the operations in the pair."""
    length = len(pair.a)
    if length <= 1 or is_sorted(pair.a_values()):
        return
    if length <= 5:
        _sort_small(pair, length)
    else:
        _sort_by_ranges(pair, length)


def solve(nodes: Iterable[Node]) -> list[Operation]:
    """Return the operations that sort the given nodes."""
    pair = StackPair(nodes)
    sort_stacks(pair)
    return list(pair.history)