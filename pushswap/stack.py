"""The two stacks of the puzzle and the eleven operations on them."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Iterable


@dataclass
class Node:
    """One element of a stack: its value and its rank among all values."""

    value: int
    index: int = 0


class Operation(Enum):
    """The instructions understood by the sorter and the checker."""

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


def parse_operation(text: str) -> Operation:
    """Return the operation named exactly by ``text``.

    Raises ValueError for anything that is not one of the eleven names.
    """
    try:
        return Operation(text)
    except ValueError:
        raise ValueError(f"unknown operation: {text!r}") from None


def _swap(stack: deque[Node]) -> None:
    if len(stack) >= 2:
        stack[0], stack[1] = stack[1], stack[0]


def _rotate(stack: deque[Node]) -> None:
    if len(stack) >= 2:
        stack.rotate(-1)


def _reverse(stack: deque[Node]) -> None:
    if len(stack) >= 2:
        stack.rotate(1)


def _push(source: deque[Node], target: deque[Node]) -> None:
    if source:
        target.appendleft(source.popleft())


class StackPair:
    """Stacks ``a`` and ``b``; ``a`` starts with the given nodes, ``b`` empty.

    The top of each stack is the first element. Operations that cannot act
    (swapping or rotating fewer than two nodes, pushing from an empty stack)
    leave the stacks as they are. Every applied operation is recorded in
    ``history``.
    """

    def __init__(self, nodes: Iterable[Node]) -> None:
        self.a: deque[Node] = deque(nodes)
        self.b: deque[Node] = deque()
        self.history: list[Operation] = []

    def apply(self, operation: Operation | str) -> None:
        """Carry out one operation, given as an Operation or by its name."""
        if isinstance(operation, str):
            operation = parse_operation(operation)
        a, b = self.a, self.b
        match operation:
            case Operation.SA:
                _swap(a)
            case Operation.SB:
                _swap(b)
            case Operation.SS:
                _swap(a)
                _swap(b)
            case Operation.PA:
                _push(b, a)
            case Operation.PB:
                _push(a, b)
            case Operation.RA:
                _rotate(a)
            case Operation.RB:
                _rotate(b)
            case Operation.RR:
                _rotate(a)
                _rotate(b)
            case Operation.RRA:
                _reverse(a)
            case Operation.RRB:
                _reverse(b)
            case Operation.RRR:
                _reverse(a)
                _reverse(b)
        self.history.append(operation)

    def a_values(self) -> list[int]:
        """Values of stack ``a`` from top to bottom."""
        return [node.value for node in self.a]

    def b_values(self) -> list[int]:
        """Values of stack ``b`` from top to bottom."""
        return [node.value for node in self.b]