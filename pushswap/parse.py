"""Turning command-line arguments into the nodes of stack ``a``."""

from __future__ import annotations

from typing import Iterable, Sequence

from pushswap.stack import Node

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_WHITESPACE = " \t\n\v\f\r"
_DIGITS = frozenset("0123456789")
# Ranks handed to out-of-order values never exceed this ceiling.
_INDEX_CEILING = 500


class InputError(ValueError):
    """The arguments do not describe a valid list of distinct integers."""

    def __init__(self, detail: str = "") -> None:
        super().__init__("Error")
        self.detail = detail


def parse_int(text: str) -> int:
    """Parse a 32-bit signed integer.

    Leading whitespace and one sign are allowed; everything after them must
    be decimal digits. Raises InputError otherwise or on overflow.
    """
    body = text.lstrip(_WHITESPACE)
    sign = 1
    if body[:1] in ("+", "-"):
        if body[0] == "-":
            sign = -1
        body = body[1:]
    if not body or not set(body) <= _DIGITS:
        raise InputError(f"not an integer: {text!r}")
    value = sign * int(body)
    if not INT_MIN <= value <= INT_MAX:
        raise InputError(f"out of range: {text!r}")
    return value


def join_arguments(args: Sequence[str]) -> str:
    """Join the arguments with single spaces.

    An empty argument, or one made only of spaces, is an InputError.
    """
    if any(arg == "" for arg in args):
        raise InputError("empty argument")
    if any(not arg.strip(" ") for arg in args):
        raise InputError("blank argument")
    return " ".join(args)


def split_words(text: str) -> list[str]:
    """Split on spaces only, dropping empty pieces."""
    return [word for word in text.split(" ") if word]


def check_doubles(words: Iterable[str]) -> list[int]:
    """Parse every word and return the values, rejecting repeated numbers."""
    values: list[int] = []
    seen: set[int] = set()
    for word in words:
        value = parse_int(word)
        if value in seen:
            raise InputError(f"duplicate value: {value}")
        seen.add(value)
        values.append(value)
    return values


def build_nodes(values: Iterable[int]) -> list[Node]:
    """Create nodes in order, giving each its rank among the values."""
    nodes: list[Node] = []
    current_max: int | None = None
    for count, value in enumerate(values):
        if current_max is not None and value < current_max:
            rank = min(
                (node.index for node in nodes if node.value > value),
                default=_INDEX_CEILING,
            )
            nodes.append(Node(value, min(rank, _INDEX_CEILING)))
            for node in nodes:
                if node.value > value:
                    node.index += 1
        else:
            nodes.append(Node(value, count))
            current_max = value
    return nodes


def parse_arguments(args: Sequence[str]) -> list[Node]:
    """Build stack ``a`` from the program's arguments (without its name)."""
    if not args:
        return []
    words = split_words(join_arguments(args))
    if not words:
        raise InputError("no numbers given")
    return build_nodes(check_doubles(words))