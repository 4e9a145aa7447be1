"""Singly linked lists of integers and three ways to measure their length."""

from __future__ import annotations

import argparse
import time
from dataclasses import dataclass, field
from typing import Callable, Union

DEFAULT_SIZE = 200_000


@dataclass(slots=True, eq=False)
class Node:
    """One cell of a singly linked list."""

    value: int
    next: Node | None = field(default=None, repr=False)


def build_list(size: int) -> Node | None:
    """Build a list of `size` nodes: 0 first, then (index % 5) - 2."""
    if size <= 0:
        return None
    head: Node | None = None
    for index in reversed(range(1, size)):
        head = Node(index % 5 - 2, head)
    return Node(0, head)


def length_iterative(head: Node | None) -> int:
    """Count the nodes by walking the list."""
    count = 0
    while head is not None:
        count += 1
        head = head.next
    return count


def length_recursive(head: Node | None) -> int:
    """Count the nodes by plain recursion; deep lists raise RecursionError."""
    if head is None:
        return 0
    return 1 + length_recursive(head.next)


_Step = Union[int, Callable[[], "_Step"]]


def _accumulate(head: Node | None, acc: int) -> _Step:
    if head is None:
        return acc
    return lambda: _accumulate(head.next, acc + 1)


def length_tail_recursive(head: Node | None) -> int:
    """Count the nodes with an accumulating tail call, run on a trampoline."""
    step: _Step = _accumulate(head, 0)
    while callable(step):
        step = step()
    return step


def time_length(
    size: int, name: str, length_func: Callable[[Node | None], int]
) -> tuple[int, float]:
    """Build a list of `size` nodes and time `length_func` on it.

    Returns the length it reported and the processor time it took in seconds.
    `name` labels the measurement and is not otherwise used.
    """
    head = build_list(size)
    started = time.process_time()
    length = length_func(head)
    elapsed = time.process_time() - started
    return length, elapsed


def main(argv: list[str] | None = None) -> int:
    """Time the three length functions on a large list."""
    parser = argparse.ArgumentParser(description="Compare list length functions.")
    parser.add_argument("size", nargs="?", type=int, default=DEFAULT_SIZE)
    args = parser.parse_args(argv)

    functions = (
        ("Iterative", length_iterative),
        ("Tail Recursive", length_tail_recursive),
        ("Stack Recursive", length_recursive),
    )
    for name, func in functions:
        try:
            length, elapsed = time_length(args.size, name, func)
        except RecursionError:
            print(f"Size: - | {name:>20}: recursion limit exceeded")
        else:
            print(f"Size: {length} | {name:>20}: {elapsed:.6f} sec")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())