"""A first-in, first-out queue and a radix sort built on it."""

from __future__ import annotations

import argparse
import re
import sys
from collections import deque
from typing import Any, Iterable, Iterator

DEFAULT_INPUT = "../data/input-radix-sort.csv"

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class EmptyQueueError(IndexError):
    """Raised when an empty queue is asked for or loses its front element."""


class Queue:
    """A first-in, first-out collection."""

    __slots__ = ("_items",)

    def __init__(self) -> None:
        self._items: deque[Any] = deque()

    def enqueue(self, elem: Any) -> None:
        """Add an element at the rear of the queue."""
        self._items.append(elem)

    def dequeue(self) -> Any:
        """Remove the front element and return it."""
        if not self._items:
            raise EmptyQueueError("cannot dequeue from an empty queue")
        return self._items.popleft()

    def front(self) -> Any:
        """Return the front element without removing it."""
        if not self._items:
            raise EmptyQueueError("front of an empty queue")
        return self._items[0]

    def rear(self) -> Any:
        """Return the rear element without removing it."""
        if not self._items:
            raise EmptyQueueError("rear of an empty queue")
        return self._items[-1]

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Iterate from the front of the queue to the rear."""
        return iter(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"


def digit_count(number: int) -> int:
    """Return the number of decimal digits of an integer (0 has one)."""
    return len(str(abs(number)))


def radix_sort(values: Iterable[int]) -> list[int]:
    """Return the non-negative integers sorted by least-significant-digit radix sort."""
    result = list(values)
    if not result:
        return result
    if any(value < 0 for value in result):
        raise ValueError("radix sort needs non-negative integers")

    buckets = [Queue() for _ in range(10)]
    place = 1
    for _ in range(digit_count(max(result))):
        for value in result:
            buckets[value // place % 10].enqueue(value)
        result = []
        for bucket in buckets:
            while bucket:
                result.append(bucket.dequeue())
        place *= 10
    return result


def _to_int(token: str) -> int:
    match = _LEADING_INT.match(token)
    return int(match.group(1)) if match else 0


def parse_csv_line(line: str) -> list[int]:
    """Split a line on commas and read the leading integer of each field.

    Empty fields are skipped; a field without a leading integer reads as 0.
    """
    for index, char in enumerate(line):
        if char in "\r\n":
            line = line[:index]
            break
    return [_to_int(token) for token in line.split(",") if token]


def _format(values: Iterable[int]) -> str:
    return "".join(f"{value} " for value in values)


def main(argv: list[str] | None = None) -> int:
    """Radix-sort each line of a comma-separated file and print the results."""
    parser = argparse.ArgumentParser(description="Radix sort lines of integers.")
    parser.add_argument("path", nargs="?", default=DEFAULT_INPUT)
    args = parser.parse_args(argv)
    try:
        with open(args.path, encoding="utf-8") as handle:
            lines = handle.readlines()
    except OSError:
        print("Error: Unable to open input file.", file=sys.stderr)
        return 1

    count = 0
    for line in lines:
        values = parse_csv_line(line)
        if not values:
            continue
        count += 1
        try:
            ordered = radix_sort(values)
        except ValueError as error:
            print(f"Error: {error}.", file=sys.stderr)
            return 1
        print(f"Input array {count}:\t{_format(values)}")
        print(f"Sorted array {count}:\t{_format(ordered)}")
        print()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())