"""A sorted collection of unique elements, with set algebra and small demos."""

from __future__ import annotations

import argparse
import heapq
from bisect import bisect_left
from itertools import groupby
from typing import Any, Iterable, Iterator


class OrderedSet:
    """A set that keeps its elements in ascending order."""

    __slots__ = ("_elements",)

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._elements: list[Any] = []
        for item in items:
            self.add(item)

    @classmethod
    def _from_sorted(cls, elements: Iterable[Any]) -> OrderedSet:
        """Build a set from elements already sorted and free of duplicates."""
        new = cls()
        new._elements = list(elements)
        return new

    def _locate(self, element: Any) -> tuple[int, bool]:
        index = bisect_left(self._elements, element)
        found = index < len(self._elements) and self._elements[index] == element
        return index, found

    def add(self, element: Any) -> None:
        """Insert an element at its sorted position unless it is already present."""
        index, found = self._locate(element)
        if not found:
            self._elements.insert(index, element)

    def __contains__(self, element: Any) -> bool:
        return self._locate(element)[1]

    def __iter__(self) -> Iterator[Any]:
        return iter(self._elements)

    def __len__(self) -> int:
        return len(self._elements)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OrderedSet):
            return NotImplemented
        return self._elements == other._elements

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._elements!r})"

    def union(self, other: OrderedSet) -> OrderedSet:
        """Return a new set holding the elements of either set."""
        merged = heapq.merge(self._elements, other._elements)
        return OrderedSet._from_sorted(key for key, _ in groupby(merged))

    def intersection(self, other: OrderedSet) -> OrderedSet:
        """Return a new set holding the elements found in both sets."""
        merged = heapq.merge(self._elements, other._elements)
        return OrderedSet._from_sorted(
            key for key, group in groupby(merged) if len(list(group)) > 1
        )


def letters(word: str) -> OrderedSet:
    """Return the distinct characters of a word in sorted order."""
    return OrderedSet(word)


def multiples(start: int, end: int, divisor: int) -> OrderedSet:
    """Return the multiples of divisor in the closed range [start, end]."""
    if divisor == 0:
        raise ValueError("divisor must not be zero")
    if start > end:
        raise ValueError(f"empty range: {start} > {end}")
    return OrderedSet._from_sorted(
        number for number in range(start, end + 1) if number % divisor == 0
    )


def describe_letters(ordered: OrderedSet | None) -> str:
    """Describe a set of characters: its size followed by its elements."""
    if ordered is None:
        return "Set is empty."
    return f"There are {len(ordered)} letters:" + "".join(f" {c}" for c in ordered)


def describe_numbers(ordered: OrderedSet | None) -> str:
    """Describe a set of numbers: its size followed by its elements."""
    if not ordered:
        return "The set is empty."
    return f"There are {len(ordered)} elements:" + "".join(f" {n}" for n in ordered)


def _letters_demo() -> None:
    first = letters("mississippi")
    print(f"mississippi: {describe_letters(first)}")
    second = letters("small")
    print(f"small: {describe_letters(second)}")
    print(f"Union: {describe_letters(first.union(second))}")
    print(f"Intersection: {describe_letters(first.intersection(second))}")


def _numbers_demo() -> None:
    first = multiples(4, 25, 3)
    print(f"Multiples of 3 in the range [4, 25]:\n {describe_numbers(first)}")
    second = multiples(5, 30, 4)
    print(f"Multiples of 4 in the range [5, 30]:\n {describe_numbers(second)}")
    print(f"Union: {describe_numbers(first.union(second))}")
    print(f"Intersection: {describe_numbers(first.intersection(second))}")


def main(argv: list[str] | None = None) -> int:
    """Run the ordered-set demonstrations."""
    parser = argparse.ArgumentParser(description="Ordered set demonstrations.")
    parser.add_argument(
        "demo",
        nargs="?",
        choices=("letters", "numbers", "all"),
        default="all",
        help="which demonstration to run",
    )
    args = parser.parse_args(argv)
    if args.demo in ("letters", "all"):
        _letters_demo()
    if args.demo in ("numbers", "all"):
        _numbers_demo()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())