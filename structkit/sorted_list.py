"""A list that keeps its values in ascending order, and a prime sieve."""

from __future__ import annotations

import argparse
from bisect import bisect_left
from math import isqrt
from typing import Any, Iterable, Iterator


class SortedList:
    """A sequence of values kept in ascending order; duplicates are allowed."""

    __slots__ = ("_values",)

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._values: list[Any] = []
        for value in values:
            self.insert(value)

    @classmethod
    def _from_sorted(cls, values: Iterable[Any]) -> SortedList:
        new = cls()
        new._values = list(values)
        return new

    def insert(self, value: Any) -> None:
        """Insert a value ahead of any equal values already present."""
        self._values.insert(bisect_left(self._values, value), value)

    def remove_once(self, value: Any) -> bool:
        """Remove the first occurrence of a value; return whether one was found."""
        index = bisect_left(self._values, value)
        if index < len(self._values) and self._values[index] == value:
            del self._values[index]
            return True
        return False

    def __contains__(self, value: Any) -> bool:
        index = bisect_left(self._values, value)
        return index < len(self._values) and self._values[index] == value

    def __iter__(self) -> Iterator[Any]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._values!r})"

    def nth(self, n: int) -> Any:
        """Return the n-th smallest value, counting from 1."""
        if not 1 <= n <= len(self._values):
            raise IndexError(f"position {n} out of range 1..{len(self._values)}")
        return self._values[n - 1]


def naturals(start: int, end: int) -> SortedList:
    """Return the integers from start to end inclusive."""
    return SortedList._from_sorted(range(start, end + 1))


def primes(limit: int) -> SortedList:
    """Return the primes up to and including limit, by the sieve of Eratosthenes."""
    if limit < 2:
        return SortedList()
    sieve = bytearray([1]) * (limit + 1)
    sieve[0] = sieve[1] = 0
    for candidate in range(2, isqrt(limit) + 1):
        if sieve[candidate]:
            start = candidate * candidate
            sieve[start::candidate] = bytes(len(range(start, limit + 1, candidate)))
    return SortedList._from_sorted(n for n, flag in enumerate(sieve) if flag)


def main(argv: list[str] | None = None) -> int:
    """Print the primes up to a limit (100 by default)."""
    parser = argparse.ArgumentParser(description="Print prime numbers.")
    parser.add_argument("limit", nargs="?", type=int, default=100)
    args = parser.parse_args(argv)
    print(" ".join(str(p) for p in primes(args.limit)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())