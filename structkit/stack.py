"""A last-in, first-out stack and a bracket-balance checker built on it."""

from __future__ import annotations

import argparse
import sys
from typing import Any, Iterator

DEFAULT_INPUT = "../data/input-parantheses.txt"

_PAIRS = {")": "(", "]": "[", "}": "{"}
_OPENERS = frozenset(_PAIRS.values())


class EmptyStackError(IndexError):
    """Raised when an empty stack is asked for or loses its top element."""


class Stack:
    """A last-in, first-out collection."""

    __slots__ = ("_items",)

    def __init__(self) -> None:
        self._items: list[Any] = []

    def push(self, elem: Any) -> None:
        """Put an element on top of the stack."""
        self._items.append(elem)

    def pop(self) -> Any:
        """Remove the top element and return it."""
        if not self._items:
            raise EmptyStackError("cannot pop from an empty stack")
        return self._items.pop()

    def top(self) -> Any:
        """Return the top element without removing it."""
        if not self._items:
            raise EmptyStackError("top of an empty stack")
        return self._items[-1]

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Iterate from the top of the stack down to the bottom."""
        return reversed(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"


def is_balanced(text: str) -> bool:
    """Return whether the brackets (), [] and {} in text are properly nested.

    Characters other than brackets are ignored.
    """
    stack = Stack()
    for char in text:
        if char in _OPENERS:
            stack.push(char)
        elif char in _PAIRS:
            if not stack or stack.pop() != _PAIRS[char]:
                return False
    return not stack


def _strip_line_end(line: str) -> str:
    for index, char in enumerate(line):
        if char in "\r\n":
            return line[:index]
    return line


def main(argv: list[str] | None = None) -> int:
    """Report for each non-empty line of a file whether its brackets balance."""
    parser = argparse.ArgumentParser(description="Check bracket balance per line.")
    parser.add_argument("path", nargs="?", default=DEFAULT_INPUT)
    args = parser.parse_args(argv)
    try:
        with open(args.path, encoding="utf-8") as handle:
            for raw in handle:
                line = _strip_line_end(raw)
                if not line:
                    continue
                verdict = "is balanced." if is_balanced(line) else "not balanced."
                print(f"{line} ---> {verdict}")
    except OSError:
        print(f"Error: Could not open {args.path}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())