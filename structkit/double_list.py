"""A doubly linked list, palindrome checks and small demonstrations."""

from __future__ import annotations

import argparse
import sys
from itertools import islice, takewhile
from typing import Any, Iterable, Iterator

DEFAULT_INPUT = "../data/input"


class _Node:
    __slots__ = ("elem", "next", "prev")

    def __init__(self, elem: Any) -> None:
        self.elem = elem
        self.next: _Node | None = None
        self.prev: _Node | None = None


class DoublyLinkedList:
    """A sequence linked in both directions."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._first: _Node | None = None
        self._last: _Node | None = None
        self._size = 0
        for item in items:
            self._append(item)

    def _append(self, elem: Any) -> None:
        node = _Node(elem)
        if self._last is None:
            self._first = self._last = node
        else:
            node.prev = self._last
            self._last.next = node
            self._last = node
        self._size += 1

    def _nodes(self) -> Iterator[_Node]:
        node = self._first
        while node is not None:
            yield node
            node = node.next

    def insert_at(self, elem: Any, pos: int) -> None:
        """Insert an element so that it ends up at index `pos` (0..len)."""
        if not 0 <= pos <= self._size:
            raise IndexError(f"position {pos} out of range 0..{self._size}")
        if pos == self._size:
            self._append(elem)
            return
        current = next(islice(self._nodes(), pos, None))
        node = _Node(elem)
        node.next = current
        node.prev = current.prev
        if current.prev is None:
            self._first = node
        else:
            current.prev.next = node
        current.prev = node
        self._size += 1

    def delete_once(self, elem: Any) -> bool:
        """Remove the first occurrence of an element; return whether one was found."""
        for node in self._nodes():
            if node.elem == elem:
                break
        else:
            return False
        if node.prev is None:
            self._first = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self._last = node.prev
        else:
            node.next.prev = node.prev
        self._size -= 1
        return True

    def __contains__(self, elem: Any) -> bool:
        return any(item == elem for item in self)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        return (node.elem for node in self._nodes())

    def __reversed__(self) -> Iterator[Any]:
        node = self._last
        while node is not None:
            yield node.elem
            node = node.prev

    def first(self) -> Any:
        """Return the element at the head of the list."""
        if self._first is None:
            raise IndexError("first() of an empty list")
        return self._first.elem

    def last(self) -> Any:
        """Return the element at the tail of the list."""
        if self._last is None:
            raise IndexError("last() of an empty list")
        return self._last.elem

    def format(self) -> str:
        """Render the list head to tail as "[a, b, c]"."""
        return "[" + ", ".join(str(item) for item in self) + "]"

    def format_reversed(self) -> str:
        """Render the list tail to head as "[c, b, a]"."""
        return "[" + ", ".join(str(item) for item in reversed(self)) + "]"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"


def is_palindrome(items: Iterable[Any]) -> bool:
    """Return whether a non-empty sequence reads the same in both directions."""
    seq = items if isinstance(items, DoublyLinkedList) else DoublyLinkedList(items)
    if not seq:
        return False
    pairs = islice(zip(seq, reversed(seq)), len(seq) // 2)
    return all(left == right for left, right in pairs)


def deletion_demo(text: str) -> list[str]:
    """Show deletions of the first, last and middle characters of a string.

    Returns the rendered list after building it and after each deletion; the
    removed character is put back before the next deletion.
    """
    if not text:
        raise ValueError("text must not be empty")
    chars = DoublyLinkedList(text)
    steps = [chars.format()]

    chars.delete_once(text[0])
    steps.append(chars.format())

    chars.insert_at(text[0], 0)
    chars.delete_once(text[-1])
    steps.append(chars.format())

    chars.insert_at(text[-1], len(text) - 1)
    chars.delete_once(text[(len(text) - 1) // 2])
    steps.append(chars.format())
    return steps


def _strip_line_end(line: str) -> str:
    for index, char in enumerate(line):
        if char in "\r\n":
            return line[:index]
    return line


def check_palindromes(lines: Iterable[str]) -> Iterator[str]:
    """Report for each line, up to the first empty one, whether it is a palindrome."""
    texts = takewhile(bool, (_strip_line_end(line) for line in lines))
    for count, text in enumerate(texts, start=1):
        chars = DoublyLinkedList(text)
        verdict = "is a palindrome." if is_palindrome(chars) else "is NOT a palindrome."
        yield f'Input{count}: "{text}" --- List: {chars.format()} {verdict}'


def _run_demo() -> int:
    try:
        text = input("Enter a string of characters: ")
    except EOFError:
        text = ""
    try:
        generated, first, last, middle = deletion_demo(_strip_line_end(text))
    except ValueError as error:
        print(f"Error: {error}.", file=sys.stderr)
        return 1
    print(f"Generated list: {generated}\n")
    print(f"List after deleting the first character: {first}")
    print(f"List after deleting the last character: {last}")
    print(f"List after deleting the middle character: {middle}")
    return 0


def _run_palindromes(path: str) -> int:
    try:
        with open(path, encoding="utf-8") as handle:
            for report in check_palindromes(handle):
                print(report)
    except OSError:
        print(f"Error: Could not open file '{path}'.", file=sys.stderr)
        return 1
    return 0


def main(argv: list[str] | None = None) -> int:
    """Run the deletion demonstration or check a file of lines for palindromes."""
    parser = argparse.ArgumentParser(description="Doubly linked list demonstrations.")
    commands = parser.add_subparsers(dest="command", required=True)
    commands.add_parser("demo", help="delete characters from a typed string")
    palindromes = commands.add_parser("palindromes", help="check lines of a file")
    palindromes.add_argument("path", nargs="?", default=DEFAULT_INPUT)
    args = parser.parse_args(argv)
    if args.command == "demo":
        return _run_demo()
    return _run_palindromes(args.path)


if __name__ == "__main__":
    raise SystemExit(main())