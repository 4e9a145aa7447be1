"""A self-balancing AVL search tree ordered by a three-way compare function."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Iterator

Compare = Callable[[Any, Any], int]


def default_compare(a: Any, b: Any) -> int:
    """Three-way comparison: negative, zero or positive as a <, ==, > b."""
    return (a > b) - (a < b)


@dataclass(eq=False, slots=True)
class AVLNode:
    """One node of an AVL tree; `height` counts nodes on the longest downward path."""

    elem: Any
    height: int = 1
    left: AVLNode | None = field(default=None, repr=False)
    right: AVLNode | None = field(default=None, repr=False)
    parent: AVLNode | None = field(default=None, repr=False)


def _height(node: AVLNode | None) -> int:
    return 0 if node is None else node.height


def _refresh(node: AVLNode) -> None:
    node.height = max(_height(node.left), _height(node.right)) + 1


class AVLTree:
    """An AVL tree; equal elements are kept and placed to the right."""

    def __init__(self, compare: Compare = default_compare) -> None:
        self.compare = compare
        self.root: AVLNode | None = None
        self._size = 0

    def is_empty(self) -> bool:
        """Return whether the tree holds no elements."""
        return self.root is None

    def _replace_child(self, old: AVLNode, new: AVLNode) -> None:
        parent = old.parent
        new.parent = parent
        if parent is None:
            self.root = new
        elif parent.left is old:
            parent.left = new
        else:
            parent.right = new

    def _rotate_left(self, x: AVLNode) -> None:
        y = x.right
        if y is None:
            return
        self._replace_child(x, y)
        x.right = y.left
        if y.left is not None:
            y.left.parent = x
        y.left = x
        x.parent = y
        _refresh(x)
        _refresh(y)

    def _rotate_right(self, y: AVLNode) -> None:
        x = y.left
        if x is None:
            return
        self._replace_child(y, x)
        y.left = x.right
        if x.right is not None:
            x.right.parent = y
        x.right = y
        y.parent = x
        _refresh(y)
        _refresh(x)

    def insert(self, elem: Any) -> None:
        """Insert an element and rebalance the path back to the root."""
        if elem is None:
            raise ValueError("cannot insert None into an AVL tree")
        compare = self.compare

        parent: AVLNode | None = None
        node = self.root
        while node is not None:
            parent = node
            node = node.left if compare(elem, node.elem) < 0 else node.right

        new = AVLNode(elem, parent=parent)
        if parent is None:
            self.root = new
        elif compare(elem, parent.elem) < 0:
            parent.left = new
        else:
            parent.right = new
        self._size += 1

        node = parent
        while node is not None:
            _refresh(node)
            balance = _height(node.left) - _height(node.right)
            if balance > 1:
                order = compare(elem, node.left.elem)
                if order < 0:
                    self._rotate_right(node)
                elif order > 0:
                    self._rotate_left(node.left)
                    self._rotate_right(node)
            elif balance < -1:
                order = compare(elem, node.right.elem)
                if order > 0:
                    self._rotate_left(node)
                elif order < 0:
                    self._rotate_right(node.right)
                    self._rotate_left(node)
            node = node.parent

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        """Iterate over the elements in the order of the compare function."""
        stack: list[AVLNode] = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.elem
            node = node.right

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def height(self) -> int:
        """Return the number of nodes on the longest root-to-leaf path (0 if empty)."""
        return _height(self.root)

    def is_balanced(self) -> bool:
        """Return whether every node's subtrees differ in height by at most one."""

        def measure(node: AVLNode | None) -> int:
            if node is None:
                return 0
            left = measure(node.left)
            if left < 0:
                return -1
            right = measure(node.right)
            if right < 0 or abs(left - right) > 1:
                return -1
            return max(left, right) + 1

        return measure(self.root) >= 0

    def clear(self) -> None:
        """Remove every element from the tree."""
        self.root = None
        self._size = 0