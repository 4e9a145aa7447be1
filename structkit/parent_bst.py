"""A binary search tree whose nodes link back to their parents."""

from __future__ import annotations

import subprocess
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterable, Iterator

__all__ = ["Node", "ParentBST", "to_dot", "render_png"]

_NODE_STYLE = 'fontname="Arial", shape=circle, style=filled'


@dataclass(eq=False, slots=True)
class Node:
    """One node of a search tree, linked to its children and its parent."""

    value: Any
    left: Node | None = field(default=None, repr=False)
    right: Node | None = field(default=None, repr=False)
    parent: Node | None = field(default=None, repr=False)


class ParentBST:
    """A binary search tree that ignores duplicates and keeps parent links."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.root: Node | None = None
        for value in values:
            self.insert(value)

    def is_empty(self) -> bool:
        """Return whether the tree holds no nodes."""
        return self.root is None

    def insert(self, value: Any) -> bool:
        """Insert a value; return False if it was already present."""
        if self.root is None:
            self.root = Node(value)
            return True
        node = self.root
        while True:
            if value < node.value:
                if node.left is None:
                    node.left = Node(value, parent=node)
                    return True
                node = node.left
            elif value > node.value:
                if node.right is None:
                    node.right = Node(value, parent=node)
                    return True
                node = node.right
            else:
                return False

    def _transplant(self, old: Node, new: Node | None) -> None:
        parent = old.parent
        if parent is None:
            self.root = new
        elif parent.left is old:
            parent.left = new
        else:
            parent.right = new
        if new is not None:
            new.parent = parent

    def delete(self, value: Any) -> bool:
        """Remove a value; return whether it was present.

        A node with two children takes the value of its inorder successor,
        whose node is removed in its place.
        """
        node = self.find(value)
        if node is None:
            return False
        if node.left is None:
            self._transplant(node, node.right)
        elif node.right is None:
            self._transplant(node, node.left)
        else:
            heir = self._min_node(node.right)
            node.value = heir.value
            self._transplant(heir, heir.right)
        return True

    def __contains__(self, value: Any) -> bool:
        return self.find(value) is not None

    def find(self, value: Any) -> Node | None:
        """Return the node holding a value, or None."""
        node = self.root
        while node is not None and node.value != value:
            node = node.left if value < node.value else node.right
        return node

    @staticmethod
    def _min_node(node: Node) -> Node:
        while node.left is not None:
            node = node.left
        return node

    @staticmethod
    def _max_node(node: Node) -> Node:
        while node.right is not None:
            node = node.right
        return node

    def minimum(self) -> Node | None:
        """Return the node with the smallest value, or None if empty."""
        return None if self.root is None else self._min_node(self.root)

    def maximum(self) -> Node | None:
        """Return the node with the largest value, or None if empty."""
        return None if self.root is None else self._max_node(self.root)

    def successor(self, value: Any) -> Node | None:
        """Return the node that follows a value in order, or None."""
        node = self.find(value)
        if node is None:
            return None
        if node.right is not None:
            return self._min_node(node.right)
        parent = node.parent
        while parent is not None and node is parent.right:
            node, parent = parent, parent.parent
        return parent

    def predecessor(self, value: Any) -> Node | None:
        """Return the node that precedes a value in order, or None."""
        node = self.find(value)
        if node is None:
            return None
        if node.left is not None:
            return self._max_node(node.left)
        parent = node.parent
        while parent is not None and node is parent.left:
            node, parent = parent, parent.parent
        return parent

    def lowest_common_ancestor(self, value1: Any, value2: Any) -> Node | None:
        """Return the deepest node whose value lies between the two values.

        The values themselves need not be present; None only for an empty tree.
        """
        node = self.root
        while node is not None:
            if node.value > value1 and node.value > value2:
                node = node.left
            elif node.value < value1 and node.value < value2:
                node = node.right
            else:
                return node
        return None

    def height(self) -> int:
        """Return the number of nodes on the longest root-to-leaf path."""
        best = 0
        stack = [(self.root, 1)] if self.root is not None else []
        while stack:
            node, depth = stack.pop()
            best = max(best, depth)
            for child in (node.left, node.right):
                if child is not None:
                    stack.append((child, depth + 1))
        return best

    def is_valid(self) -> bool:
        """Return whether ordering and parent links hold at every node."""
        if self.root is not None and self.root.parent is not None:
            return False
        stack: list[tuple[Node | None, Any, Any]] = [(self.root, None, None)]
        while stack:
            node, low, high = stack.pop()
            if node is None:
                continue
            if low is not None and not node.value > low:
                return False
            if high is not None and not node.value < high:
                return False
            for child in (node.left, node.right):
                if child is not None and child.parent is not node:
                    return False
            stack.append((node.left, low, node.value))
            stack.append((node.right, node.value, high))
        return True

    def __iter__(self) -> Iterator[Any]:
        """Iterate over the values in ascending order."""
        stack: list[Node] = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.value
            node = node.right

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def clear(self) -> None:
        """Remove every node from the tree."""
        self.root = None


def to_dot(
    tree: ParentBST,
    fill: str = "green",
    highlights: Mapping[Any, str] | Iterable[tuple[Any, str]] = (),
) -> str:
    """Describe the tree as a Graphviz digraph.

    Nodes are filled with `fill`; each (value, color) in `highlights` adds a
    line that colors that value's node, in the order given.
    """
    lines = [
        "digraph BST {\n",
        f"    node [{_NODE_STYLE}, fillcolor={fill}];\n",
    ]
    if tree.root is not None:
        stack: list[tuple[Node | None, Node]] = [(None, tree.root)]
        while stack:
            parent, node = stack.pop()
            if parent is not None:
                lines.append(f"    {parent.value} -> {node.value};\n")
            if node.right is not None:
                stack.append((node, node.right))
            if node.left is not None:
                stack.append((node, node.left))
        pairs = highlights.items() if isinstance(highlights, Mapping) else highlights
        for value, color in pairs:
            lines.append(f"    {value} [{_NODE_STYLE}, fillcolor={color}];\n")
    lines.append("}\n")
    return "".join(lines)


def render_png(dot_text: str, output: str | Path) -> Path:
    """Lay out a digraph with dot, draw it with neato and return the image path.

    Raises subprocess.CalledProcessError if either program fails.
    """
    laid_out = subprocess.run(
        ["dot"], input=dot_text, capture_output=True, text=True, check=True
    )
    subprocess.run(
        ["neato", "-n", "-Tpng", "-o", str(output)],
        input=laid_out.stdout,
        capture_output=True,
        text=True,
        check=True,
    )
    return Path(output)