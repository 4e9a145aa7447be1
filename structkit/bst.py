"""A binary search tree with traversals, mirroring and Graphviz output."""

from __future__ import annotations

import subprocess
from collections import deque
from dataclasses import dataclass
from typing import Any, Iterable, Iterator

_DOT_HEADER = (
    'digraph BST {{\n'
    '    node [fontname="Arial", shape=circle, style=filled, fillcolor={fill}];\n'
)


@dataclass(eq=False, slots=True)
class TreeNode:
    """One node of a binary tree."""

    value: Any
    left: TreeNode | None = None
    right: TreeNode | None = None


class BinarySearchTree:
    """A binary search tree that ignores duplicate values."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.root: TreeNode | None = None
        for value in values:
            self.insert(value)

    def insert(self, value: Any) -> bool:
        """Insert a value; return False if it was already present."""
        if self.root is None:
            self.root = TreeNode(value)
            return True
        node = self.root
        while True:
            if node.value == value:
                return False
            if value < node.value:
                if node.left is None:
                    node.left = TreeNode(value)
                    return True
                node = node.left
            else:
                if node.right is None:
                    node.right = TreeNode(value)
                    return True
                node = node.right

    def _preorder_nodes(self) -> Iterator[TreeNode]:
        stack = [self.root] if self.root is not None else []
        while stack:
            node = stack.pop()
            yield node
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def _inorder_nodes(self) -> Iterator[TreeNode]:
        stack: list[TreeNode] = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node
            node = node.right

    def preorder(self) -> list[Any]:
        """Return the values in root, left, right order."""
        return [node.value for node in self._preorder_nodes()]

    def inorder(self) -> list[Any]:
        """Return the values in left, root, right order."""
        return [node.value for node in self._inorder_nodes()]

    def postorder(self) -> list[Any]:
        """Return the values in left, right, root order."""
        reverse: list[Any] = []
        stack = [self.root] if self.root is not None else []
        while stack:
            node = stack.pop()
            reverse.append(node.value)
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
        reverse.reverse()
        return reverse

    def __len__(self) -> int:
        return sum(1 for _ in self._preorder_nodes())

    def __iter__(self) -> Iterator[Any]:
        """Iterate over the values in ascending (inorder) order."""
        return (node.value for node in self._inorder_nodes())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.preorder()!r})"

    def max_depth(self) -> int:
        """Return the number of edges on the longest root-to-leaf path (-1 if empty)."""
        depth = -1
        level = deque([self.root] if self.root is not None else [])
        while level:
            depth += 1
            for _ in range(len(level)):
                node = level.popleft()
                if node.left is not None:
                    level.append(node.left)
                if node.right is not None:
                    level.append(node.right)
        return depth

    def mirror(self) -> None:
        """Swap the left and right children of every node, in place."""
        for node in list(self._preorder_nodes()):
            node.left, node.right = node.right, node.left

    @staticmethod
    def _compare(
        first: TreeNode | None, second: TreeNode | None, mirrored: bool
    ) -> bool:
        stack = [(first, second)]
        while stack:
            a, b = stack.pop()
            if a is None and b is None:
                continue
            if a is None or b is None or a.value != b.value:
                return False
            if mirrored:
                stack.append((a.left, b.right))
                stack.append((a.right, b.left))
            else:
                stack.append((a.left, b.left))
                stack.append((a.right, b.right))
        return True

    def is_same(self, other: BinarySearchTree) -> bool:
        """Return whether both trees have the same shape and values."""
        return self._compare(self.root, other.root, mirrored=False)

    def is_mirror(self, other: BinarySearchTree) -> bool:
        """Return whether the other tree is the mirror image of this one."""
        return self._compare(self.root, other.root, mirrored=True)

    def is_valid(self) -> bool:
        """Return whether every node respects the search-tree ordering."""
        stack: list[tuple[TreeNode | None, Any, Any]] = [(self.root, None, None)]
        while stack:
            node, low, high = stack.pop()
            if node is None:
                continue
            if low is not None and not node.value > low:
                return False
            if high is not None and not node.value < high:
                return False
            stack.append((node.left, low, node.value))
            stack.append((node.right, node.value, high))
        return True

    def clear(self) -> None:
        """Remove every node from the tree."""
        self.root = None


def to_dot(tree: BinarySearchTree, fill: str = "green") -> str:
    """Describe the tree as a Graphviz digraph with nodes filled in `fill`."""
    lines = [_DOT_HEADER.format(fill=fill)]
    stack: list[tuple[TreeNode | None, TreeNode]] = (
        [(None, tree.root)] if tree.root is not None else []
    )
    while stack:
        parent, node = stack.pop()
        if parent is not None:
            lines.append(f"    {parent.value} -> {node.value};\n")
        if node.right is not None:
            stack.append((node, node.right))
        if node.left is not None:
            stack.append((node, node.left))
    lines.append("}\n")
    return "".join(lines)


def render_png(dot_text: str, output: str) -> None:
    """Lay out a Graphviz description and write it as a PNG image.

    Runs `dot` and feeds its result to `neato -n -Tpng`; raises
    FileNotFoundError if Graphviz is missing and CalledProcessError on failure.
    """
    laid_out = subprocess.run(
        ["dot"], input=dot_text, capture_output=True, text=True, check=True
    )
    subprocess.run(
        ["neato", "-n", "-Tpng", "-o", output],
        input=laid_out.stdout,
        capture_output=True,
        text=True,
        check=True,
    )