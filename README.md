# structkit

A small collection of classic data structures, each with the algorithms that
show it at work:

| Module | What it offers |
| --- | --- |
| `structkit.ordered_set` | `OrderedSet`: a sorted set of unique elements with `union` and `intersection`, plus `letters`, `multiples`, `describe_letters` and `describe_numbers` |
| `structkit.sorted_list` | `SortedList`: values kept in ascending order (duplicates allowed) with `insert`, `remove_once` and `nth`, plus `naturals` and a sieve-based `primes` |
| `structkit.linked_length` | `Node`, `build_list` and three ways of measuring a linked list's length (`length_iterative`, `length_recursive`, `length_tail_recursive`), with `time_length` to compare them |
| `structkit.double_list` | `DoublyLinkedList` with `insert_at`, `delete_once`, `format` and `format_reversed`, plus `is_palindrome`, `deletion_demo` and `check_palindromes` |
| `structkit.stack` | `Stack` (raising `EmptyStackError` when empty) and the bracket checker `is_balanced` |
| `structkit.queue` | `Queue` (raising `EmptyQueueError` when empty), `digit_count`, `radix_sort` and `parse_csv_line` |
| `structkit.bst` | `BinarySearchTree` with traversals, `max_depth`, `mirror`, `is_same` / `is_mirror`, and Graphviz output via `to_dot` / `render_png` |
| `structkit.parent_bst` | `ParentBST`, a search tree whose nodes know their parent: `successor`, `predecessor`, `delete`, `lowest_common_ancestor`, plus `to_dot` with highlighted nodes and `render_png` |
| `structkit.avl` | `AVLTree`, a self-balancing tree ordered by a three-way compare function such as `default_compare` |

The package has no runtime dependencies. It needs Python 3.10 or later.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Using the library

```python
from structkit.ordered_set import letters
from structkit.stack import Stack, is_balanced

word = letters("mississippi")
print(list(word))                 # ['i', 'm', 'p', 's']
common = word.intersection(letters("small"))
print(list(common))               # ['s']

stack = Stack()
stack.push(1)
stack.push(2)
print(stack.top())                # 2
print(len(stack))                 # 2

print(is_balanced("([]{})"))      # True
print(is_balanced("(]"))          # False
```

Search trees are built from an iterable of values; duplicates are ignored:

```python
from structkit.parent_bst import ParentBST

tree = ParentBST([7, 5, 9, 4, 10, 6, 8, -8, 12])
print(list(tree))                 # [-8, 4, 5, 6, 7, 8, 9, 10, 12]
print(6 in tree)                  # True
print(tree.successor(7).value)    # 8
```

`AVLTree` keeps equal elements (placing them to the right) and takes any
three-way compare function:

```python
from structkit.avl import AVLTree

tree = AVLTree()
for n in (5, 3, 2, 4, 7, 6, 8):
    tree.insert(n)
print(list(tree), tree.is_balanced())
```

`radix_sort` accepts only non-negative integers and raises `ValueError`
otherwise. `render_png` in `structkit.bst` and `structkit.parent_bst` hands
DOT text to the Graphviz `dot` and `neato` programs, so Graphviz must be
installed to produce images; `to_dot` on its own needs nothing beyond Python.

## Command-line tools

Installing the package provides these commands:

- `structkit-ordered-set [letters|numbers|all]` – the letter sets of "mississippi" and "small" with their union and intersection, and the same for the multiples of 3 in [4, 25] and of 4 in [5, 30].
- `structkit-primes [LIMIT]` – prints the primes up to LIMIT (100 by default).
- `structkit-list-length [SIZE]` – times the iterative, tail-recursive and plainly recursive length functions on a list of SIZE nodes (200000 by default); the plain recursion reports when it exceeds Python's recursion limit.
- `structkit-double-list demo` – reads a line from standard input and shows the list after deleting its first, last and middle characters.
- `structkit-double-list palindromes [PATH]` – reports for each line of a file, up to the first empty line, whether it is a palindrome (default path `../data/input`).
- `structkit-brackets [PATH]` – reports for each non-empty line of a file whether its brackets are balanced (default path `../data/input-parantheses.txt`).
- `structkit-radix-sort [PATH]` – reads comma-separated rows of integers and prints each row before and after radix sorting (default path `../data/input-radix-sort.csv`).

## What the package does not do

- The search trees in `structkit.bst`, `structkit.parent_bst` and `structkit.avl` have no command-line tools; they are used from Python only.
- `BinarySearchTree` and `AVLTree` offer no deletion, and `AVLTree` has no lookup beyond iterating over it.
- No input files are shipped; the file-reading commands need a path to data you provide.