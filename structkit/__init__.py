"""Classic data structures: ordered sets, linked lists, stacks, queues and search trees."""

__version__ = "0.1.0"

__all__ = [
    "avl",
    "bst",
    "double_list",
    "linked_length",
    "ordered_set",
    "parent_bst",
    "queue",
    "sorted_list",
    "stack",
]