"""Classic searching and sorting algorithms, linked lists, binary search trees,
stacks, queues and maze traversal."""

__version__ = "0.1.0"

__all__ = [
    "bst",
    "expression",
    "linked_list",
    "maze",
    "searching",
    "sorting",
    "stacks",
]