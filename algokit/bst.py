"""An unbalanced binary search tree."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class TreeNode:
    """A tree node holding a value and two children."""

    value: Any
    left: TreeNode | None = None
    right: TreeNode | None = None


def _leftmost(node: TreeNode) -> TreeNode:
    while node.left is not None:
        node = node.left
    return node


def _delete(node: TreeNode | None, key: Any) -> TreeNode | None:
    if node is None:
        raise KeyError(key)
    if key < node.value:
        node.left = _delete(node.left, key)
    elif key > node.value:
        node.right = _delete(node.right, key)
    elif node.left is None:
        return node.right
    elif node.right is None:
        return node.left
    else:
        successor = _leftmost(node.right)
        node.value = successor.value
        node.right = _delete(node.right, successor.value)
    return node


def _inorder(node: TreeNode | None) -> Iterator[Any]:
    if node is not None:
        yield from _inorder(node.left)
        yield node.value
        yield from _inorder(node.right)


def _preorder(node: TreeNode | None) -> Iterator[Any]:
    if node is not None:
        yield node.value
        yield from _preorder(node.left)
        yield from _preorder(node.right)


def _postorder(node: TreeNode | None) -> Iterator[Any]:
    if node is not None:
        yield from _postorder(node.left)
        yield from _postorder(node.right)
        yield node.value


def _height(node: TreeNode | None) -> int:
    if node is None:
        return 0
    return max(_height(node.left), _height(node.right)) + 1


class BinarySearchTree:
    """Binary search tree; equal values go to the right subtree."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.root: TreeNode | None = None
        for value in values:
            self.insert(value)

    def insert(self, value: Any) -> TreeNode:
        """Add ``value`` and return its new node."""
        node = TreeNode(value)
        if self.root is None:
            self.root = node
            return node
        current = self.root
        while True:
            if value < current.value:
                if current.left is None:
                    current.left = node
                    return node
                current = current.left
            else:
                if current.right is None:
                    current.right = node
                    return node
                current = current.right

    def search(self, key: Any) -> TreeNode | None:
        """Return the node holding ``key``, or None."""
        current = self.root
        while current is not None and current.value != key:
            current = current.right if current.value < key else current.left
        return current

    def __contains__(self, key: object) -> bool:
        return self.search(key) is not None

    def delete(self, key: Any) -> None:
        """Remove one occurrence of ``key``; raise KeyError if it is absent."""
        self.root = _delete(self.root, key)

    def minimum(self) -> Any:
        """Return the smallest value; raise ValueError if the tree is empty."""
        if self.root is None:
            raise ValueError("minimum of an empty tree")
        return _leftmost(self.root).value

    def inorder(self) -> list[Any]:
        """Values in left, node, right order (ascending)."""
        return list(_inorder(self.root))

    def preorder(self) -> list[Any]:
        """Values in node, left, right order."""
        return list(_preorder(self.root))

    def postorder(self) -> list[Any]:
        """Values in left, right, node order."""
        return list(_postorder(self.root))

    def height(self) -> int:
        """Number of nodes on the longest root-to-leaf path."""
        return _height(self.root)