"""A singly linked list of values."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class Node:
    """One link of a singly linked list."""

    value: Any
    next: Node | None = None


class LinkedList:
    """Singly linked list with insertion at either end or after a node."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.head: Node | None = None
        for value in values:
            self.append(value)

    def prepend(self, value: Any) -> Node:
        """Insert ``value`` at the front and return its node."""
        self.head = Node(value, self.head)
        return self.head

    def append(self, value: Any) -> Node:
        """Insert ``value`` at the end and return its node."""
        node = Node(value)
        if self.head is None:
            self.head = node
            return node
        last = self.head
        while last.next is not None:
            last = last.next
        last.next = node
        return node

    def insert_after(self, node: Node | None, value: Any) -> Node:
        """Insert ``value`` directly after ``node`` and return the new node."""
        if node is None:
            raise ValueError("cannot insert after a missing node")
        node.next = Node(value, node.next)
        return node.next

    def _nodes(self) -> Iterator[Node]:
        current = self.head
        while current is not None:
            yield current
            current = current.next

    def node_at(self, index: int) -> Node:
        """Return the node at position ``index``."""
        if index >= 0:
            for position, node in enumerate(self._nodes()):
                if position == index:
                    return node
        raise IndexError("linked list index out of range")

    def remove(self, value: Any) -> bool:
        """Unlink the first node holding ``value``; return whether one was found."""
        previous: Node | None = None
        for node in self._nodes():
            if node.value == value:
                if previous is None:
                    self.head = node.next
                else:
                    previous.next = node.next
                return True
            previous = node
        return False

    def __contains__(self, value: object) -> bool:
        return any(item == value for item in self)

    def __iter__(self) -> Iterator[Any]:
        return (node.value for node in self._nodes())

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __str__(self) -> str:
        return " ".join(str(value) for value in self)

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"