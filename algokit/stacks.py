"""A bounded FIFO queue, a stack built from two queues, and two stacks sharing one buffer."""

from __future__ import annotations

from collections import deque
from typing import Any

DEFAULT_CAPACITY = 100


class QueueFullError(OverflowError):
    """Raised when enqueueing onto a queue that is at capacity."""


class QueueEmptyError(IndexError):
    """Raised when dequeueing from an empty queue."""


class StackOverflowError(OverflowError):
    """Raised when pushing onto a stack that has no room left."""


class StackUnderflowError(IndexError):
    """Raised when popping from an empty stack."""


class BoundedQueue:
    """First-in, first-out queue holding at most ``capacity`` items."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError("queue capacity must be positive")
        self.capacity = capacity
        self._items: deque[Any] = deque()

    def enqueue(self, value: Any) -> None:
        """Add ``value`` at the rear."""
        if len(self._items) >= self.capacity:
            raise QueueFullError("queue is full")
        self._items.append(value)

    def dequeue(self) -> Any:
        """Remove and return the item at the front."""
        if not self._items:
            raise QueueEmptyError("queue is empty")
        return self._items.popleft()

    def is_empty(self) -> bool:
        """Whether the queue holds no items."""
        return not self._items

    def __len__(self) -> int:
        return len(self._items)


class QueueStack:
    """Last-in, first-out stack kept in queue order by re-enqueueing on every push."""

    def __init__(self) -> None:
        self._incoming = BoundedQueue()
        self._items = BoundedQueue()

    def push(self, value: Any) -> None:
        """Place ``value`` on top of the stack."""
        if len(self._items) >= self._items.capacity:
            raise QueueFullError("stack is full")
        self._incoming.enqueue(value)
        while not self._items.is_empty():
            self._incoming.enqueue(self._items.dequeue())
        self._incoming, self._items = self._items, self._incoming

    def pop(self) -> Any:
        """Remove and return the top of the stack."""
        if self._items.is_empty():
            raise StackUnderflowError("stack is empty")
        return self._items.dequeue()

    def is_empty(self) -> bool:
        """Whether the stack holds no items."""
        return self._items.is_empty()


class TwoStacks:
    """Two stacks growing outward from the middle of a buffer of ``size`` slots.

    The first stack owns the lower half; the second owns the upper half less
    the middle slot, which neither stack uses.
    """

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self.size = size
        self._first_capacity = size // 2
        self._second_capacity = max(size - 1 - size // 2, 0)
        self._first: list[Any] = []
        self._second: list[Any] = []

    def push_first(self, value: Any) -> None:
        """Push ``value`` onto the first stack."""
        if len(self._first) >= self._first_capacity:
            raise StackOverflowError("first stack is full")
        self._first.append(value)

    def push_second(self, value: Any) -> None:
        """Push ``value`` onto the second stack."""
        if len(self._second) >= self._second_capacity:
            raise StackOverflowError("second stack is full")
        self._second.append(value)

    def pop_first(self) -> Any:
        """Pop the top of the first stack."""
        if not self._first:
            raise StackUnderflowError("first stack is empty")
        return self._first.pop()

    def pop_second(self) -> Any:
        """Pop the top of the second stack."""
        if not self._second:
            raise StackUnderflowError("second stack is empty")
        return self._second.pop()

    def first_is_empty(self) -> bool:
        """Whether the first stack holds no items."""
        return not self._first

    def second_is_empty(self) -> bool:
        """Whether the second stack holds no items."""
        return not self._second