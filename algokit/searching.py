"""Searching sequences for a key."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterable, Sequence
from typing import Any


def binary_search(items: Sequence[Any], key: Any) -> int | None:
    """Return an index of ``key`` in the ascending ``items``, or None if absent."""
    index = bisect_left(items, key)
    if index < len(items) and items[index] == key:
        return index
    return None


def linear_search(items: Iterable[Any], key: Any) -> int | None:
    """Return the index of the first occurrence of ``key``, or None if absent."""
    return next((index for index, item in enumerate(items) if item == key), None)