"""Small keyed containers and a FIFO queue."""

from __future__ import annotations

from collections import deque
from typing import Any, Generic, TypeVar

T = TypeVar("T")

_UINT_MASK = 0xFFFFFFFF


class IntDict(Generic[T]):
    """Mapping from unsigned 32-bit ids to items; lookups of absent ids give None."""

    def __init__(self) -> None:
        self._items: dict[int, T] = {}

    def get(self, key: int) -> T | None:
        """Return the item most recently added under ``key``, or None."""
        return self._items.get(key & _UINT_MASK)

    def add(self, key: int, item: T) -> None:
        """Store ``item`` under ``key``; a later add shadows an earlier one."""
        self._items[key & _UINT_MASK] = item

    def __contains__(self, key: object) -> bool:
        return isinstance(key, int) and (key & _UINT_MASK) in self._items

    def __len__(self) -> int:
        return len(self._items)


class StrDict(Generic[T]):
    """Mapping from string ids to items; lookups of absent ids give None."""

    def __init__(self) -> None:
        self._items: dict[str, T] = {}

    def get(self, key: str) -> T | None:
        """Return the item most recently added under ``key``, or None."""
        if not isinstance(key, str):
            raise TypeError(f"key must be a str, not {type(key).__name__}")
        return self._items.get(key)

    def add(self, key: str, item: T) -> None:
        """Store ``item`` under ``key``; a later add shadows an earlier one."""
        if not isinstance(key, str):
            raise TypeError(f"key must be a str, not {type(key).__name__}")
        self._items[key] = item

    def __contains__(self, key: object) -> bool:
        return key in self._items

    def __len__(self) -> int:
        return len(self._items)


class Queue(Generic[T]):
    """First-in, first-out queue whose dequeue on empty returns None."""

    def __init__(self) -> None:
        self._items: deque[Any] = deque()

    def enqueue(self, item: T) -> None:
        """Append ``item`` to the back of the queue."""
        self._items.append(item)

    def dequeue(self) -> T | None:
        """Remove and return the front item, or None when the queue is empty."""
        if not self._items:
            return None
        return self._items.popleft()

    def __len__(self) -> int:
        return len(self._items)