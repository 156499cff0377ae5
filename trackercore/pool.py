"""An ordered double-ended collection with removal by identity."""

from __future__ import annotations

from collections import deque
from typing import Generic, Iterator, Optional, TypeVar

T = TypeVar("T")


class Pool(Generic[T]):
    """Ordered collection that can be fed and drained from both ends.

    Items are compared by identity, so two equal but distinct objects
    are kept and removed independently.
    """

    def __init__(self) -> None:
        self._items: deque[T] = deque()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def is_empty(self) -> bool:
        return not self._items

    def add_to_begin(self, item: T) -> None:
        self._items.appendleft(item)

    def add_to_end(self, item: T) -> None:
        self._items.append(item)

    def extract_first(self) -> Optional[T]:
        """Remove and return the first item, or None when empty."""
        return self._items.popleft() if self._items else None

    def extract_last(self) -> Optional[T]:
        """Remove and return the last item, or None when empty."""
        return self._items.pop() if self._items else None

    def remove(self, item: T) -> None:
        """Remove the given object; raise ValueError if it is not held."""
        for position, held in enumerate(self._items):
            if held is item:
                del self._items[position]
                return
        raise ValueError("item is not in the pool")

    def first(self) -> Optional[T]:
        """Return the first item without removing it, or None when empty."""
        return self._items[0] if self._items else None

    def clear(self) -> None:
        self._items.clear()

    def drain_into(self, other: Pool[T]) -> None:
        """Move every item to the front of another pool, one at a time."""
        while self._items:
            other.add_to_begin(self._items.popleft())