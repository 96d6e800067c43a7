"""A bounded list that keeps its items ordered by a comparison function."""

from __future__ import annotations

from typing import Callable, Generic, Iterator, TypeVar

from ridemap.location import MAX_ARRAY

T = TypeVar("T")


class ListFullError(Exception):
    """Raised when an item is added to a list that is already full."""


class SortedList(Generic[T]):
    """Items kept in order by ``compare``; equal items keep insertion order."""

    def __init__(self, compare: Callable[[T, T], int]) -> None:
        self._compare = compare
        self._items: list[T] = []

    def add(self, item: T) -> None:
        """Insert an item after every item that does not compare greater."""
        if self.is_full():
            raise ListFullError("list is full")
        position = len(self._items)
        while position > 0 and self._compare(self._items[position - 1], item) > 0:
            position -= 1
        self._items.insert(position, item)

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._items):
            raise IndexError(f"index {index} out of range")

    def remove(self, index: int) -> T:
        """Remove and return the item at ``index``."""
        self._check_index(index)
        return self._items.pop(index)

    def __getitem__(self, index: int) -> T:
        self._check_index(index)
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._items))

    def is_full(self) -> bool:
        """Return True when no more items can be added."""
        return len(self._items) >= MAX_ARRAY

    def clear(self) -> None:
        """Drop every item."""
        self._items.clear()