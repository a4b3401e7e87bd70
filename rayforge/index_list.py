"""A list of signed integer indices, newest first."""

from __future__ import annotations

from collections import deque
from typing import Iterator, Optional


class IndexList:
    """A singly linked style list of integer indices.

    New indices are added at the front, so iteration yields them from the
    most recently added to the oldest.
    """

    __slots__ = ("_items",)

    def __init__(self) -> None:
        self._items: deque[int] = deque()

    def add(self, index: int) -> int:
        """Add ``index`` at the front and return the new size."""
        if isinstance(index, bool) or not isinstance(index, int):
            raise TypeError("IndexList: integral index expected")
        self._items.appendleft(index)
        return len(self._items)

    def clear(self) -> None:
        """Remove all indices."""
        self._items.clear()

    def remove_front(self) -> Optional[int]:
        """Remove and return the front index, or return None if empty."""
        if not self._items:
            return None
        return self._items.popleft()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"IndexList({list(self._items)!r})"