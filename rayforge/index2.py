"""Two-dimensional integer index."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

IndexLike = Union["Index2", int]


@dataclass(frozen=True)
class Index2:
    """An immutable pair of integer coordinates."""

    x: int = 0
    y: int = 0

    @property
    def i(self) -> int:
        return self.x

    @property
    def j(self) -> int:
        return self.y

    @staticmethod
    def _coerce(other: IndexLike) -> tuple[int, int]:
        if isinstance(other, Index2):
            return other.x, other.y
        if isinstance(other, int):
            return other, other
        raise TypeError(f"cannot combine Index2 with {type(other).__name__}")

    def __add__(self, other: IndexLike) -> Index2:
        ox, oy = self._coerce(other)
        return Index2(self.x + ox, self.y + oy)

    def __sub__(self, other: IndexLike) -> Index2:
        ox, oy = self._coerce(other)
        return Index2(self.x - ox, self.y - oy)

    def __getitem__(self, i: int) -> int:
        if i == 0:
            return self.x
        if i == 1:
            return self.y
        raise IndexError("Index2 coordinate out of range")

    def __iter__(self):
        yield self.x
        yield self.y

    def min(self) -> int:
        return min(self.x, self.y)

    def max(self) -> int:
        return max(self.x, self.y)

    def clamp(self, size: Index2) -> Index2:
        """Return this index clamped to ``[0, size - 1]`` on each axis."""
        x = 0 if self.x < 0 else min(self.x, size.x - 1)
        y = 0 if self.y < 0 else min(self.y, size.y - 1)
        return Index2(x, y)

    def prod(self) -> int:
        return self.x * self.y