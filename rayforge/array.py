"""A fixed-size array of values."""

from __future__ import annotations

from typing import Any, Iterator


class Array:
    """A sequence whose length is fixed when it is created."""

    __slots__ = ("_data",)

    def __init__(self, size: int = 0, default: Any = None) -> None:
        if size < 0:
            raise ValueError("Array size must not be negative")
        self._data = [default] * size

    def copy(self, other: Array) -> Array:
        """Copy the elements of ``other`` into this array and return it."""
        if other is self:
            return self
        if len(other) != len(self):
            raise ValueError("Bad array size")
        self._data[:] = other._data
        return self

    def zero(self) -> Array:
        """Set every element to zero and return this array."""
        self._data = [0] * len(self._data)
        return self

    def _check(self, index: int) -> int:
        if not 0 <= index < len(self._data):
            raise IndexError("Array index out of bounds")
        return index

    def __getitem__(self, index: int) -> Any:
        return self._data[self._check(index)]

    def __setitem__(self, index: int, value: Any) -> None:
        self._data[self._check(index)] = value

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._data)

    def __repr__(self) -> str:
        return f"Array({self._data!r})"