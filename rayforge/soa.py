"""Structure of arrays: several parallel arrays sharing one length."""

from __future__ import annotations

from typing import Any, Iterator


class SoA:
    """A fixed number of parallel arrays indexed by a common element index.

    Each positional argument after ``size`` is the initial value of the
    elements of one array. The number of arrays is fixed at construction.
    """

    __slots__ = ("_defaults", "_arrays", "_size")

    def __init__(self, size: int = 0, *args: Any) -> None:
        self._defaults = tuple(args)
        self._size = 0
        self._arrays: list[list[Any]] = []
        self._allocate(size)

    def _allocate(self, size: int) -> None:
        if size < 0:
            raise ValueError("SoA size must not be negative")
        self._size = size
        self._arrays = [[value] * size for value in self._defaults]

    def array_count(self) -> int:
        """Return the number of parallel arrays."""
        return len(self._defaults)

    def _array(self, array: int) -> list[Any]:
        if not 0 <= array < len(self._arrays):
            raise IndexError("SoA: array index out of bounds")
        return self._arrays[array]

    def _check(self, i: int) -> int:
        if not 0 <= i < self._size:
            raise IndexError("SoA: element index out of bounds")
        return i

    def data(self, array: int) -> list[Any]:
        """Return the storage of array number ``array``."""
        return self._array(array)

    def get(self, array: int, i: int) -> Any:
        """Return element ``i`` of array number ``array``."""
        return self._array(array)[self._check(i)]

    def put(self, array: int, i: int, value: Any) -> None:
        """Store ``value`` as element ``i`` of array number ``array``."""
        self._array(array)[self._check(i)] = value

    def set(self, i: int, *args: Any) -> None:
        """Set element ``i`` of every array, one value per array."""
        self.set_tuple(i, args)

    def tuple(self, i: int) -> tuple[Any, ...]:
        """Return element ``i`` of every array as a tuple."""
        self._check(i)
        return tuple(values[i] for values in self._arrays)

    def set_tuple(self, i: int, values: tuple[Any, ...]) -> None:
        """Set element ``i`` of every array from ``values``."""
        self._check(i)
        values = tuple(values)
        if len(values) != len(self._arrays):
            raise ValueError(
                f"SoA: expected {len(self._arrays)} values, got {len(values)}"
            )
        for array, value in zip(self._arrays, values):
            array[i] = value

    def swap(self, i: int, j: int) -> None:
        """Exchange elements ``i`` and ``j`` in every array."""
        self._check(i)
        self._check(j)
        for array in self._arrays:
            array[i], array[j] = array[j], array[i]

    def reallocate(self, size: int) -> bool:
        """Resize to ``size`` elements, discarding the contents.

        Returns False if the size is unchanged, True otherwise.
        """
        if size == self._size:
            return False
        self._allocate(size)
        return True

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[tuple[Any, ...]]:
        return zip(*self._arrays) if self._arrays else iter(() for _ in range(self._size))

    def __repr__(self) -> str:
        return f"SoA(size={self._size}, arrays={len(self._arrays)})"