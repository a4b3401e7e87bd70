"""Points in three-dimensional space."""

from __future__ import annotations

import numbers
from dataclasses import dataclass
from typing import Any, Iterator, Union

import numpy as np

DEFAULT_EPS = 1e-6

_VectorLike = Union[np.ndarray, list, tuple]


def _as_vector(values: Any) -> np.ndarray:
    arr = np.asarray(values, dtype=float).reshape(-1)
    if arr.shape != (3,):
        raise ValueError("expected a vector of 3 components")
    return arr


@dataclass(eq=False)
class Point3:
    """A 3D point.

    Points and vectors are different things: the difference of two points
    is a vector (a numpy array), and a point moved by a vector is a point.
    """

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    # Make numpy defer to our reflected operators.
    __array_ufunc__ = None

    def equals(self, other: Point3, eps: float = DEFAULT_EPS) -> bool:
        """Return True if every coordinate differs from ``other``'s by at most ``eps``."""
        return (
            abs(self.x - other.x) <= eps
            and abs(self.y - other.y) <= eps
            and abs(self.z - other.z) <= eps
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point3):
            return NotImplemented
        return self.equals(other)

    __hash__ = None  # type: ignore[assignment]

    def __add__(self, other: Union[Point3, _VectorLike]) -> Point3:
        if isinstance(other, Point3):
            return Point3(self.x + other.x, self.y + other.y, self.z + other.z)
        if isinstance(other, (np.ndarray, list, tuple)):
            v = _as_vector(other)
            return Point3(self.x + v[0], self.y + v[1], self.z + v[2])
        return NotImplemented

    __radd__ = __add__

    def __sub__(self, other: Union[Point3, _VectorLike]) -> Any:
        """Point minus point gives a vector; point minus vector gives a point."""
        if isinstance(other, Point3):
            return np.array([self.x - other.x, self.y - other.y, self.z - other.z])
        if isinstance(other, (np.ndarray, list, tuple)):
            v = _as_vector(other)
            return Point3(self.x - v[0], self.y - v[1], self.z - v[2])
        return NotImplemented

    def __neg__(self) -> Point3:
        return Point3(-self.x, -self.y, -self.z)

    def __mul__(self, s: float) -> Point3:
        if isinstance(s, numbers.Real):
            s = float(s)
            return Point3(self.x * s, self.y * s, self.z * s)
        return NotImplemented

    def __rmul__(self, s: float) -> Point3:
        return self.__mul__(s)

    def __getitem__(self, i: int) -> float:
        if i == 0:
            return self.x
        if i == 1:
            return self.y
        if i == 2:
            return self.z
        raise IndexError("Point3 coordinate index out of range")

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __array__(self, dtype: Any = None, copy: Any = None) -> np.ndarray:
        return np.array([self.x, self.y, self.z], dtype=dtype)

    def max(self) -> float:
        """Return the largest coordinate."""
        return max(self.x, self.y, self.z)

    def min(self) -> float:
        """Return the smallest coordinate."""
        return min(self.x, self.y, self.z)