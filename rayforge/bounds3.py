"""Axis-aligned bounding boxes in 3D."""

from __future__ import annotations

import itertools
import math
from typing import Any, Optional

import numpy as np

from .matrix4 import Matrix4
from .ray import Ray


def _vec(values: Any) -> np.ndarray:
    arr = np.array(values, dtype=float).reshape(-1)
    if arr.shape != (3,):
        raise ValueError("expected a vector of 3 components")
    return arr


class Bounds3:
    """An axis-aligned box given by its minimum and maximum corners.

    Created without corners, the box is empty and grows as points are
    added with :meth:`inflate`.
    """

    __slots__ = ("_p1", "_p2")

    def __init__(self, p1: Any = None, p2: Any = None) -> None:
        self._p1 = np.full(3, math.inf)
        self._p2 = np.full(3, -math.inf)
        if p1 is None and p2 is None:
            return
        if p1 is None or p2 is None:
            raise ValueError("Bounds3 needs both corners or neither")
        self.set(p1, p2)

    @property
    def min(self) -> np.ndarray:
        return self._p1.copy()

    @property
    def max(self) -> np.ndarray:
        return self._p2.copy()

    def __getitem__(self, i: int) -> np.ndarray:
        if i == 0:
            return self.min
        if i == 1:
            return self.max
        raise IndexError("Bounds3 corner index out of range")

    def set_empty(self) -> None:
        """Make this box empty."""
        self._p1 = np.full(3, math.inf)
        self._p2 = np.full(3, -math.inf)

    def set(self, p1: Any, p2: Any) -> None:
        """Set the corners, ordering the coordinates on each axis."""
        a = _vec(p1)
        b = _vec(p2)
        self._p1 = np.minimum(a, b)
        self._p2 = np.maximum(a, b)

    def center(self) -> np.ndarray:
        return (self._p1 + self._p2) * 0.5

    def size(self) -> np.ndarray:
        return self._p2 - self._p1

    def diagonal_length(self) -> float:
        return float(np.linalg.norm(self.size()))

    def max_size(self) -> float:
        return float(self.size().max())

    def area(self) -> float:
        """Return the surface area of the box."""
        sx, sy, sz = (float(c) for c in self.size())
        a = sx * (sy + sz) + sy * sz
        return a + a

    def is_empty(self) -> bool:
        return bool(np.any(self._p1 >= self._p2))

    def __add__(self, other: Bounds3) -> Bounds3:
        """Return the union of this box and ``other``."""
        if not isinstance(other, Bounds3):
            return NotImplemented
        result = Bounds3()
        result._p1 = np.minimum(self._p1, other._p1)
        result._p2 = np.maximum(self._p2, other._p2)
        return result

    def inflate(self, p: Any) -> None:
        """Grow this box to contain the point ``p``."""
        v = _vec(p)
        self._p1 = np.minimum(self._p1, v)
        self._p2 = np.maximum(self._p2, v)

    def inflate_scale(self, s: float) -> None:
        """Scale this box by ``s`` about its centre; non-positive ``s`` is ignored."""
        if s > 0:
            c = self.center() * (1 - s)
            self._p1 = self._p1 * s + c
            self._p2 = self._p2 * s + c

    def inflate_bounds(self, other: Bounds3) -> None:
        """Grow this box to contain ``other``."""
        self.inflate(other._p1)
        self.inflate(other._p2)

    def transform(self, m: Matrix4) -> None:
        """Replace this box by the box around its corners transformed by ``m``."""
        lo = self._p1.copy()
        hi = self._p2.copy()
        self.set_empty()
        for xs in itertools.product(*zip(lo, hi)):
            self.inflate(m.transform3x4(xs))

    def contains(self, p: Any) -> bool:
        v = _vec(p)
        return bool(np.all(v >= self._p1) and np.all(v <= self._p2))

    def intersect(self, ray: Ray) -> Optional[tuple[float, float]]:
        """Return the ray parameters ``(t_min, t_max)`` where the ray crosses the box, or None."""
        t_min = -math.inf
        t_max = math.inf
        for i in range(3):
            d = float(ray.direction[i])
            inv = math.copysign(math.inf, d) if d == 0.0 else 1.0 / d
            o = float(ray.origin[i])
            t1 = (float(self._p1[i]) - o) * inv
            t2 = (float(self._p2[i]) - o) * inv
            if t1 > t2:
                t1, t2 = t2, t1
            t_min = t1 if t1 > t_min else t_min
            t_max = t2 if t2 < t_max else t_max
            if t_min > t_max:
                return None
        return t_min, t_max

    def overlap(self, other: Bounds3) -> bool:
        """Return True if this box and ``other`` share any point."""
        return bool(
            np.all(self._p2 >= other._p1) and np.all(self._p1 <= other._p2)
        )

    def __repr__(self) -> str:
        return f"Bounds3(min={self._p1.tolist()}, max={self._p2.tolist()})"