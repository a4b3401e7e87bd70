"""Triangle helpers: normal, centre, interpolation and ray intersection."""

from __future__ import annotations

from typing import Any, Optional

import numpy as np

from .ray import Ray

DEFAULT_EPS = 1e-6


def _vec(values: Any) -> np.ndarray:
    arr = np.asarray(values, dtype=float).reshape(-1)
    if arr.shape != (3,):
        raise ValueError("expected a vector of 3 components")
    return arr


def normal(v0: Any, v1: Any, v2: Any) -> np.ndarray:
    """Return the unit normal of the triangle, following counter-clockwise order."""
    a = _vec(v0)
    n = np.cross(_vec(v1) - a, _vec(v2) - a)
    length = float(np.linalg.norm(n))
    return n / length if length > 0.0 else n


def center(v0: Any, v1: Any, v2: Any) -> np.ndarray:
    """Return the centroid of the triangle."""
    return (_vec(v0) + _vec(v1) + _vec(v2)) * (1.0 / 3.0)


def interpolate(b: Any, t0: Any, t1: Any, t2: Any) -> Any:
    """Blend three vertex values with barycentric coordinates ``b``."""
    return t0 * b[0] + t1 * b[1] + t2 * b[2]


def intersect(
    ray: Ray, p0: Any, p1: Any, p2: Any
) -> Optional[tuple[np.ndarray, float]]:
    """Intersect ``ray`` with a triangle.

    Returns ``(barycentric, t)`` for a hit within the ray's parameter
    interval, or None when there is no such hit.
    """
    p0 = _vec(p0)
    e1 = _vec(p1) - p0
    e2 = _vec(p2) - p0
    s1 = np.cross(ray.direction, e2)
    det = float(s1 @ e1)
    if abs(det) <= DEFAULT_EPS:
        return None
    inv_det = 1.0 / det

    s = ray.origin - p0
    b1 = float(s @ s1) * inv_det
    if b1 < 0 or b1 > 1:
        return None

    s2 = np.cross(s, e1)
    b2 = float(ray.direction @ s2) * inv_det
    if b2 < 0 or b1 + b2 > 1:
        return None

    t = float(e2 @ s2) * inv_det
    if t < ray.t_min or t > ray.t_max:
        return None
    return np.array([1.0 - b1 - b2, b1, b2]), t