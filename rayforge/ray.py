"""Rays and ray-hit records."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Optional

import numpy as np


def _vector(values: Any) -> np.ndarray:
    return np.array(values, dtype=float).reshape(-1)


class Ray:
    """A ray with an origin, a unit direction and a parameter interval."""

    __slots__ = ("origin", "direction", "t_min", "t_max")

    def __init__(
        self,
        origin: Any,
        direction: Any,
        t_min: float = 0.0,
        t_max: float = math.inf,
    ) -> None:
        self.origin = _vector(origin)
        direction = _vector(direction)
        if self.origin.shape != direction.shape:
            raise ValueError("Ray origin and direction must have the same size")
        length = float(np.linalg.norm(direction))
        self.direction = direction / length if length > 0.0 else direction
        self.t_min = float(t_min)
        self.t_max = float(t_max)

    def __call__(self, t: float) -> np.ndarray:
        """Return the point at parameter ``t`` along the ray."""
        return self.origin + self.direction * t

    def __repr__(self) -> str:
        return (
            f"Ray(origin={self.origin.tolist()}, direction={self.direction.tolist()}, "
            f"t_min={self.t_min}, t_max={self.t_max})"
        )


@dataclass
class Intersection:
    """Where a ray hit something; false when nothing was hit."""

    distance: float = -1.0
    point: np.ndarray = field(default_factory=lambda: np.zeros(3))
    normal: np.ndarray = field(default_factory=lambda: np.zeros(3))
    actor: Optional[Any] = None

    def __bool__(self) -> bool:
        return self.actor is not None