"""4x4 matrices in column-major layout, with projection and view builders."""

from __future__ import annotations

import math
import numbers
from typing import Any, Union

import numpy as np

DEFAULT_EPS = 1e-6


def _vec(values: Any, size: int) -> np.ndarray:
    arr = np.array(values, dtype=float).reshape(-1)
    if arr.shape != (size,):
        raise ValueError(f"expected a vector of {size} components")
    return arr


def _mat3(values: Any) -> np.ndarray:
    arr = np.array(values, dtype=float)
    if arr.shape != (3, 3):
        raise ValueError("expected a 3x3 matrix")
    return arr


class Matrix4:
    """A 4x4 matrix of floats.

    The constructor takes the four columns. Indexing with an int returns a
    column; indexing with ``(i, j)`` returns the element at row ``i`` and
    column ``j``.
    """

    __slots__ = ("_m",)

    def __init__(self, columns: Any) -> None:
        arr = np.array(columns, dtype=float)
        if arr.shape != (4, 4):
            raise ValueError("Matrix4 needs four columns of four components")
        self._m = arr.T.copy()

    @classmethod
    def _from_array(cls, rows: np.ndarray) -> Matrix4:
        obj = cls.__new__(cls)
        obj._m = np.array(rows, dtype=float)
        return obj

    @classmethod
    def identity(cls) -> Matrix4:
        return cls._from_array(np.eye(4))

    @classmethod
    def zero(cls) -> Matrix4:
        return cls._from_array(np.zeros((4, 4)))

    @classmethod
    def diagonal(cls, d: Any) -> Matrix4:
        """Return a diagonal matrix whose diagonal is ``d``."""
        return cls._from_array(np.diag(_vec(d, 4)))

    @classmethod
    def from_rotation(cls, r: Any, p: Any = (0.0, 0.0, 0.0)) -> Matrix4:
        """Return the affine matrix with linear part ``r`` and translation ``p``."""
        m = np.eye(4)
        m[:3, :3] = _mat3(r)
        m[:3, 3] = _vec(p, 3)
        return cls._from_array(m)

    def column(self, j: int) -> np.ndarray:
        """Return a copy of column ``j``."""
        if not 0 <= j < 4:
            raise IndexError("Matrix4 column index out of range")
        return self._m[:, j].copy()

    def __getitem__(self, key: Union[int, tuple[int, int]]) -> Any:
        if isinstance(key, tuple):
            i, j = key
            if not (0 <= i < 4 and 0 <= j < 4):
                raise IndexError("Matrix4 element index out of range")
            return float(self._m[i, j])
        return self.column(key)

    def __mul__(self, other: Any) -> Any:
        if isinstance(other, Matrix4):
            return Matrix4._from_array(self._m @ other._m)
        if isinstance(other, numbers.Real):
            return Matrix4._from_array(self._m * float(other))
        if isinstance(other, (np.ndarray, list, tuple)):
            return self.transform(other)
        return NotImplemented

    def __rmul__(self, s: Any) -> Any:
        if isinstance(s, numbers.Real):
            return Matrix4._from_array(self._m * float(s))
        return NotImplemented

    def transposed(self) -> Matrix4:
        return Matrix4._from_array(self._m.T)

    def inverse(self, eps: float = DEFAULT_EPS) -> Matrix4:
        """Return the inverse; raise ValueError if the determinant is within ``eps`` of 0."""
        det = float(np.linalg.det(self._m))
        if abs(det) <= eps:
            raise ValueError("Matrix4 is singular")
        return Matrix4._from_array(np.linalg.inv(self._m))

    def transform(self, v: Any) -> np.ndarray:
        """Return this matrix times the 4-vector ``v``."""
        return self._m @ _vec(v, 4)

    def transform_point(self, p: Any) -> np.ndarray:
        """Transform a 3D point, dividing by w unless w is zero."""
        r = self._m @ np.append(_vec(p, 3), 1.0)
        if abs(r[3]) <= DEFAULT_EPS:
            return r[:3]
        return r[:3] / r[3]

    def transform3x4(self, p: Any) -> np.ndarray:
        """Transform a 3D point by the affine part of this matrix."""
        return self._m[:3, :3] @ _vec(p, 3) + self._m[:3, 3]

    def transform_vector(self, v: Any) -> np.ndarray:
        """Transform a 3D direction, ignoring translation."""
        return self._m[:3, :3] @ _vec(v, 3)

    @classmethod
    def ortho(
        cls,
        left: float,
        right: float,
        bottom: float,
        top: float,
        z_near: float,
        z_far: float,
    ) -> Matrix4:
        """Return an orthographic parallel projection matrix."""
        m = np.eye(4)
        m[0, 0] = 2.0 / (right - left)
        m[1, 1] = 2.0 / (top - bottom)
        m[2, 2] = -2.0 / (z_far - z_near)
        m[0, 3] = -(right + left) / (right - left)
        m[1, 3] = -(top + bottom) / (top - bottom)
        m[2, 3] = -(z_far + z_near) / (z_far - z_near)
        return cls._from_array(m)

    @classmethod
    def frustum(
        cls,
        left: float,
        right: float,
        bottom: float,
        top: float,
        z_near: float,
        z_far: float,
    ) -> Matrix4:
        """Return a perspective projection matrix for the given frustum."""
        m = np.zeros((4, 4))
        m[0, 0] = 2.0 * z_near / (right - left)
        m[1, 1] = 2.0 * z_near / (top - bottom)
        m[0, 2] = (right + left) / (right - left)
        m[1, 2] = (top + bottom) / (top - bottom)
        m[2, 2] = -(z_far + z_near) / (z_far - z_near)
        m[3, 2] = -1.0
        m[2, 3] = -2.0 * z_far * z_near / (z_far - z_near)
        return cls._from_array(m)

    @classmethod
    def perspective(
        cls, fovy: float, aspect: float, z_near: float, z_far: float
    ) -> Matrix4:
        """Return a perspective projection matrix.

        ``fovy`` is the vertical field of view in degrees and ``aspect`` is
        width divided by height.
        """
        t = math.tan(math.radians(fovy) * 0.5)
        m = np.zeros((4, 4))
        m[0, 0] = 1.0 / (aspect * t)
        m[1, 1] = 1.0 / t
        m[2, 2] = -(z_far + z_near) / (z_far - z_near)
        m[3, 2] = -1.0
        m[2, 3] = -2.0 * z_far * z_near / (z_far - z_near)
        return cls._from_array(m)

    @classmethod
    def look_at(cls, eye: Any, center: Any, up: Any) -> Matrix4:
        """Return the view matrix of a camera at ``eye`` looking at ``center``."""
        eye = _vec(eye, 3)
        n = eye - _vec(center, 3)
        n = n / np.linalg.norm(n)
        u = np.cross(_vec(up, 3), n)
        u = u / np.linalg.norm(u)
        v = np.cross(n, u)
        m = np.eye(4)
        m[0, :3] = u
        m[1, :3] = v
        m[2, :3] = n
        m[0, 3] = -float(u @ eye)
        m[1, 3] = -float(v @ eye)
        m[2, 3] = -float(n @ eye)
        return cls._from_array(m)

    def __array__(self, dtype: Any = None, copy: Any = None) -> np.ndarray:
        return np.array(self._m, dtype=dtype)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix4):
            return NotImplemented
        return bool(np.array_equal(self._m, other._m))

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Matrix4({self._m.T.tolist()!r})"


def trs(p: Any, r: Any, s: Any) -> Matrix4:
    """Return the translation-rotation-scale matrix for position, rotation and scale."""
    m = np.eye(4)
    m[:3, :3] = _mat3(r) * _vec(s, 3)
    m[:3, 3] = _vec(p, 3)
    return Matrix4._from_array(m)


def normal_matrix(r: Any, s: Any) -> np.ndarray:
    """Return the 3x3 matrix that transforms normals under rotation ``r`` and scale ``s``."""
    return _mat3(r) / _vec(s, 3)