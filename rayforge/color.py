"""RGBA colours with float components and 32-bit packing."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Union

_MASK32 = 0xFFFFFFFF
_R_SHIFT = 0
_G_SHIFT = 8
_B_SHIFT = 16
_A_SHIFT = 24

DEFAULT_EPS = 1e-6


@dataclass(eq=False)
class Color:
    """An RGBA colour whose components are floats, normally in [0, 1].

    Arithmetic combines the RGB components only; the result has alpha 1.
    """

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0
    a: float = 1.0

    @classmethod
    def from_bytes(cls, r: int, g: int, b: int, a: int = 255) -> Color:
        """Build a colour from components in [0, 255]."""
        return cls(r / 255, g / 255, b / 255, a / 255)

    @property
    def x(self) -> float:
        return self.r

    @property
    def y(self) -> float:
        return self.g

    @property
    def z(self) -> float:
        return self.b

    @property
    def w(self) -> float:
        return self.a

    def __add__(self, other: Color) -> Color:
        if not isinstance(other, Color):
            return NotImplemented
        return Color(self.r + other.r, self.g + other.g, self.b + other.b)

    def __sub__(self, other: Color) -> Color:
        if not isinstance(other, Color):
            return NotImplemented
        return Color(self.r - other.r, self.g - other.g, self.b - other.b)

    def __mul__(self, other: Union[Color, float]) -> Color:
        if isinstance(other, Color):
            return Color(self.r * other.r, self.g * other.g, self.b * other.b)
        if isinstance(other, (int, float)):
            s = float(other)
            return Color(self.r * s, self.g * s, self.b * s)
        return NotImplemented

    def __rmul__(self, s: float) -> Color:
        if isinstance(s, (int, float)):
            return self * float(s)
        return NotImplemented

    def __getitem__(self, i: int) -> float:
        if i == 0:
            return self.r
        if i == 1:
            return self.g
        if i == 2:
            return self.b
        if i == 3:
            return self.a
        raise IndexError("Color component index out of range")

    def __iter__(self) -> Iterator[float]:
        yield self.r
        yield self.g
        yield self.b
        yield self.a

    def equals(self, other: Color, eps: float = DEFAULT_EPS) -> bool:
        """Return True if the RGB components differ by at most ``eps``."""
        return (
            abs(self.r - other.r) <= eps
            and abs(self.g - other.g) <= eps
            and abs(self.b - other.b) <= eps
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self.equals(other)

    __hash__ = None  # type: ignore[assignment]


def pack_rgba(r: int, g: int, b: int, a: int = 255) -> int:
    """Pack byte components into a 32-bit value, red in the low byte."""
    value = (a << _A_SHIFT) | (b << _B_SHIFT) | (g << _G_SHIFT) | (r << _R_SHIFT)
    return value & _MASK32


def pack_color(color: Color) -> int:
    """Pack a float colour into a 32-bit RGBA value."""
    r = int(color.r * 255) & _MASK32
    g = int(color.g * 255) & _MASK32
    b = int(color.b * 255) & _MASK32
    a = int(color.a * 255) & _MASK32
    return pack_rgba(r, g, b, a)


def unpack_color(value: int) -> Color:
    """Unpack a 32-bit RGBA value into a float colour."""
    return Color.from_bytes(
        (value >> _R_SHIFT) & 0xFF,
        (value >> _G_SHIFT) & 0xFF,
        (value >> _B_SHIFT) & 0xFF,
        (value >> _A_SHIFT) & 0xFF,
    )