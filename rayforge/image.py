"""Pixels and in-memory image buffers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Union

from .color import Color

MIN_IMAGE_WIDTH = 4


def roundup_image_width(w: int) -> int:
    """Round ``w`` up to a multiple of the minimum image width."""
    return (w + MIN_IMAGE_WIDTH - 1) & -MIN_IMAGE_WIDTH


def _to_byte(value: float) -> int:
    # Components outside [0, 1] wrap around, as an 8-bit store would.
    return int(255 * value) & 0xFF


@dataclass(frozen=True)
class Pixel:
    """An RGB pixel with one byte per channel."""

    r: int = 0
    g: int = 0
    b: int = 0

    def __post_init__(self) -> None:
        for value in (self.r, self.g, self.b):
            if not 0 <= value <= 255:
                raise ValueError("Pixel components must lie in [0, 255]")

    @classmethod
    def from_color(cls, color: Color) -> Pixel:
        """Convert a float colour to bytes by scaling with 255 and truncating."""
        return cls(_to_byte(color.r), _to_byte(color.g), _to_byte(color.b))

    def __add__(self, other: Union[Pixel, Color]) -> Pixel:
        """Add byte-wise, wrapping around at 256."""
        if isinstance(other, Color):
            other = Pixel.from_color(other)
        if not isinstance(other, Pixel):
            return NotImplemented
        return Pixel(
            (self.r + other.r) & 0xFF,
            (self.g + other.g) & 0xFF,
            (self.b + other.b) & 0xFF,
        )


_Key = Union[int, "tuple[int, int]"]


class ImageBuffer:
    """A width by height grid of pixels stored row by row."""

    __slots__ = ("_width", "_height", "_data")

    def __init__(self, width: int = 0, height: int = 0) -> None:
        if width < 0 or height < 0:
            raise ValueError("Image dimensions must not be negative")
        self._width = width
        self._height = height
        self._data = [Pixel()] * (width * height)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def _offset(self, key: _Key) -> int:
        if isinstance(key, tuple):
            x, y = key
            if not (0 <= x < self._width and 0 <= y < self._height):
                raise IndexError("Image: index out of range")
            return y * self._width + x
        if not 0 <= key < len(self._data):
            raise IndexError("Image: index out of range")
        return key

    def __getitem__(self, key: _Key) -> Pixel:
        return self._data[self._offset(key)]

    def __setitem__(self, key: _Key, value: Union[Pixel, Color]) -> None:
        if isinstance(value, Color):
            value = Pixel.from_color(value)
        elif not isinstance(value, Pixel):
            raise TypeError("ImageBuffer stores Pixel or Color values")
        self._data[self._offset(key)] = value

    def __len__(self) -> int:
        return self._width * self._height

    def __iter__(self) -> Iterator[Pixel]:
        return iter(self._data)

    def __repr__(self) -> str:
        return f"ImageBuffer({self._width}x{self._height})"