"""A small 32-bit set of flag bits."""

from __future__ import annotations

from typing import Union

_MASK32 = 0xFFFFFFFF

FlagLike = Union[int, "Flags"]


def _bits_of(value: FlagLike) -> int:
    if isinstance(value, Flags):
        return value._bits
    return int(value) & _MASK32


class Flags:
    """A mutable holder of 32 flag bits, usable with ints or ``enum.IntFlag``."""

    __slots__ = ("_bits",)

    def __init__(self, mask: FlagLike = 0) -> None:
        self._bits = _bits_of(mask)

    def set(self, mask: FlagLike) -> None:
        """Set the bits given by ``mask`` to 1."""
        self._bits |= _bits_of(mask)

    def reset(self, mask: FlagLike) -> None:
        """Set the bits given by ``mask`` to 0."""
        self._bits &= ~_bits_of(mask) & _MASK32

    def clear(self) -> None:
        """Set all bits to 0."""
        self._bits = 0

    def enable(self, mask: FlagLike, state: bool) -> None:
        """Set the bits given by ``mask`` to ``state``."""
        if state:
            self.set(mask)
        else:
            self.reset(mask)

    def is_set(self, mask: FlagLike) -> bool:
        """Return True if all bits of ``mask`` are set."""
        bits = _bits_of(mask)
        return (self._bits & bits) == bits

    def test(self, mask: FlagLike) -> bool:
        """Return True if any bit of ``mask`` is set."""
        return (self._bits & _bits_of(mask)) != 0

    def __or__(self, other: FlagLike) -> Flags:
        return Flags(self._bits | _bits_of(other))

    __ror__ = __or__

    def __ior__(self, other: FlagLike) -> Flags:
        self._bits |= _bits_of(other)
        return self

    def __int__(self) -> int:
        return self._bits

    def __index__(self) -> int:
        return self._bits

    def __eq__(self, other: object) -> bool:
        if isinstance(other, (Flags, int)):
            return self._bits == _bits_of(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Flags(0x{self._bits:08x})"