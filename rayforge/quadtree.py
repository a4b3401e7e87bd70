"""Quadtree keys and neighbour tables.

Children are numbered with bit 1 selecting the x half and bit 0 the y half::

    1 | 3
    --+--
    0 | 2
"""

from __future__ import annotations

import enum

from .index2 import Index2


class Direction(enum.IntEnum):
    """Neighbour search directions."""

    LEFT = 0
    RIGHT = 1
    DOWN = 2
    UP = 3


_NEIGHBOR_CODES = (
    (2, 0, 3, 1),  # LEFT
    (0, 2, 1, 3),  # RIGHT
    (1, 0, 3, 2),  # DOWN
    (0, 1, 2, 3),  # UP
)

_NEIGHBOR_CHILD_CODES = (
    (2, 3),  # LEFT
    (0, 1),  # RIGHT
    (1, 3),  # DOWN
    (0, 2),  # UP
)

SIDE = 2


def neighbor_code(direction: Direction) -> tuple[int, int, int, int]:
    """Return the child mapping used to step to a neighbour in ``direction``."""
    return _NEIGHBOR_CODES[Direction(direction)]


def neighbor_child_code(direction: Direction) -> tuple[int, int]:
    """Return the children lying on the side of a node facing ``direction``."""
    return _NEIGHBOR_CHILD_CODES[Direction(direction)]


class QuadtreeKey(Index2):
    """Location code of a quadtree node: one bit per level on each axis."""

    def push_child(self, index: int) -> QuadtreeKey:
        """Return the key of child ``index`` of this node."""
        x = (self.x << 1) | int(bool(index & 0b10))
        y = (self.y << 1) | int(bool(index & 0b01))
        return QuadtreeKey(x, y)

    def pop_child(self) -> QuadtreeKey:
        """Return the key of the parent of this node."""
        return QuadtreeKey(self.x >> 1, self.y >> 1)

    def pop_children(self, n: int) -> QuadtreeKey:
        """Return the key of the ancestor ``n`` levels up."""
        return QuadtreeKey(self.x >> n, self.y >> n)

    def child_index(self, mask: int) -> int:
        """Return the child index encoded at the level selected by ``mask``."""
        return (int(bool(self.x & mask)) << 1) | int(bool(self.y & mask))

    def child_key(self, i: int) -> QuadtreeKey:
        return self.push_child(i)