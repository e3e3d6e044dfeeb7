"""Rectangles and compass directions shared by every placement step.

Screen convention: x grows east, y grows south. Every direction-dependent
offset in the generator is derived from ``Direction.delta`` and
``Direction.opposite``; nothing re-derives signs locally.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional, Tuple


class Direction(Enum):
    NORTH = (0, -1)
    SOUTH = (0, 1)
    EAST = (1, 0)
    WEST = (-1, 0)

    @property
    def delta(self) -> Tuple[int, int]:
        return self.value

    @property
    def opposite(self) -> "Direction":
        dx, dy = self.value
        return Direction((-dx, -dy))

    @property
    def is_vertical(self) -> bool:
        return self.value[0] == 0

    def step(self, x: int, y: int, n: int = 1) -> Tuple[int, int]:
        dx, dy = self.value
        return (x + dx * n, y + dy * n)


# Fixed try-order when resolving an attachment point.
DIRECTIONS = (Direction.NORTH, Direction.SOUTH, Direction.EAST, Direction.WEST)


@dataclass(frozen=True)
class Rect:
    x: int
    y: int
    width: int
    height: int

    @property
    def right(self) -> int:
        # exclusive
        return self.x + self.width

    @property
    def bottom(self) -> int:
        # exclusive
        return self.y + self.height

    @property
    def area(self) -> int:
        return self.width * self.height

    def cells(self) -> Iterator[Tuple[int, int]]:
        for y in range(self.y, self.bottom):
            for x in range(self.x, self.right):
                yield x, y

    def contains(self, x: int, y: int) -> bool:
        return self.x <= x < self.right and self.y <= y < self.bottom

    def overlaps(self, other: "Rect") -> bool:
        return (
            self.x < other.right and other.x < self.right
            and self.y < other.bottom and other.y < self.bottom
        )

    def interior(self) -> Optional["Rect"]:
        """The rect shrunk by one cell on every side, or None if nothing is left."""
        if self.width < 3 or self.height < 3:
            return None
        return Rect(self.x + 1, self.y + 1, self.width - 2, self.height - 2)

    def side(self, direction: Direction) -> "Rect":
        """The 1-thick strip just outside this rect on the given side."""
        if direction is Direction.NORTH:
            return Rect(self.x, self.y - 1, self.width, 1)
        if direction is Direction.SOUTH:
            return Rect(self.x, self.bottom, self.width, 1)
        if direction is Direction.WEST:
            return Rect(self.x - 1, self.y, 1, self.height)
        return Rect(self.right, self.y, 1, self.height)
