from dataclasses import dataclass
from typing import List, Tuple

from .tiles import Tile

@dataclass
class Grid:
    width: int
    height: int
    buf: List[Tile]

    @classmethod
    def empty(cls, width: int, height: int) -> "Grid":
        if width <= 0 or height <= 0:
            raise ValueError(f"grid size must be positive, got {width}x{height}")
        # Row-major; allocated once and never resized.
        return cls(width=width, height=height, buf=[Tile.UNUSED] * (width * height))

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def idx(self, x: int, y: int) -> int:
        return y * self.width + x

    def get(self, x: int, y: int) -> Tile:
        # Anything off the map reads as blank space.
        if not self.in_bounds(x, y):
            return Tile.UNUSED
        return self.buf[self.idx(x, y)]

    def set(self, x: int, y: int, tile: Tile) -> None:
        if not self.in_bounds(x, y):
            raise IndexError(f"({x}, {y}) outside {self.width}x{self.height} grid")
        self.buf[self.idx(x, y)] = tile

    def count(self, tile: Tile) -> int:
        return self.buf.count(tile)

    def snapshot(self) -> Tuple[Tile, ...]:
        return tuple(self.buf)

    def as_matrix(self) -> List[List[Tile]]:
        out = []
        for y in range(self.height):
            row = [self.get(x, y) for x in range(self.width)]
            out.append(row)
        return out
