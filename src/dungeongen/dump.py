"""Debug text dump of a tile grid, one glyph per cell (see tiles.GLYPHS)."""

from typing import List

from .grid import Grid
from .tiles import glyph_for, tile_for_glyph

def dump_lines(grid: Grid) -> List[str]:
    return [
        "".join(glyph_for(grid.get(x, y)) for x in range(grid.width))
        for y in range(grid.height)
    ]

def dump(grid: Grid) -> str:
    return "\n".join(dump_lines(grid))

def parse_dump(text: str) -> Grid:
    """Rebuild a grid from dump() output.

    Rows shorter than the widest one are padded with Unused, since editors and
    shells like to strip trailing spaces.
    """
    rows = text.split("\n")
    if rows and rows[-1] == "":
        rows.pop()
    if not rows:
        raise ValueError("empty dump")
    width = max(len(r) for r in rows)
    grid = Grid.empty(max(width, 1), len(rows))
    for y, row in enumerate(rows):
        for x, ch in enumerate(row):
            grid.set(x, y, tile_for_glyph(ch))
    return grid
