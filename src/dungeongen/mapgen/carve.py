# src/dungeongen/mapgen/carve.py
# Stamping of rooms/corridors onto the grid: a wall ring around an interior fill.

from ..geometry import Rect
from ..grid import Grid
from ..tiles import Tile

# Cells kept clear between a feature's interior and the grid edge:
# one for the wall ring plus the untouched outermost ring.
EDGE_MARGIN = 2

def in_carve_bounds(grid: Grid, rect: Rect) -> bool:
    return (
        rect.x >= EDGE_MARGIN and rect.y >= EDGE_MARGIN
        and rect.right <= grid.width - EDGE_MARGIN
        and rect.bottom <= grid.height - EDGE_MARGIN
    )

def rect_fits(grid: Grid, rect: Rect) -> bool:
    """True when ``rect`` is inside the carve bounds and every cell is Unused."""
    if rect.width <= 0 or rect.height <= 0:
        return False
    if not in_carve_bounds(grid, rect):
        return False
    return all(grid.get(x, y) == Tile.UNUSED for x, y in rect.cells())

def place_rect(grid: Grid, rect: Rect, tile: Tile) -> bool:
    """
    Stamp ``rect`` filled with ``tile`` and ringed by walls.
    - Nothing is written unless the whole rect fits (see rect_fits).
    - The ring overwrites what is there, so neighbouring features share walls.
    """
    if not rect_fits(grid, rect):
        return False

    for y in range(rect.y - 1, rect.bottom + 1):
        for x in range(rect.x - 1, rect.right + 1):
            if rect.contains(x, y):
                grid.set(x, y, tile)
            else:
                grid.set(x, y, Tile.WALL)
    return True
