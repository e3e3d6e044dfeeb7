# src/dungeongen/mapgen/placement.py
from typing import List, Optional, Tuple

from ..geometry import Rect
from ..grid import Grid
from ..rng import RandomSource
from ..tiles import Tile

def place_object(
    grid: Grid,
    room_pool: List[Rect],
    rng: RandomSource,
    tile: Tile,
) -> Optional[Tuple[int, int]]:
    """
    Drop a single-cell object into a random room:
    - Pick a room from ``room_pool`` and a cell inside its 1-tile border.
    - Require that cell to still be Floor.
    - Write ``tile``, remove the room from the pool and return (x, y).
    Returns None (grid and pool untouched) when the pool is empty or the
    chosen cell is no longer Floor.
    """
    if not room_pool:
        return None

    r = rng.exclusive_random(len(room_pool))
    room = room_pool[r]
    x = rng.inclusive_random(room.x + 1, room.right - 2)
    y = rng.inclusive_random(room.y + 1, room.bottom - 2)

    if grid.get(x, y) != Tile.FLOOR:
        return None

    grid.set(x, y, tile)
    del room_pool[r]
    return (x, y)
