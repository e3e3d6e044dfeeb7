# src/dungeongen/mapgen/features.py
# Footprints and exit seams for rooms and corridors grown from an attachment point.
#
# The attachment point (x, y) is the wall cell a new feature grows out of;
# ``direction`` is the way it grows. Every footprint is placed so that it
# touches (x, y) on its side facing ``direction.opposite``.

from typing import List

from ..config import GeneratorConfig
from ..geometry import DIRECTIONS, Direction, Rect
from ..rng import RandomSource

def room_rect(x: int, y: int, direction: Direction, width: int, height: int) -> Rect:
    """Centre a width×height room on the attachment point, beyond it in ``direction``."""
    if direction is Direction.NORTH:
        return Rect(x - width // 2, y - height, width, height)
    if direction is Direction.SOUTH:
        return Rect(x - width // 2, y + 1, width, height)
    if direction is Direction.EAST:
        return Rect(x + 1, y - height // 2, width, height)
    return Rect(x - width, y - height // 2, width, height)

def random_room(
    rng: RandomSource, config: GeneratorConfig, x: int, y: int, direction: Direction
) -> Rect:
    width = rng.inclusive_random(config.room_min_size, config.room_max_size)
    height = rng.inclusive_random(config.room_min_size, config.room_max_size)
    return room_rect(x, y, direction, width, height)

def corridor_rect(
    x: int, y: int, direction: Direction, horizontal: bool, length: int, skew: bool
) -> Rect:
    """
    One-tile-thick corridor starting next to (x, y).
    - Growing along its own axis it simply runs away from the attachment.
    - Growing across its axis it runs east/south from the attachment column/row,
      or, when ``skew`` is set, west/north so that it ends there.
    """
    if horizontal:
        if direction.is_vertical:
            cx = x - length + 1 if skew else x
            _, cy = direction.step(x, y)
            return Rect(cx, cy, length, 1)
        cx = x + 1 if direction is Direction.EAST else x - length
        return Rect(cx, y, length, 1)

    if not direction.is_vertical:
        cx, _ = direction.step(x, y)
        cy = y - length + 1 if skew else y
        return Rect(cx, cy, 1, length)
    cy = y + 1 if direction is Direction.SOUTH else y - length
    return Rect(x, cy, 1, length)

def random_corridor(
    rng: RandomSource, config: GeneratorConfig, x: int, y: int, direction: Direction
) -> Rect:
    horizontal = rng.exclusive_random(2) == 0
    length = rng.inclusive_random(config.corridor_min_length, config.corridor_max_length)
    # Only consumed when the corridor runs across the growth direction.
    skew = False
    if horizontal == direction.is_vertical:
        skew = rng.exclusive_random(2) == 0
    return corridor_rect(x, y, direction, horizontal, length, skew)

def room_seams(room: Rect, direction: Direction, firstroom: bool = False) -> List[Rect]:
    """Seams on every side except the one the room was entered from."""
    back = direction.opposite
    return [room.side(d) for d in DIRECTIONS if firstroom or d is not back]

def corridor_seams(corridor: Rect, direction: Direction) -> List[Rect]:
    # Only the long sides carry seams; the 1-wide ends do not.
    back = direction.opposite
    seams = []
    for d in DIRECTIONS:
        if d is back:
            continue
        if d.is_vertical and corridor.width == 1:
            continue
        if not d.is_vertical and corridor.height == 1:
            continue
        seams.append(corridor.side(d))
    return seams
