# src/dungeongen/mapgen/generator.py
# Grow-from-exits dungeon generator: seed a room in the middle, then keep
# attaching rooms and corridors to the seams of what is already placed.

import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

from ..config import DEFAULT_CONFIG, GeneratorConfig
from ..dump import dump
from ..geometry import DIRECTIONS, Direction, Rect
from ..grid import Grid
from ..rng import RandomSource, StdRandom
from ..tiles import Tile, is_open
from .carve import place_rect
from .features import corridor_seams, random_corridor, random_room, room_seams
from .placement import place_object

logger = logging.getLogger(__name__)

Point = Tuple[int, int]

@dataclass(frozen=True)
class GenerationReport:
    first_room_placed: bool
    features_placed: int  # attachments after the seed room
    rooms: int
    corridors: int
    pending_exits: int
    stopped_early: bool
    exit_pos: Optional[Point] = None
    entrance_pos: Optional[Point] = None

    @property
    def complete(self) -> bool:
        return self.exit_pos is not None and self.entrance_pos is not None

    @property
    def total_features(self) -> int:
        return self.features_placed + int(self.first_room_placed)


class Dungeon:
    """A single map; build a fresh instance for each dungeon."""

    def __init__(
        self,
        width: int,
        height: int,
        rng: Optional[RandomSource] = None,
        config: Optional[GeneratorConfig] = None,
    ):
        self.grid = Grid.empty(width, height)
        self.rng = rng if rng is not None else StdRandom()
        self.config = config or DEFAULT_CONFIG
        self.rooms: List[Rect] = []
        self.room_pool: List[Rect] = []
        self.corridors: List[Rect] = []
        self.exits: List[Rect] = []
        self.report: Optional[GenerationReport] = None

    @property
    def width(self) -> int:
        return self.grid.width

    @property
    def height(self) -> int:
        return self.grid.height

    def get_tile(self, x: int, y: int) -> Tile:
        return self.grid.get(x, y)

    def random_direction(self) -> Direction:
        return DIRECTIONS[self.rng.inclusive_random(0, len(DIRECTIONS) - 1)]

    def generate(self, max_features: int) -> GenerationReport:
        if max_features < 1:
            raise ValueError(f"max_features must be at least 1, got {max_features}")
        if self.report is not None:
            raise RuntimeError("dungeon already generated; create a new Dungeon")

        cx, cy = self.width // 2, self.height // 2
        first_room_placed = self.make_room(cx, cy, self.random_direction(), firstroom=True)
        if not first_room_placed:
            logger.warning("unable to place first room in %dx%d grid", self.width, self.height)

        placed = 0
        stopped_early = False
        for _ in range(max_features - 1):
            if not self.has_exits():
                stopped_early = True
                logger.info("unable to place more features, placed %d of %d", placed, max_features - 1)
                break
            placed += 1

        exit_pos = self.place_object(Tile.EXIT)
        if exit_pos is None:
            logger.warning("unable to place exit")
        entrance_pos = self.place_object(Tile.ENTRANCE)
        if entrance_pos is None:
            logger.warning("unable to place entrance")

        self.report = GenerationReport(
            first_room_placed=first_room_placed,
            features_placed=placed,
            rooms=len(self.rooms),
            corridors=len(self.corridors),
            pending_exits=len(self.exits),
            stopped_early=stopped_early,
            exit_pos=exit_pos,
            entrance_pos=entrance_pos,
        )
        logger.info(
            "generated %dx%d dungeon: %d rooms, %d corridors, %d pending exits",
            self.width, self.height, len(self.rooms), len(self.corridors), len(self.exits),
        )
        return self.report

    def has_exits(self) -> bool:
        """Consume one pending seam by attaching a feature to it."""
        for _ in range(self.config.max_exit_attempts):
            if not self.exits:
                return False

            r = self.rng.exclusive_random(len(self.exits))
            seam = self.exits[r]
            x = self.rng.inclusive_random(seam.x, seam.right - 1)
            y = self.rng.inclusive_random(seam.y, seam.bottom - 1)

            for direction in DIRECTIONS:
                if self.create_feature(x, y, direction):
                    del self.exits[r]
                    return True
        return False

    def create_feature(self, x: int, y: int, direction: Direction) -> bool:
        bx, by = direction.opposite.step(x, y)
        behind = self.grid.get(bx, by)
        # Features only grow out of an existing floor or corridor.
        if not is_open(behind):
            return False

        if self.rng.exclusive_random(100) < self.config.room_chance:
            if not self.make_room(x, y, direction):
                return False
            self.grid.set(x, y, Tile.CLOSED_DOOR)
            return True

        if not self.make_corridor(x, y, direction):
            return False
        # Doors only where a corridor leaves a room.
        if behind == Tile.FLOOR:
            self.grid.set(x, y, Tile.CLOSED_DOOR)
        else:
            self.grid.set(x, y, Tile.CORRIDOR)
        return True

    def make_room(self, x: int, y: int, direction: Direction, firstroom: bool = False) -> bool:
        room = random_room(self.rng, self.config, x, y, direction)
        if not place_rect(self.grid, room, Tile.FLOOR):
            return False

        self.rooms.append(room)
        self.room_pool.append(room)
        self.exits.extend(room_seams(room, direction, firstroom))
        logger.debug("room %s grown %s from (%d, %d)", room, direction.name, x, y)
        return True

    def make_corridor(self, x: int, y: int, direction: Direction) -> bool:
        corridor = random_corridor(self.rng, self.config, x, y, direction)
        if not place_rect(self.grid, corridor, Tile.CORRIDOR):
            return False

        self.corridors.append(corridor)
        self.exits.extend(corridor_seams(corridor, direction))
        logger.debug("corridor %s grown %s from (%d, %d)", corridor, direction.name, x, y)
        return True

    def place_rect(self, rect: Rect, tile: Tile) -> bool:
        return place_rect(self.grid, rect, tile)

    def place_object(self, tile: Tile) -> Optional[Point]:
        return place_object(self.grid, self.room_pool, self.rng, tile)

    def dump(self) -> str:
        return dump(self.grid)

    def __str__(self) -> str:
        return self.dump()
