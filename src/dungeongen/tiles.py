# Canonical tile kinds and their debug-dump glyphs.

from enum import IntEnum


class Tile(IntEnum):
    UNUSED = 0
    FLOOR = 1
    CORRIDOR = 2
    WALL = 3
    CLOSED_DOOR = 4
    OPEN_DOOR = 5
    EXIT = 6
    ENTRANCE = 7


GLYPHS = {
    Tile.UNUSED: " ",
    Tile.FLOOR: ".",
    Tile.CORRIDOR: ",",
    Tile.WALL: "#",
    Tile.CLOSED_DOOR: "+",
    Tile.OPEN_DOOR: "-",
    Tile.EXIT: ">",
    Tile.ENTRANCE: "<",
}

_TILES_BY_GLYPH = {ch: t for t, ch in GLYPHS.items()}

def glyph_for(tile: Tile) -> str:
    return GLYPHS[tile]

def tile_for_glyph(ch: str) -> Tile:
    try:
        return _TILES_BY_GLYPH[ch]
    except KeyError:
        raise ValueError(f"unknown dungeon glyph {ch!r}") from None

def is_open(tile: Tile) -> bool:
    # Only floor and corridor interiors can be grown from.
    return tile in (Tile.FLOOR, Tile.CORRIDOR)
