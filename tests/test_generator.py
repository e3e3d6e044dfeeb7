# tests/test_generator.py
import pytest

from dungeongen.config import GeneratorConfig
from dungeongen.dump import dump
from dungeongen.geometry import Direction, Rect
from dungeongen.mapgen.generator import Dungeon
from dungeongen.rng import PMRandom, StdRandom
from dungeongen.tiles import GLYPHS, Tile

SEEDS = [1, 2, 3, 17, 42, 1234, 9999]

def features(d):
    return d.rooms + d.corridors

def room_of(d, pos):
    hits = [r for r in d.rooms if r.contains(*pos)]
    assert len(hits) == 1
    return hits[0]

def seeded_room(d, rect):
    # Stand-in for a seed room with a known footprint.
    assert d.place_rect(rect, Tile.FLOOR)
    d.rooms.append(rect)
    d.room_pool.append(rect)

# ---- scenarios ----

def test_single_feature_is_just_the_seed_room():
    d = Dungeon(50, 50, rng=StdRandom(7))
    report = d.generate(1)
    assert report.first_room_placed
    assert report.features_placed == 0
    assert len(d.rooms) == 1 and d.corridors == []
    assert d.grid.count(Tile.CORRIDOR) == 0
    # the seed room registers a seam on each side
    assert len(d.exits) == 4
    assert {d.rooms[0].side(x) for x in Direction} == set(d.exits)
    # one room only: exit fits, entrance has nowhere left to go
    assert report.exit_pos is not None and d.rooms[0].contains(*report.exit_pos)
    assert report.entrance_pos is None
    assert not report.complete

def test_tiny_grid_stops_early():
    d = Dungeon(10, 10, rng=StdRandom(3))
    report = d.generate(35)
    assert report.stopped_early
    assert report.features_placed < 34
    assert set(d.dump()) <= set(GLYPHS.values()) | {"\n"}

def test_failed_room_leaves_grid_untouched(scripted):
    d = Dungeon(30, 30, rng=scripted([5, 5]))
    seeded_room(d, Rect(8, 8, 6, 6))
    before = d.grid.snapshot()
    # a 5x5 room grown south from (10, 5) would cover the existing one
    assert not d.make_room(10, 5, Direction.SOUTH)
    assert d.grid.snapshot() == before
    assert len(d.rooms) == 1 and d.exits == []

# ---- create_feature ----

def test_attach_needs_open_tile_behind(scripted):
    d = Dungeon(30, 30, rng=scripted([]))
    seeded_room(d, Rect(5, 5, 5, 5))
    before = d.grid.snapshot()
    # behind the corner is wall; behind (7, 3) is the room's wall row
    assert not d.create_feature(4, 4, Direction.NORTH)
    assert not d.create_feature(7, 3, Direction.NORTH)
    # growing north out of the south wall: blank space behind it
    assert not d.create_feature(7, 10, Direction.NORTH)
    assert d.grid.snapshot() == before

def test_room_attachment_gets_door(scripted):
    # room roll, then 4x3
    d = Dungeon(30, 30, rng=scripted([0, 4, 3]))
    seeded_room(d, Rect(5, 5, 5, 5))
    assert d.create_feature(10, 7, Direction.EAST)
    new = Rect(11, 6, 4, 3)
    assert d.rooms[-1] == new
    assert d.get_tile(10, 7) == Tile.CLOSED_DOOR
    assert all(d.get_tile(x, y) == Tile.FLOOR for x, y in new.cells())
    # seams everywhere but the west side it came in through
    assert d.exits == [new.side(Direction.NORTH), new.side(Direction.SOUTH), new.side(Direction.EAST)]

def test_corridor_out_of_room_gets_door(scripted):
    # corridor roll, vertical, length 4
    d = Dungeon(30, 30, rng=scripted([99, 1, 4]))
    seeded_room(d, Rect(5, 5, 5, 5))
    assert d.create_feature(7, 10, Direction.SOUTH)
    assert d.corridors == [Rect(7, 11, 1, 4)]
    assert d.get_tile(7, 10) == Tile.CLOSED_DOOR
    assert [d.get_tile(7, y) for y in range(11, 15)] == [Tile.CORRIDOR] * 4
    assert d.get_tile(7, 15) == Tile.WALL
    assert d.exits == [Rect(8, 11, 1, 4), Rect(6, 11, 1, 4)]

def test_corridor_off_corridor_stays_open(scripted):
    d = Dungeon(30, 30, rng=scripted([99, 1, 4, 99, 1, 3]))
    seeded_room(d, Rect(5, 5, 5, 5))
    assert d.create_feature(7, 10, Direction.SOUTH)
    assert d.create_feature(7, 15, Direction.SOUTH)
    assert d.corridors[-1] == Rect(7, 16, 1, 3)
    assert d.get_tile(7, 15) == Tile.CORRIDOR
    assert d.grid.count(Tile.CLOSED_DOOR) == 1

def test_west_corridor_ends_next_to_attachment(scripted):
    # horizontal, length 3, growing west out of the room's west wall
    d = Dungeon(30, 30, rng=scripted([99, 0, 3]))
    seeded_room(d, Rect(10, 5, 5, 5))
    assert d.create_feature(9, 7, Direction.WEST)
    assert d.corridors == [Rect(6, 7, 3, 1)]
    assert d.get_tile(9, 7) == Tile.CLOSED_DOOR

# ---- has_exits ----

def test_has_exits_consumes_the_seam(scripted):
    # seam 0 at x=10 (east wall), y=7; north/south fail on the tile behind,
    # then east gets a room roll and a 4x3 room.
    d = Dungeon(30, 30, rng=scripted([0, 10, 7, 0, 4, 3]))
    seeded_room(d, Rect(5, 5, 5, 5))
    seam = Rect(10, 5, 1, 5)
    d.exits.append(seam)
    assert d.has_exits()
    assert seam not in d.exits
    assert len(d.exits) == 3
    assert d.get_tile(10, 7) == Tile.CLOSED_DOOR

def test_has_exits_without_seams():
    d = Dungeon(30, 30, rng=StdRandom(1))
    assert not d.has_exits()

def test_has_exits_gives_up_after_attempt_cap(scripted):
    cfg = GeneratorConfig(max_exit_attempts=3)
    # a seam floating in empty space never has an open tile behind it
    d = Dungeon(30, 30, rng=scripted([0, 12, 12] * 3), config=cfg)
    d.exits.append(Rect(12, 12, 1, 1))
    assert not d.has_exits()
    assert d.exits == [Rect(12, 12, 1, 1)]

# ---- whole-map invariants ----

@pytest.mark.parametrize("seed", SEEDS)
def test_features_do_not_overlap_and_are_walled(seed):
    d = Dungeon(80, 50, rng=StdRandom(seed))
    d.generate(60)
    placed = features(d)
    for i, a in enumerate(placed):
        for b in placed[i + 1:]:
            assert not a.overlaps(b), (a, b)
    for f in placed:
        for x in range(f.x - 1, f.right + 1):
            for y in range(f.y - 1, f.bottom + 1):
                assert d.get_tile(x, y) != Tile.UNUSED, (f, x, y)

@pytest.mark.parametrize("seed", SEEDS)
def test_features_keep_off_the_edge(seed):
    d = Dungeon(60, 40, rng=StdRandom(seed))
    d.generate(80)
    for f in features(d):
        assert f.x >= 2 and f.y >= 2
        assert f.right <= d.width - 2 and f.bottom <= d.height - 2
    for x in range(d.width):
        assert d.get_tile(x, 0) == Tile.UNUSED
        assert d.get_tile(x, d.height - 1) == Tile.UNUSED
    for y in range(d.height):
        assert d.get_tile(0, y) == Tile.UNUSED
        assert d.get_tile(d.width - 1, y) == Tile.UNUSED

@pytest.mark.parametrize("seed", SEEDS)
def test_entrance_and_exit_in_different_rooms(seed):
    d = Dungeon(80, 50, rng=StdRandom(seed))
    report = d.generate(40)
    if not report.complete:
        pytest.skip("map too cramped for both objects")
    assert report.exit_pos != report.entrance_pos
    assert room_of(d, report.exit_pos) != room_of(d, report.entrance_pos)
    assert d.get_tile(*report.exit_pos) == Tile.EXIT
    assert d.get_tile(*report.entrance_pos) == Tile.ENTRANCE
    assert d.grid.count(Tile.EXIT) == 1 and d.grid.count(Tile.ENTRANCE) == 1
    assert len(d.room_pool) == len(d.rooms) - 2

@pytest.mark.parametrize("size", [(10, 10), (12, 30), (40, 15), (100, 100)])
def test_generation_terminates(size):
    d = Dungeon(*size, rng=StdRandom(11))
    report = d.generate(200)
    assert report.features_placed <= 199
    assert report.rooms == len(d.rooms)
    assert report.corridors == len(d.corridors)
    assert report.pending_exits == len(d.exits)
    assert report.total_features == len(d.rooms) + len(d.corridors)

def test_doors_sit_between_open_tiles():
    d = Dungeon(80, 50, rng=StdRandom(21))
    d.generate(60)
    for y in range(d.height):
        for x in range(d.width):
            if d.get_tile(x, y) != Tile.CLOSED_DOOR:
                continue
            ns = (d.get_tile(x, y - 1), d.get_tile(x, y + 1))
            ew = (d.get_tile(x - 1, y), d.get_tile(x + 1, y))
            walkable = {Tile.FLOOR, Tile.CORRIDOR, Tile.CLOSED_DOOR, Tile.EXIT, Tile.ENTRANCE}
            assert any(t in walkable for t in ns + ew)

def test_seeded_maps_are_reproducible():
    a = Dungeon(70, 40, rng=PMRandom.from_seed(8))
    b = Dungeon(70, 40, rng=PMRandom.from_seed(8))
    assert a.generate(40) == b.generate(40)
    assert dump(a.grid) == dump(b.grid)
    c = Dungeon(70, 40, rng=StdRandom(8))
    e = Dungeon(70, 40, rng=StdRandom(8))
    c.generate(40)
    e.generate(40)
    assert c.dump() == e.dump()

def test_generate_argument_checks():
    d = Dungeon(30, 30, rng=StdRandom(1))
    with pytest.raises(ValueError):
        d.generate(0)
    d.generate(5)
    with pytest.raises(RuntimeError):
        d.generate(5)
