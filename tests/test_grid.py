from collections import deque

import pytest

from dungeon_crawler.dungeon import DEFAULT_LAYOUT, MAP_COLS, MAP_ROWS, GridMap, Position, Tile
from dungeon_crawler.exceptions import LayoutError, OutOfBounds


def test_initialize_builds_fixed_size_grid_and_finds_player():
    grid = GridMap.initialize()

    assert (grid.rows, grid.cols) == (MAP_ROWS, MAP_COLS)
    assert grid.player_start == Position(1, 1)
    assert grid.monster_start == Position(8, 14)
    assert grid.tile_at(Position(1, 1)) is Tile.PLAYER


def test_exit_is_placed_behind_the_door_on_the_right_boundary():
    grid = GridMap.initialize()

    door = next(grid.positions_of(Tile.DOOR))
    assert grid.tile_at(Position(door.row, MAP_COLS - 1)) is Tile.EXIT
    assert list(grid.positions_of(Tile.EXIT)) == [Position(7, 19)]
    assert grid.render()[7] == "#.#.......#...#..#DE"


def test_render_uses_one_glyph_per_tile():
    grid = GridMap.from_lines(["#.K", "@D#"])

    # exit replaces the last column of the door row
    assert grid.render() == ["#.K", "@DE"]
    assert grid.monster_start is None


def test_render_matches_layout_apart_from_exit():
    rendered = GridMap.initialize().render()
    assert len(rendered) == MAP_ROWS
    for y, (line, source) in enumerate(zip(rendered, DEFAULT_LAYOUT)):
        if y == 7:
            assert line[:-1] == source[:-1]
        else:
            assert line == source


def test_tile_glyphs():
    expected = {
        Tile.WALL: "#",
        Tile.FLOOR: ".",
        Tile.KEY: "K",
        Tile.DOOR: "D",
        Tile.EXIT: "E",
        Tile.MONSTER: "M",
        Tile.PLAYER: "@",
    }
    for tile, glyph in expected.items():
        assert tile.glyph == glyph
        assert Tile.from_glyph(glyph) is tile


@pytest.mark.parametrize("pos", [Position(-1, 0), Position(0, -1), Position(MAP_ROWS, 0), Position(0, MAP_COLS)])
def test_out_of_bounds_access_raises(pos):
    grid = GridMap.initialize()

    assert grid.in_bounds(pos) is False
    with pytest.raises(OutOfBounds):
        grid.tile_at(pos)
    with pytest.raises(IndexError):
        grid.set_tile(pos, Tile.FLOOR)


def test_set_tile_overwrites_unconditionally():
    grid = GridMap.initialize()
    grid.set_tile(Position(0, 0), Tile.KEY)
    assert grid.tile_at(Position(0, 0)) is Tile.KEY


def test_replace_all_sweeps_every_matching_cell():
    grid = GridMap.from_lines(["#M@M#", "#MMM#"])

    assert grid.replace_all(Tile.MONSTER, Tile.FLOOR) == 5
    assert list(grid.positions_of(Tile.MONSTER)) == []
    assert grid.render() == ["#.@.#", "#...#"]


@pytest.mark.parametrize(
    "lines",
    [
        ["#@#", "##"],  # ragged
        ["#@?"],  # unknown glyph
        ["#..", "#.."],  # no player
        ["@.@"],  # two players
        ["#.@D"],  # no room for the exit
        ["#@.DK"],  # exit would overwrite the key
        ["#@.DM"],  # exit would overwrite the monster
    ],
)
def test_malformed_layouts_are_rejected(lines):
    with pytest.raises(LayoutError):
        GridMap.from_lines(lines)


def test_initialize_rejects_wrong_dimensions():
    with pytest.raises(LayoutError):
        GridMap.initialize(["#@#"])


def test_key_door_and_monster_are_reachable_from_start():
    grid = GridMap.initialize()
    start = grid.player_start
    seen = {start}
    queue = deque([start])
    while queue:
        pos = queue.popleft()
        for d in ((-1, 0), (1, 0), (0, -1), (0, 1)):
            nxt = Position(pos.row + d[0], pos.col + d[1])
            if nxt in seen or not grid.in_bounds(nxt) or grid.tile_at(nxt) is Tile.WALL:
                continue
            seen.add(nxt)
            queue.append(nxt)

    for tile in (Tile.KEY, Tile.DOOR, Tile.MONSTER, Tile.EXIT):
        assert set(grid.positions_of(tile)) <= seen, tile
