from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Optional, Sequence

from ..exceptions import LayoutError, OutOfBounds
from .layout import DEFAULT_LAYOUT, MAP_COLS, MAP_ROWS
from .tiles import Tile

logger = logging.getLogger(__name__)


class Direction(Enum):
    """Cardinal unit steps as (row delta, column delta)."""

    UP = (-1, 0)
    DOWN = (1, 0)
    LEFT = (0, -1)
    RIGHT = (0, 1)

    @property
    def drow(self) -> int:
        return self.value[0]

    @property
    def dcol(self) -> int:
        return self.value[1]


@dataclass(frozen=True)
class Position:
    row: int
    col: int

    def offset(self, direction: Direction) -> "Position":
        return Position(self.row + direction.drow, self.col + direction.dcol)


class GridMap:
    """
    The mutable tile grid. All tile access is bounds-checked: reads and writes
    outside the grid raise OutOfBounds instead of relying on a wall border.
    """

    def __init__(self, tiles: List[List[Tile]]) -> None:
        if not tiles or not tiles[0]:
            raise LayoutError("Layout must have at least one row and one column")
        width = len(tiles[0])
        for y, row in enumerate(tiles):
            if len(row) != width:
                raise LayoutError(f"Row {y} has {len(row)} columns, expected {width}")
        self._tiles = tiles
        self.player_start: Optional[Position] = None
        self.monster_start: Optional[Position] = None

    # ---- Construction ----------------------------------------------------
    @classmethod
    def from_lines(cls, lines: Sequence[str]) -> "GridMap":
        """Parse an ASCII layout.

        Locates the single player marker, marks the rightmost column of every
        door row as the exit, then records the first remaining monster.
        """
        grid = cls([[Tile.from_glyph(ch) for ch in line] for line in lines])
        players = list(grid.positions_of(Tile.PLAYER))
        if len(players) != 1:
            raise LayoutError(f"Layout must contain exactly one player marker, found {len(players)}")
        grid.player_start = players[0]

        door_rows = sorted({p.row for p in grid.positions_of(Tile.DOOR)})
        for row in door_rows:
            exit_pos = Position(row, grid.cols - 1)
            if grid.tile_at(exit_pos) not in (Tile.WALL, Tile.FLOOR):
                raise LayoutError(
                    f"No room for an exit behind the door on row {row}: "
                    f"column {exit_pos.col} holds {grid.tile_at(exit_pos).glyph!r}"
                )
            grid.set_tile(exit_pos, Tile.EXIT)
        grid.monster_start = next(grid.positions_of(Tile.MONSTER), None)
        logger.debug(
            "Parsed %dx%d grid: player=%s monster=%s exits on rows %s",
            grid.rows,
            grid.cols,
            grid.player_start,
            grid.monster_start,
            door_rows,
        )
        return grid

    @classmethod
    def initialize(cls, layout: Sequence[str] = DEFAULT_LAYOUT) -> "GridMap":
        """Build the fixed-size dungeon from a literal layout."""
        if len(layout) != MAP_ROWS or any(len(line) != MAP_COLS for line in layout):
            raise LayoutError(f"Layout must be exactly {MAP_ROWS} rows of {MAP_COLS} columns")
        return cls.from_lines(layout)

    # ---- Bounds / access -------------------------------------------------
    @property
    def rows(self) -> int:
        return len(self._tiles)

    @property
    def cols(self) -> int:
        return len(self._tiles[0])

    def in_bounds(self, pos: Position) -> bool:
        return 0 <= pos.row < self.rows and 0 <= pos.col < self.cols

    def _check(self, pos: Position) -> None:
        if not self.in_bounds(pos):
            raise OutOfBounds(
                f"Position out of bounds: ({pos.row},{pos.col}) not in [0,{self.rows})x[0,{self.cols})"
            )

    def tile_at(self, pos: Position) -> Tile:
        self._check(pos)
        return self._tiles[pos.row][pos.col]

    def set_tile(self, pos: Position, tile: Tile) -> None:
        self._check(pos)
        self._tiles[pos.row][pos.col] = tile

    # ---- Query / sweep ---------------------------------------------------
    def positions_of(self, tile: Tile) -> Iterator[Position]:
        for y, row in enumerate(self._tiles):
            for x, t in enumerate(row):
                if t is tile:
                    yield Position(y, x)

    def replace_all(self, old: Tile, new: Tile) -> int:
        """Overwrite every cell holding ``old``; returns how many changed."""
        count = 0
        for row in self._tiles:
            for x, t in enumerate(row):
                if t is old:
                    row[x] = new
                    count += 1
        return count

    # ---- Export ----------------------------------------------------------
    def render(self) -> List[str]:
        return ["".join(t.glyph for t in row) for row in self._tiles]

