from .grid import Direction, GridMap, Position
from .layout import DEFAULT_LAYOUT, MAP_COLS, MAP_ROWS
from .tiles import Tile

__all__ = [
    "DEFAULT_LAYOUT",
    "Direction",
    "GridMap",
    "MAP_COLS",
    "MAP_ROWS",
    "Position",
    "Tile",
]
