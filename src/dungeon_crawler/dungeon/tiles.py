from __future__ import annotations

from enum import Enum

from ..exceptions import LayoutError


class Tile(Enum):
    """Dungeon tile types, valued by their ASCII glyph.

    - WALL: Impassable obstacle
    - FLOOR: Open tile
    - KEY: Pickup that unlocks the door
    - DOOR: Locked until the player carries the key
    - EXIT: Stepping here ends the game in escape
    - MONSTER: Occupied by the monster while it lives
    - PLAYER: The player's current cell
    """

    WALL = "#"
    FLOOR = "."
    KEY = "K"
    DOOR = "D"
    EXIT = "E"
    MONSTER = "M"
    PLAYER = "@"

    @property
    def glyph(self) -> str:
        return self.value

    @classmethod
    def from_glyph(cls, glyph: str) -> "Tile":
        try:
            return cls(glyph)
        except ValueError:
            raise LayoutError(f"Unknown tile glyph: {glyph!r}") from None
