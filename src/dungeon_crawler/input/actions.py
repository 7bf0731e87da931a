from __future__ import annotations

from enum import Enum, auto
from typing import Optional

from ..dungeon.grid import Direction


class Command(Enum):
    """Logical commands the game loop understands.

    Keeps the loop independent of which physical keys produce them.
    """

    MOVE_UP = auto()
    MOVE_DOWN = auto()
    MOVE_LEFT = auto()
    MOVE_RIGHT = auto()
    QUIT = auto()

    @property
    def direction(self) -> Optional[Direction]:
        return _DIRECTIONS.get(self)


_DIRECTIONS = {
    Command.MOVE_UP: Direction.UP,
    Command.MOVE_DOWN: Direction.DOWN,
    Command.MOVE_LEFT: Direction.LEFT,
    Command.MOVE_RIGHT: Direction.RIGHT,
}


__all__ = ["Command"]
