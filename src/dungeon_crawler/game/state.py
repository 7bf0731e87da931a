from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional, Sequence

from ..dungeon.grid import GridMap
from ..dungeon.layout import DEFAULT_LAYOUT
from ..settings import Settings
from .entities import MonsterState, PlayerState

logger = logging.getLogger(__name__)


class GameResult(Enum):
    IN_PROGRESS = auto()
    DEFEATED = auto()
    ESCAPED = auto()
    QUIT = auto()

    @property
    def is_terminal(self) -> bool:
        return self is not GameResult.IN_PROGRESS


@dataclass
class GameState:
    """Everything one run owns: the grid, both entities and the outcome.

    Components receive this aggregate explicitly and mutate it in place.
    ``message`` carries a short note about the last move for the status block.
    """

    grid: GridMap
    player: PlayerState
    monster: MonsterState
    result: GameResult = GameResult.IN_PROGRESS
    message: Optional[str] = None

    @classmethod
    def new(cls, settings: Optional[Settings] = None, layout: Sequence[str] = DEFAULT_LAYOUT) -> "GameState":
        """Create a fresh run from the fixed layout."""
        settings = settings or Settings.default()
        grid = GridMap.initialize(layout)
        return cls.from_grid(grid, settings)

    @classmethod
    def from_grid(cls, grid: GridMap, settings: Optional[Settings] = None) -> "GameState":
        settings = settings or Settings.default()
        if grid.player_start is None:
            raise ValueError("Grid has no player start")
        player = PlayerState(health=settings.player.health, position=grid.player_start)
        monster = MonsterState(
            health=settings.monster.health,
            position=grid.monster_start,
            alive=grid.monster_start is not None,
        )
        logger.info(
            "New game: player at %s (hp=%d), monster at %s (hp=%d)",
            player.position,
            player.health,
            monster.position,
            monster.health,
        )
        return cls(grid=grid, player=player, monster=monster)
