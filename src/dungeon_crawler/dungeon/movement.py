from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING, Callable, Dict, Optional

from ..game.state import GameResult, GameState
from .grid import Direction, Position
from .tiles import Tile

if TYPE_CHECKING:
    from ..combat.engine import CombatEngine, CombatResult, RoundCallback

logger = logging.getLogger(__name__)


class MoveOutcome(Enum):
    MOVED = auto()
    BLOCKED = auto()
    OUT_OF_BOUNDS = auto()
    PICKED_UP_KEY = auto()
    UNLOCKED_DOOR = auto()
    LOCKED = auto()
    COMBAT = auto()
    ESCAPED = auto()


@dataclass
class MoveResult:
    """What a single movement attempt did.

    Attributes:
        outcome: Which tile effect applied
        position: The player's position after the attempt
        combat: The fight's result when the destination held a live monster
        message: Optional user-facing note about the move
    """

    outcome: MoveOutcome
    position: Position
    combat: Optional["CombatResult"] = None
    message: Optional[str] = None

    @property
    def moved(self) -> bool:
        return self.outcome in (MoveOutcome.MOVED, MoveOutcome.PICKED_UP_KEY, MoveOutcome.UNLOCKED_DOOR)


_Handler = Callable[["MovementResolver", GameState, Position, Optional["RoundCallback"]], MoveResult]


class MovementResolver:
    """Applies one directional intent to the game state.

    The destination tile selects exactly one effect through ``_HANDLERS``;
    tiles without an entry behave like floor. Destinations outside the grid
    are rejected before any tile lookup.
    """

    def __init__(self, combat: "CombatEngine") -> None:
        self.combat = combat

    def resolve(
        self,
        state: GameState,
        direction: Direction,
        on_round: Optional["RoundCallback"] = None,
    ) -> MoveResult:
        origin = state.player.position
        target = origin.offset(direction)
        if not state.grid.in_bounds(target):
            logger.debug("Blocked move %s from %s: out of bounds", direction.name, origin)
            return MoveResult(MoveOutcome.OUT_OF_BOUNDS, origin)

        tile = state.grid.tile_at(target)
        handler = self._HANDLERS.get(tile, MovementResolver._walk)
        result = handler(self, state, target, on_round)
        logger.debug("Move %s from %s onto %s -> %s", direction.name, origin, tile.name, result.outcome.name)
        return result

    # ---- Effects ---------------------------------------------------------
    @staticmethod
    def _step(state: GameState, target: Position) -> None:
        grid = state.grid
        grid.set_tile(state.player.position, Tile.FLOOR)
        state.player.position = target
        grid.set_tile(target, Tile.PLAYER)

    def _walk(self, state: GameState, target: Position, on_round=None) -> MoveResult:
        self._step(state, target)
        return MoveResult(MoveOutcome.MOVED, target)

    def _wall(self, state: GameState, target: Position, on_round=None) -> MoveResult:
        return MoveResult(MoveOutcome.BLOCKED, state.player.position)

    def _monster(self, state: GameState, target: Position, on_round=None) -> MoveResult:
        if not state.monster.alive:
            return self._walk(state, target, on_round)
        combat = self.combat.fight(state, on_round)
        return MoveResult(MoveOutcome.COMBAT, state.player.position, combat=combat)

    def _key(self, state: GameState, target: Position, on_round=None) -> MoveResult:
        state.player.pick_up_key()
        self._step(state, target)
        logger.info("Picked up the key at %s", target)
        return MoveResult(MoveOutcome.PICKED_UP_KEY, target, message="You picked up a key.")

    def _door(self, state: GameState, target: Position, on_round=None) -> MoveResult:
        if not state.player.has_key:
            logger.info("Blocked by locked door at %s", target)
            return MoveResult(
                MoveOutcome.LOCKED,
                state.player.position,
                message="The door is locked. You need a key.",
            )
        state.grid.set_tile(target, Tile.FLOOR)
        self._step(state, target)
        logger.info("Door at %s unlocked", target)
        return MoveResult(MoveOutcome.UNLOCKED_DOOR, target, message="You unlocked the door.")

    def _exit(self, state: GameState, target: Position, on_round=None) -> MoveResult:
        state.result = GameResult.ESCAPED
        logger.info("Player reached the exit at %s", target)
        return MoveResult(MoveOutcome.ESCAPED, state.player.position)

    _HANDLERS: Dict[Tile, _Handler] = {
        Tile.WALL: _wall,
        Tile.MONSTER: _monster,
        Tile.KEY: _key,
        Tile.DOOR: _door,
        Tile.EXIT: _exit,
        Tile.FLOOR: _walk,
    }
