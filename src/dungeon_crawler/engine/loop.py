from __future__ import annotations

import logging
from typing import Optional

from ..combat.engine import CombatRound
from ..dungeon.movement import MoveOutcome, MovementResolver
from ..game.state import GameResult, GameState
from ..input.actions import Command
from ..input.mapping import KeyMapper
from ..input.providers.base import InputSource
from ..ui.console import Console

logger = logging.getLogger(__name__)


class GameLoop:
    """The blocking, turn-based game loop.

    Each turn renders the map and status, reads one key, dispatches it, and
    then checks for defeat. The loop ends when the state reaches a terminal
    result (defeated, escaped or quit).
    """

    def __init__(
        self,
        state: GameState,
        resolver: MovementResolver,
        input_source: InputSource,
        console: Console,
        mapper: Optional[KeyMapper] = None,
    ) -> None:
        self.state = state
        self.resolver = resolver
        self.input = input_source
        self.console = console
        self.mapper = mapper or KeyMapper.default()
        self._turns: int = 0

    @property
    def turns(self) -> int:
        return self._turns

    @property
    def running(self) -> bool:
        return not self.state.result.is_terminal

    def run(self) -> GameResult:
        """Play turns until the game ends and return the terminal result."""
        logger.info("Game loop started")
        while self.running:
            self.turn()
        logger.info("Game over after %d turn(s): %s", self._turns, self.state.result.name)
        return self.state.result

    def turn(self) -> None:
        """Play a single turn. No-op once the game has ended."""
        if not self.running:
            logger.debug("turn() called after the game ended; ignored")
            return
        # Defeat is checked before reading input so it wins over any move.
        if not self.state.player.alive:
            self._defeat()
            return

        self._turns += 1
        self.console.render_turn(self.state)
        key = self.input.read_key()
        if key is None:
            self._quit()
            return

        command = self.mapper.translate_key(key)
        if command is None:
            logger.debug("Ignoring unmapped key %r", key)
            return
        if command is Command.QUIT:
            self._quit()
            return

        self._move(command)
        if self.state.result is GameResult.ESCAPED:
            self.console.escaped(self.state)
            return
        if not self.state.player.alive:
            self._defeat()

    # ---- Dispatch --------------------------------------------------------
    def _move(self, command: Command) -> None:
        direction = command.direction
        if direction is None:
            return
        result = self.resolver.resolve(self.state, direction, on_round=self._on_combat_round)
        self.state.message = result.message
        if result.outcome is MoveOutcome.COMBAT and result.combat is not None:
            if result.combat.player_won:
                self.console.victory()
            self.console.prompt("\nPress Enter to return to the dungeon...")
            self.input.wait_for_ack()

    def _on_combat_round(self, rnd: CombatRound) -> None:
        if rnd.number == 1:
            self.console.combat_intro()
        self.console.combat_round(rnd)
        if rnd.monster_retaliated:
            self.console.prompt("Press Enter to continue...")
            self.input.wait_for_ack()

    # ---- Terminal transitions ---------------------------------------------
    def _quit(self) -> None:
        self.console.farewell()
        self.state.result = GameResult.QUIT

    def _defeat(self) -> None:
        self.console.defeated(self.state)
        self.state.result = GameResult.DEFEATED
