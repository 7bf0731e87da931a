from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

from ..combat.engine import CombatRound
from ..game.state import GameState

logger = logging.getLogger(__name__)

CLEAR_SEQUENCE = "\033[2J\033[H"
CONTROLS = "Controls: W(up), A(left), S(down), D(right), Q(quit)"
DIVIDER = "-" * 24


class Console:
    """Text presentation of the game on a stream (stdout by default).

    Every method writes complete lines and flushes, so prompts appear before
    the loop blocks on input.
    """

    def __init__(self, stream: Optional[TextIO] = None, clear_screen: bool = True, title: str = "") -> None:
        self._stream = stream
        self.clear_enabled = clear_screen
        self.title = title

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def write(self, text: str = "", end: str = "\n") -> None:
        self.stream.write(text + end)
        self.stream.flush()

    def clear(self) -> None:
        if self.clear_enabled:
            self.write(CLEAR_SEQUENCE, end="")

    # ---- Frames ----------------------------------------------------------
    def render_map(self, state: GameState) -> None:
        for line in state.grid.render():
            self.write(line)

    def render_status(self, state: GameState) -> None:
        player = state.player
        self.write()
        self.write(f"Health: {player.display_health}")
        self.write(f"Inventory: {'Key' if player.has_key else 'Empty'}")
        if state.message:
            self.write(state.message)
        self.write(DIVIDER)
        self.write(CONTROLS)
        self.write("Enter your move: ", end="")

    def render_turn(self, state: GameState) -> None:
        self.clear()
        if self.title:
            self.write(self.title)
        self.render_map(state)
        self.render_status(state)

    def render_final(self, state: GameState, banner: str, detail: str) -> None:
        self.clear()
        self.render_map(state)
        self.write()
        self.write(banner)
        self.write(detail)

    # ---- Narration -------------------------------------------------------
    def combat_intro(self) -> None:
        self.clear()
        self.write("--- COMBAT! ---")
        self.write("An angry monster blocks your path!")
        self.write()

    def combat_round(self, rnd: CombatRound) -> None:
        self.write(
            f"You attack the monster for {rnd.player_damage} damage. "
            f"Monster health: {max(0, rnd.monster_health)}"
        )
        if rnd.monster_retaliated:
            self.write(
                f"The monster attacks you for {rnd.monster_damage} damage. "
                f"Your health: {max(0, rnd.player_health)}"
            )
            self.write()

    def prompt(self, text: str) -> None:
        self.write(text, end="")

    def victory(self) -> None:
        self.write()
        self.write("You defeated the monster!")

    def escaped(self, state: GameState) -> None:
        self.render_final(state, "*** CONGRATULATIONS! ***", "You found the exit and escaped the dungeon!")

    def defeated(self, state: GameState) -> None:
        self.render_final(state, "--- GAME OVER ---", "You were defeated by the monster!")

    def farewell(self) -> None:
        self.write("Quitting the game. Farewell!")


__all__ = ["Console", "CLEAR_SEQUENCE", "CONTROLS"]
