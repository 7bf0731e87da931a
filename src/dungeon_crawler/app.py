from __future__ import annotations

import logging
from typing import Optional

from .combat.engine import CombatEngine
from .core.rng import RandomSource, RNG
from .dungeon.movement import MovementResolver
from .engine.loop import GameLoop
from .game.state import GameResult, GameState
from .input.providers.base import InputSource
from .input.providers.console import ConsoleInput
from .settings import Settings
from .ui.console import Console

logger = logging.getLogger(__name__)

EXIT_CODES = {
    GameResult.QUIT: 0,
    GameResult.ESCAPED: 0,
    GameResult.DEFEATED: 0,
}


def build_game(
    settings: Optional[Settings] = None,
    rng: Optional[RandomSource] = None,
    input_source: Optional[InputSource] = None,
    console: Optional[Console] = None,
) -> GameLoop:
    """Wire a fresh game: state, combat, movement and terminal adapters."""
    settings = settings or Settings.default()
    state = GameState.new(settings)
    combat = CombatEngine(
        rng or RNG(),
        player_attack=settings.player.attack_range,
        monster_attack=settings.monster.attack_range,
    )
    console = console or Console(
        clear_screen=settings.display.clear_screen,
        title=settings.display.title,
    )
    return GameLoop(state, MovementResolver(combat), input_source or ConsoleInput(), console)


def run_game(
    settings: Optional[Settings] = None,
    seed: Optional[int] = None,
    input_source: Optional[InputSource] = None,
    console: Optional[Console] = None,
) -> int:
    """Play one game to its end and return the process exit code.

    Every terminal outcome exits cleanly with 0; Ctrl+C exits with 130.
    """
    loop = build_game(settings, RNG(seed), input_source, console)
    try:
        result = loop.run()
    except KeyboardInterrupt:
        loop.console.write()
        loop.console.write("Interrupted by user")
        logger.info("Interrupted by user after %d turn(s)", loop.turns)
        return 130
    return EXIT_CODES[result]
