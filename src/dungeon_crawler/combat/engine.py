from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING, Callable, List, Optional, Tuple

from ..core.rng import RandomSource
from ..dungeon.tiles import Tile

if TYPE_CHECKING:
    from ..game.state import GameState

logger = logging.getLogger(__name__)


class CombatOutcome(Enum):
    PLAYER_VICTORY = auto()
    PLAYER_DEFEAT = auto()


@dataclass(frozen=True)
class CombatRound:
    """One exchange. Monster fields are None when the monster fell first."""

    number: int
    player_damage: int
    monster_health: int
    monster_damage: Optional[int] = None
    player_health: Optional[int] = None

    @property
    def monster_retaliated(self) -> bool:
        return self.monster_damage is not None


@dataclass
class CombatResult:
    outcome: CombatOutcome
    rounds: List[CombatRound] = field(default_factory=list)

    @property
    def player_won(self) -> bool:
        return self.outcome is CombatOutcome.PLAYER_VICTORY


RoundCallback = Callable[[CombatRound], None]


class CombatEngine:
    """Resolves a fight between the player and the monster.

    The player always strikes first. Rounds repeat until one side drops to
    zero health or below; the monster never retaliates after a killing blow.
    """

    def __init__(
        self,
        rng: RandomSource,
        player_attack: Tuple[int, int] = (5, 15),
        monster_attack: Tuple[int, int] = (3, 10),
    ) -> None:
        for lo, hi in (player_attack, monster_attack):
            if lo < 0 or lo > hi:
                raise ValueError(f"Invalid attack range: [{lo}, {hi}]")
        self.rng = rng
        self.player_attack = player_attack
        self.monster_attack = monster_attack

    def fight(self, state: "GameState", on_round: Optional[RoundCallback] = None) -> CombatResult:
        """Run combat to completion, mutating ``state`` in place.

        Args:
            state: The game state holding both combatants and the grid.
            on_round: Called after every round, before the next one starts.

        Returns:
            CombatResult with the outcome and every round played.
        """
        player = state.player
        monster = state.monster

        if not monster.alive:
            logger.warning("fight() called with the monster already defeated; no action taken.")
            return CombatResult(CombatOutcome.PLAYER_VICTORY)
        if not player.alive:
            logger.warning("fight() called with the player already defeated; no action taken.")
            return CombatResult(CombatOutcome.PLAYER_DEFEAT)

        logger.info("Combat started: player hp=%d, monster hp=%d", player.health, monster.health)
        rounds: List[CombatRound] = []
        while player.alive and monster.health > 0:
            number = len(rounds) + 1
            player_damage = self.rng.randint(*self.player_attack)
            monster.take_damage(player_damage)
            logger.debug(
                "Round %d: player hits monster for %d (monster hp %d)",
                number,
                player_damage,
                monster.health,
            )

            if monster.health <= 0:
                rnd = CombatRound(number, player_damage, monster.health)
                rounds.append(rnd)
                if on_round is not None:
                    on_round(rnd)
                break

            monster_damage = self.rng.randint(*self.monster_attack)
            player.take_damage(monster_damage)
            logger.debug(
                "Round %d: monster hits player for %d (player hp %d)",
                number,
                monster_damage,
                player.health,
            )
            rnd = CombatRound(number, player_damage, monster.health, monster_damage, player.health)
            rounds.append(rnd)
            if on_round is not None:
                on_round(rnd)

        if monster.health <= 0:
            self._slay_monster(state)
            logger.info("Monster defeated after %d round(s)", len(rounds))
            return CombatResult(CombatOutcome.PLAYER_VICTORY, rounds)

        logger.info("Player defeated after %d round(s)", len(rounds))
        return CombatResult(CombatOutcome.PLAYER_DEFEAT, rounds)

    @staticmethod
    def _slay_monster(state: "GameState") -> None:
        state.monster.defeat()
        # Sweep the whole grid so stray monster glyphs cannot survive the kill.
        cleared = state.grid.replace_all(Tile.MONSTER, Tile.FLOOR)
        logger.debug("Cleared %d monster tile(s) from the grid", cleared)
