from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..dungeon.grid import Position


@dataclass
class PlayerState:
    health: int
    position: Position
    has_key: bool = False

    @property
    def alive(self) -> bool:
        return self.health > 0

    @property
    def display_health(self) -> int:
        return max(0, self.health)

    def take_damage(self, amount: int) -> int:
        """Subtract damage; health may go negative, display clamps it."""
        self.health -= amount
        return self.health

    def pick_up_key(self) -> None:
        self.has_key = True


@dataclass
class MonsterState:
    health: int
    position: Optional[Position] = None
    alive: bool = True

    @property
    def display_health(self) -> int:
        return max(0, self.health)

    def take_damage(self, amount: int) -> int:
        self.health -= amount
        return self.health

    def defeat(self) -> None:
        self.alive = False
