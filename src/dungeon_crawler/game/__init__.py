from .entities import MonsterState, PlayerState
from .state import GameResult, GameState

__all__ = ["GameResult", "GameState", "MonsterState", "PlayerState"]
