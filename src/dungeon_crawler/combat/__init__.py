from .engine import CombatEngine, CombatOutcome, CombatResult, CombatRound

__all__ = [
    "CombatEngine",
    "CombatOutcome",
    "CombatResult",
    "CombatRound",
]
