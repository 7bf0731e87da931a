from .rng import RNG, RandomSource

__all__ = ["RNG", "RandomSource"]
