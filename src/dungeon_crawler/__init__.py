"""
Dungeon Crawler package root.

A small turn-based ASCII dungeon: find the key, unlock the door, reach the
exit, and survive the monster on the way. Domain logic (grid, movement,
combat) stays free of terminal specifics; the console and input adapters
live in ``ui`` and ``input``.
"""

__version__ = "0.1.0"

__all__ = [
    "__version__",
]
