from .loop import GameLoop

__all__ = ["GameLoop"]
