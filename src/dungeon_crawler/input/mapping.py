from __future__ import annotations

import logging
from typing import Dict, Optional

from .actions import Command

logger = logging.getLogger(__name__)


class KeyMapper:
    """Case-insensitive mapping from typed keys to commands.

    Example usage:
        mapper = KeyMapper.default()
        mapper.translate_key("w")   # -> Command.MOVE_UP
        mapper.translate_key("x")   # -> None
    """

    def __init__(self, bindings: Optional[Dict[str, Command]] = None) -> None:
        self._bindings: Dict[str, Command] = {}
        if bindings:
            for key, command in bindings.items():
                self.bind(key, command)

    @staticmethod
    def _normalize(key: Optional[str]) -> Optional[str]:
        if not isinstance(key, str):
            return None
        k = key.strip()
        if not k:
            return None
        return k.upper()

    def bind(self, key: str, command: Command) -> None:
        nk = self._normalize(key)
        if nk is None:
            logger.warning("Attempted to bind invalid key: %r", key)
            return
        self._bindings[nk] = command

    def translate_key(self, key: Optional[str]) -> Optional[Command]:
        """Translate a key into a command, or None when it is not bound."""
        nk = self._normalize(key)
        if nk is None:
            return None
        return self._bindings.get(nk)

    @classmethod
    def default(cls) -> "KeyMapper":
        """WASD movement and Q to quit."""
        mapper = cls()
        mapper.bind("W", Command.MOVE_UP)
        mapper.bind("A", Command.MOVE_LEFT)
        mapper.bind("S", Command.MOVE_DOWN)
        mapper.bind("D", Command.MOVE_RIGHT)
        mapper.bind("Q", Command.QUIT)
        return mapper


__all__ = ["KeyMapper"]
