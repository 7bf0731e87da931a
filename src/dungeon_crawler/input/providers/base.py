from __future__ import annotations

import abc
from typing import Optional


class InputSource(abc.ABC):
    """Where the game loop gets its keystrokes from.

    Both calls block until input arrives. Implementations must not raise on
    end of input; ``read_key`` reports it as None instead.
    """

    @abc.abstractmethod
    def read_key(self) -> Optional[str]:
        """Return one command character, '' for a blank entry, or None at end of input."""

    @abc.abstractmethod
    def wait_for_ack(self) -> None:
        """Block until the player acknowledges (typically by pressing Enter)."""


__all__ = ["InputSource"]
