from __future__ import annotations

from collections import deque
from typing import Iterable, Optional

from .base import InputSource


class ScriptedInput(InputSource):
    """Replays a fixed sequence of keys, e.g. for tests and demos.

    Acknowledgements are counted but never consume keys. Once the script is
    exhausted, ``read_key`` reports end of input.
    """

    def __init__(self, keys: Iterable[str]) -> None:
        self._keys = deque(keys)
        self.acks = 0

    @property
    def remaining(self) -> int:
        return len(self._keys)

    def read_key(self) -> Optional[str]:
        if not self._keys:
            return None
        return self._keys.popleft()

    def wait_for_ack(self) -> None:
        self.acks += 1


__all__ = ["ScriptedInput"]
