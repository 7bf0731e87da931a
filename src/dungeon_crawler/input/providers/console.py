from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

from .base import InputSource

logger = logging.getLogger(__name__)


class ConsoleInput(InputSource):
    """Line-buffered terminal input read one character at a time.

    Every non-whitespace character is its own command, so ``ddd`` followed by
    Enter moves three times. Whitespace and blank lines are skipped.
    """

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self._stream = stream
        self._pending = ""

    @property
    def stream(self) -> TextIO:
        # Resolved lazily so a replaced sys.stdin is honoured.
        return self._stream if self._stream is not None else sys.stdin

    def read_key(self) -> Optional[str]:
        while True:
            self._pending = self._pending.lstrip()
            if self._pending:
                key, self._pending = self._pending[0], self._pending[1:]
                return key
            line = self.stream.readline()
            if line == "":
                logger.info("End of input reached")
                return None
            self._pending = line

    def wait_for_ack(self) -> None:
        """Discard anything left on the current line, then wait for Enter."""
        if self._pending:
            logger.debug("Discarding unread input before acknowledgement: %r", self._pending)
            self._pending = ""
        self.stream.readline()


__all__ = ["ConsoleInput"]
