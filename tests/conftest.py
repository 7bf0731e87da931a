import io
import logging
import sys
from pathlib import Path

import pytest

# Ensure 'src' is on sys.path for test imports without installing the package
ROOT = Path(__file__).resolve().parents[1]
src = ROOT / "src"
if str(src) not in sys.path:
    sys.path.insert(0, str(src))

from dungeon_crawler.dungeon.grid import GridMap  # noqa: E402
from dungeon_crawler.dungeon.tiles import Tile  # noqa: E402
from dungeon_crawler.game.state import GameState  # noqa: E402
from dungeon_crawler.ui.console import Console  # noqa: E402


class ScriptedRolls:
    """Random source that replays fixed values and records requested ranges."""

    def __init__(self, values):
        self._values = list(values)
        self.calls = []

    def randint(self, a, b):
        self.calls.append((a, b))
        assert self._values, "ScriptedRolls ran out of values"
        value = self._values.pop(0)
        assert a <= value <= b, f"scripted roll {value} outside [{a}, {b}]"
        return value

    @property
    def remaining(self):
        return len(self._values)


@pytest.fixture
def rolls():
    """Factory for scripted random sources: ``rolls([15, 3, ...])``."""
    return ScriptedRolls


@pytest.fixture
def make_state():
    """Factory building a GameState from small hand-drawn layouts."""

    def _make(lines):
        return GameState.from_grid(GridMap.from_lines(lines))

    return _make


@pytest.fixture
def place_player():
    """Relocate the player marker, keeping exactly one on the grid."""

    def _place(state, pos):
        state.grid.set_tile(state.player.position, Tile.FLOOR)
        state.player.position = pos
        state.grid.set_tile(pos, Tile.PLAYER)

    return _place


@pytest.fixture
def console_buffer():
    buf = io.StringIO()
    return Console(stream=buf, clear_screen=False), buf


@pytest.fixture(autouse=True)
def _restore_root_logging():
    """The CLI reconfigures the root logger; undo that after each test."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
