from pathlib import Path
import textwrap

import pytest

from dungeon_crawler.exceptions import ConfigError
from dungeon_crawler.settings import Settings


def write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "settings.yaml"
    path.write_text(textwrap.dedent(text), encoding="utf-8")
    return path


def test_packaged_defaults_match_reference_values():
    settings = Settings.load()

    assert settings == Settings.default()
    assert (settings.player.health, settings.player.attack_range) == (100, (5, 15))
    assert (settings.monster.health, settings.monster.attack_range) == (50, (3, 10))
    assert settings.display.clear_screen is True


def test_user_file_is_merged_over_defaults(tmp_path):
    path = write(
        tmp_path,
        """
        monster:
          health: 80
        display:
          clear_screen: false
        """,
    )

    settings = Settings.load(path)

    assert settings.monster.health == 80
    assert settings.monster.attack_range == (3, 10)
    assert settings.player.health == 100
    assert settings.display.clear_screen is False
    assert settings.display.title == Settings.default().display.title


def test_empty_user_file_keeps_defaults(tmp_path):
    assert Settings.load(write(tmp_path, "")) == Settings.default()


@pytest.mark.parametrize(
    "text",
    [
        "player:\n  attack_min: 20\n",
        "player:\n  health: 0\n",
        "monster:\n  attack_min: -1\n",
        "monster:\n  speed: 3\n",
        "map:\n  rows: 5\n",
        "player: 3\n",
        "- just\n- a list\n",
        "player: [unclosed\n",
        "player:\n  health: '100'\n",
        "monster:\n  attack_min: abc\n",
        "player:\n  attack_min: 5.5\n",
        "player:\n  health: true\n",
        "display:\n  clear_screen: 'yes'\n",
        "display:\n  title: 42\n",
    ],
)
def test_invalid_user_files_raise_config_error(tmp_path, text):
    with pytest.raises(ConfigError):
        Settings.load(write(tmp_path, text))


def test_missing_user_file_is_an_error(tmp_path):
    with pytest.raises(ConfigError):
        Settings.load(tmp_path / "nope.yaml")


def test_directory_as_user_file_is_an_error(tmp_path):
    with pytest.raises(ConfigError, match="not a file"):
        Settings.load(tmp_path)


def test_non_integer_attack_is_rejected_before_play(tmp_path):
    path = write(tmp_path, "player:\n  attack_min: 5.5\n")

    with pytest.raises(ConfigError, match=r"player\.attack_min must be int"):
        Settings.load(path)
