from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass, field
from importlib import resources
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import yaml

from .exceptions import ConfigError

logger = logging.getLogger(__name__)


def _require(name: str, value: Any, kind: type) -> None:
    # bool is a subclass of int, but `health: true` is not a number
    if not isinstance(value, kind) or (isinstance(value, bool) and kind is not bool):
        raise ConfigError(f"{name} must be {kind.__name__}, got {value!r}")


@dataclass(frozen=True)
class CombatantSettings:
    health: int
    attack_min: int
    attack_max: int

    @property
    def attack_range(self) -> Tuple[int, int]:
        return self.attack_min, self.attack_max

    def validate(self, name: str) -> None:
        for f in dataclasses.fields(self):
            _require(f"{name}.{f.name}", getattr(self, f.name), int)
        if self.health <= 0:
            raise ConfigError(f"{name}.health must be positive, got {self.health}")
        if self.attack_min < 0:
            raise ConfigError(f"{name}.attack_min must not be negative, got {self.attack_min}")
        if self.attack_min > self.attack_max:
            raise ConfigError(
                f"{name}.attack_min ({self.attack_min}) exceeds attack_max ({self.attack_max})"
            )


@dataclass(frozen=True)
class DisplaySettings:
    clear_screen: bool = True
    title: str = "=== Dungeon Crawler ==="

    def validate(self, name: str) -> None:
        _require(f"{name}.clear_screen", self.clear_screen, bool)
        _require(f"{name}.title", self.title, str)


@dataclass(frozen=True)
class Settings:
    player: CombatantSettings = field(default_factory=lambda: CombatantSettings(100, 5, 15))
    monster: CombatantSettings = field(default_factory=lambda: CombatantSettings(50, 3, 10))
    display: DisplaySettings = field(default_factory=DisplaySettings)

    @staticmethod
    def default() -> "Settings":
        return Settings()

    @staticmethod
    def _load_yaml(path: Path) -> dict:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise ConfigError(f"{path}: top level must be a mapping")
        return data

    @classmethod
    def _deep_merge(cls, base: dict, overlay: dict) -> dict:
        merged = dict(base)
        for k, v in (overlay or {}).items():
            if isinstance(v, dict) and isinstance(base.get(k), dict):
                merged[k] = cls._deep_merge(base[k], v)
            else:
                merged[k] = v
        return merged

    @staticmethod
    def _section(data: Dict[str, Any], name: str, kind: type) -> Any:
        raw = data.get(name, {})
        if not isinstance(raw, dict):
            raise ConfigError(f"Section '{name}' must be a mapping")
        try:
            return kind(**raw)
        except TypeError as exc:
            raise ConfigError(f"Invalid keys in section '{name}': {exc}") from exc

    @classmethod
    def _from_dict(cls, data: dict) -> "Settings":
        unknown = set(data) - {f.name for f in dataclasses.fields(cls)}
        if unknown:
            raise ConfigError(f"Unknown settings sections: {', '.join(sorted(unknown))}")
        settings = Settings(
            player=cls._section(data, "player", CombatantSettings),
            monster=cls._section(data, "monster", CombatantSettings),
            display=cls._section(data, "display", DisplaySettings),
        )
        settings.player.validate("player")
        settings.monster.validate("monster")
        settings.display.validate("display")
        return settings

    @classmethod
    def load(cls, user_path: Optional[Path] = None) -> "Settings":
        """Load settings from built-in defaults and an optional user override file.

        Unlike the defaults, a user file that is named but missing is an error.
        """
        try:
            with resources.files("dungeon_crawler.config").joinpath("defaults.yaml").open(
                "r", encoding="utf-8"
            ) as f:
                default_data = yaml.safe_load(f) or {}
        except FileNotFoundError:
            logger.warning("Default settings not found; falling back to dataclass defaults.")
            default_data = dataclasses.asdict(Settings())

        user_data: dict = {}
        if user_path is not None:
            if not user_path.exists():
                raise ConfigError(f"Settings file not found: {user_path}")
            if not user_path.is_file():
                raise ConfigError(f"Settings path is not a file: {user_path}")
            try:
                user_data = cls._load_yaml(user_path)
            except yaml.YAMLError as exc:
                raise ConfigError(f"Could not parse {user_path}: {exc}") from exc
            except OSError as exc:
                raise ConfigError(f"Could not read {user_path}: {exc}") from exc
            logger.info("Loaded user settings from %s", user_path)

        merged = cls._deep_merge(default_data, user_data)
        settings = cls._from_dict(merged)
        logger.debug("Settings merged: %s", settings)
        return settings
