from __future__ import annotations

import argparse
import dataclasses
import logging
import sys
from pathlib import Path

from . import __version__
from .app import run_game
from .exceptions import ConfigError
from .logging_config import configure_logging
from .settings import Settings


def _log_level(verbosity: int) -> int:
    if verbosity == 1:
        return logging.INFO
    if verbosity >= 2:
        return logging.DEBUG
    return logging.WARNING


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="dungeon-crawler",
        description="Find the key, unlock the door and escape the dungeon.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--seed", type=int, default=None, help="Seed combat rolls for a reproducible game")
    parser.add_argument("--config", type=Path, default=None, help="YAML file overriding the default settings")
    parser.add_argument("--no-clear", action="store_true", help="Do not clear the screen between turns")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="Increase log verbosity (-v, -vv)")

    args = parser.parse_args(argv)
    configure_logging(_log_level(args.verbose))

    try:
        settings = Settings.load(args.config)
    except ConfigError as exc:
        parser.error(str(exc))

    if args.no_clear:
        settings = dataclasses.replace(
            settings, display=dataclasses.replace(settings.display, clear_screen=False)
        )

    return run_game(settings, seed=args.seed)


if __name__ == "__main__":
    sys.exit(main())
