import logging
import os
import sys

LOG_LEVEL_ENV = "CRAWLER_LOG_LEVEL"


def configure_logging(default_level: int = logging.WARNING) -> None:
    """Configure the root logger to write to stderr.

    Stdout belongs to the game screen, so log records never go there.
    Respects CRAWLER_LOG_LEVEL env var if present.
    """
    level = default_level
    level_name = os.getenv(LOG_LEVEL_ENV)
    if level_name:
        level = getattr(logging, level_name.upper(), default_level)

    handler = logging.StreamHandler(stream=sys.stderr)
    handler.setFormatter(logging.Formatter("[%(asctime)s] %(levelname)s %(name)s: %(message)s"))

    root = logging.getLogger()
    root.setLevel(level)
    # Remove existing handlers to avoid duplicates in repeated test runs
    for h in list(root.handlers):
        root.removeHandler(h)
    root.addHandler(handler)
