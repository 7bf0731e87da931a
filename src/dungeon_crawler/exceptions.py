class CrawlerError(Exception):
    """Base exception for the dungeon crawler."""


class OutOfBounds(CrawlerError, IndexError):
    """Raised when a grid position lies outside the map."""


class LayoutError(CrawlerError, ValueError):
    """Raised when a literal map layout is malformed."""


class ConfigError(CrawlerError, ValueError):
    """Raised when settings fail validation."""
