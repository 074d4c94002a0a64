from __future__ import annotations

import logging
import os

_LEVELS = {
    "CRITICAL": logging.CRITICAL,
    "ERROR": logging.ERROR,
    "WARNING": logging.WARNING,
    "INFO": logging.INFO,
    "DEBUG": logging.DEBUG,
}

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


def resolve_level(level: str | int | None = None) -> int:
    """Map a level name (or None, meaning SCRAPER_LOG_LEVEL) to a logging constant."""
    if level is None:
        level = os.getenv("SCRAPER_LOG_LEVEL", "INFO")

    if isinstance(level, str):
        return _LEVELS.get(level.upper(), logging.INFO)
    return level


def setup_logging(level: str | int | None = None) -> None:
    """
    Configure application logging with a consistent, upgrade-friendly formatter.
    """
    logging.basicConfig(level=resolve_level(level), format=LOG_FORMAT)
    # aiohttp's access/client loggers are chatty at DEBUG and add nothing per scrape.
    logging.getLogger("aiohttp").setLevel(max(resolve_level(level), logging.INFO))
