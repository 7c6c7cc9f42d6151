"""Logging setup for ytframes runs."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# HTTP client chatter from the yt-dlp fetch; only shown at DEBUG
QUIET_LOGGERS = ("urllib3", "requests")


def setup_logging(level: str = "INFO", stream: TextIO | None = None) -> None:
    """Install one root handler; calling again replaces it.

    Raises ValueError for a level name outside LEVELS.
    """
    name = level.upper()
    if name not in LEVELS:
        raise ValueError(f"unknown log level {level!r}, expected one of {', '.join(LEVELS)}")
    numeric = getattr(logging, name)

    logging.basicConfig(
        level=numeric,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=stream or sys.stdout,
        force=True,
    )
    quiet_level = logging.DEBUG if numeric <= logging.DEBUG else logging.WARNING
    for logger_name in QUIET_LOGGERS:
        logging.getLogger(logger_name).setLevel(quiet_level)
