from __future__ import annotations

import logging
import sys

from .constants import DEFAULT_LOG_DATEFMT, DEFAULT_LOG_FORMAT


def setup_logging(level: str | int = logging.INFO) -> None:
    """Configure application logging (one stdout handler on the root logger)."""

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    root = logging.getLogger()
    root.setLevel(level)
    root.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(DEFAULT_LOG_FORMAT, datefmt=DEFAULT_LOG_DATEFMT))
    root.addHandler(handler)

    # Silence noisy libraries
    logging.getLogger("mysql.connector").setLevel(logging.WARNING)
