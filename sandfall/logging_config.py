"""Logging configuration for the ``sandfall`` package logger.

The terminal frontend owns stdout while the simulation runs, so records
only go somewhere when a log file is given.
"""

from __future__ import annotations

import logging
from pathlib import Path

_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: int = logging.INFO, log_file: str | Path | None = None) -> None:
    """Configure the ``sandfall`` logger.

    Args:
        level: Logging level (e.g. ``logging.DEBUG``).
        log_file: Optional path to write logs to.  Without one, records
            are discarded.
    """
    logger = logging.getLogger("sandfall")
    logger.setLevel(level)

    # Avoid duplicate handlers when called more than once
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()
    # Root handlers would write over the curses screen
    logger.propagate = False

    if log_file is None:
        logger.addHandler(logging.NullHandler())
        return

    file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
    file_handler.setLevel(level)
    file_handler.setFormatter(logging.Formatter(_FORMAT, datefmt="%H:%M:%S"))
    logger.addHandler(file_handler)

    logger.info("Logging initialized.")
