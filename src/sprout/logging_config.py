"""Logging setup for the sprout command."""

import logging
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "sprout"
LOG_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
}


def configure_logging(level: str = "WARNING", log_file: Optional[Path] = None) -> logging.Logger:
    """Configure the ``sprout`` logger.

    Console output goes through rich on stderr at ``level``; unknown level
    names fall back to INFO. When ``log_file`` is given, everything from
    DEBUG up is also written there. Calling this again replaces the
    previously installed handlers.
    """
    logger = logging.getLogger(LOGGER_NAME)
    resolved = LOG_LEVELS.get(level.strip().upper(), logging.INFO)
    logger.setLevel(resolved)
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console_handler = RichHandler(console=Console(stderr=True), show_path=False)
    console_handler.setLevel(resolved)
    logger.addHandler(console_handler)

    if log_file is not None:
        try:
            log_file.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_file, encoding="utf-8")
        except OSError:
            logger.warning("Cannot write log file %s", log_file)
        else:
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
            logger.addHandler(file_handler)
            # Let DEBUG records reach the file while the console keeps its own level
            logger.setLevel(logging.DEBUG)

    return logger
