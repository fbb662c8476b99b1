"""
Logging setup for frametree.

The library logs through module-level ``logging.getLogger(__name__)`` loggers
and only emits DEBUG records (which transform case was taken, which frame was
mutated). Nothing is printed unless the application configures logging, e.g.:

>>> import logging
>>> from frametree.logger import setup_logging
>>> _ = setup_logging(logging.DEBUG)
"""
from __future__ import annotations

import logging
import sys
from pathlib import Path

PACKAGE_LOGGER = "frametree"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: int = logging.INFO, log_path: str | Path | None = None) -> logging.Logger:
    """
    Attach console (and optional file) handlers to the package logger.

    Parameters
    ----------
    level : int
        Logging level for the package logger and its handlers
    log_path : str | Path | None
        Optional file to also write records to. Parent directories are created.

    Returns
    -------
    logging.Logger
        The configured package logger

    Notes
    -----
    Calling this again replaces the handlers installed by a previous call.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    for handler in list(logger.handlers):
        if not isinstance(handler, logging.NullHandler):
            logger.removeHandler(handler)
            handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    console = logging.StreamHandler(sys.stdout)
    console.setLevel(level)
    console.setFormatter(formatter)
    logger.addHandler(console)

    if log_path is not None:
        path = Path(log_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(path, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


__all__ = [
    "setup_logging",
]
