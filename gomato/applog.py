"""Timestamped application log written to a file."""

from __future__ import annotations

import logging
from pathlib import Path

from gomato.config import config_dir

LOG_FILE = "gomato.log"

_logger = logging.getLogger("gomato")
_logger.propagate = False
_logger.setLevel(logging.INFO)


def init_logging(directory: str | Path | None = None) -> Path:
    """Open the log file for appending and return its path."""
    base = Path(directory) if directory is not None else config_dir()
    base.mkdir(parents=True, exist_ok=True)
    path = base / LOG_FILE
    handler = logging.FileHandler(path, mode="a", encoding="utf-8")
    handler.setFormatter(
        logging.Formatter("[%(asctime)s] %(message)s", datefmt="%Y-%m-%d %H:%M:%S")
    )
    close_logging()
    _logger.addHandler(handler)
    return path


def log(message: str) -> None:
    """Append a timestamped line to the log."""
    if not _logger.handlers:
        print("Logger not initialized. Please call init_logging() first.")
        return
    _logger.info(message)


def close_logging() -> None:
    """Close the log file, if one is open."""
    for handler in list(_logger.handlers):
        _logger.removeHandler(handler)
        handler.close()