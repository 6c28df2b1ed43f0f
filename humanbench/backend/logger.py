"""Diagnostic log shared by every game.

One append-only text file, one line per event::

    [2026-01-31 18:04:11] ReactionTime: ScoreRecord(average=231.5, count=4)

Games log under ``humanbench.<GameId>``; the formatter prints only the last
dotted component so each line is tagged with the game identifier.
"""

from __future__ import annotations

import logging
from pathlib import Path

ROOT_LOGGER = "humanbench"
LOG_FORMAT = "[%(asctime)s] %(game_id)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class GameIdFormatter(logging.Formatter):
    """Formatter exposing ``%(game_id)s``, the logger name's last component."""

    def format(self, record: logging.LogRecord) -> str:
        record.game_id = record.name.rpartition(".")[2]
        return super().format(record)


def get_logger(name: str) -> logging.Logger:
    """Return the logger for *name* (usually a game identifier)."""
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")


def configure_logging(log_file: Path, level: int = logging.INFO) -> logging.Handler:
    """Send everything under the ``humanbench`` logger to *log_file*.

    The directory is created if needed.  When the file cannot be opened the
    log is discarded instead: the terminal belongs to the UI, so there is no
    stream to fall back to.
    """
    root = logging.getLogger(ROOT_LOGGER)
    root.setLevel(level)
    root.propagate = False

    for old in list(root.handlers):
        root.removeHandler(old)
        old.close()

    handler: logging.Handler
    try:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
    except OSError:
        handler = logging.NullHandler()

    handler.setFormatter(GameIdFormatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    root.addHandler(handler)
    return handler
