"""Application-wide settings and storage locations.

Paths are resolved on demand from the platform and environment; nothing
here is cached in module state.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

APP_DIR_NAME = "HumanBenchmark"
LOG_FILE_NAME = "logs.txt"

# Overrides the resolved data directory (used by tests and ``--data-dir``).
DATA_DIR_ENV = "HUMANBENCH_DATA_DIR"


def user_data_root() -> Path:
    """Return the platform's per-user data directory.

    - macOS: ``~/Library/Application Support``
    - Windows: ``%APPDATA%``
    - Linux/BSD: ``$XDG_DATA_HOME`` or ``~/.local/share``
    """
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support"
    if sys.platform == "win32":
        return Path(os.environ.get("APPDATA", str(Path.home())))
    xdg_data = os.environ.get("XDG_DATA_HOME") or str(Path.home() / ".local" / "share")
    return Path(xdg_data)


def data_dir() -> Path:
    """Directory holding the per-game score files and the log."""
    override = os.environ.get(DATA_DIR_ENV)
    if override:
        return Path(override)
    return user_data_root() / APP_DIR_NAME


def log_file() -> Path:
    return data_dir() / LOG_FILE_NAME
