"""Helpers for locating application directories."""

from __future__ import annotations

from pathlib import Path

from platformdirs import PlatformDirs


APP_NAME = "ScreenTimeTracker"
APP_AUTHOR = "ScreenTimeTracker"


def get_data_dir() -> Path:
    """Return the base directory for exported files."""
    dirs = PlatformDirs(appname=APP_NAME, appauthor=APP_AUTHOR, roaming=True)
    path = Path(dirs.user_data_path)
    path.mkdir(parents=True, exist_ok=True)
    return path


def get_export_path(filename: str = "usage_log.csv") -> Path:
    return get_data_dir() / filename


def get_log_path() -> Path:
    return get_data_dir() / "tracker.log"
