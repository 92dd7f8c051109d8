# Rev 0.2.0

"""Paths and XDG helpers
- data (preferences DB) under XDG_DATA_HOME
- logs under XDG_STATE_HOME
- settings.json / QSettings ini under XDG_CONFIG_HOME
"""
from __future__ import annotations
import os
from pathlib import Path


APP_NAME = "taskManager"


def _xdg(var: str, fallback: Path) -> Path:
    return Path(os.environ.get(var) or fallback).expanduser()


def data_dir() -> Path:
    return _xdg("XDG_DATA_HOME", Path.home() / ".local" / "share") / APP_NAME


def state_dir() -> Path:
    return _xdg("XDG_STATE_HOME", Path.home() / ".local" / "state") / APP_NAME


def logs_dir() -> Path:
    return state_dir() / "logs"


def config_dir() -> Path:
    return _xdg("XDG_CONFIG_HOME", Path.home() / ".config") / APP_NAME


def default_db_path() -> Path:
    return data_dir() / "preferences.db"


def default_ini_path() -> Path:
    return config_dir() / "preferences.ini"


def ensure_dirs() -> None:
    for p in (data_dir(), logs_dir(), config_dir()):
        p.mkdir(parents=True, exist_ok=True)
