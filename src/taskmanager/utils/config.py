# Rev 0.2.0

# src/taskmanager/utils/config.py
from __future__ import annotations
import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from .paths import config_dir, default_db_path, default_ini_path

log = logging.getLogger(__name__)

BACKENDS = ("sqlite", "qsettings")

_DEFAULTS: Dict[str, Any] = {
    "main_window": {
        "width": 560,
        "height": 720,
    },
    "ui": {
        "diagnostics_dock_visible": False
    }
}


@dataclass(frozen=True)
class AppConfig:
    prefs_backend: str = "sqlite"
    prefs_path: Optional[Path] = None
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, env: Mapping[str, str] | None = None) -> "AppConfig":
        env = os.environ if env is None else env
        backend = env.get("TASKMANAGER_PREFS_BACKEND", "sqlite").strip().lower()
        if backend not in BACKENDS:
            log.warning("Unknown TASKMANAGER_PREFS_BACKEND=%r; using sqlite", backend)
            backend = "sqlite"
        raw_path = env.get("TASKMANAGER_PREFS_PATH")
        return cls(
            prefs_backend=backend,
            prefs_path=Path(raw_path).expanduser() if raw_path else None,
            log_level=env.get("TASKMANAGER_LOG_LEVEL", "INFO").upper(),
        )

    def resolved_prefs_path(self) -> Path:
        if self.prefs_path is not None:
            return self.prefs_path
        return default_db_path() if self.prefs_backend == "sqlite" else default_ini_path()


def settings_file() -> Path:
    return config_dir() / "settings.json"


def _merge(defaults: Dict[str, Any], loaded: Dict[str, Any]) -> Dict[str, Any]:
    out = {k: (dict(v) if isinstance(v, dict) else v) for k, v in defaults.items()}
    for k, v in loaded.items():
        if isinstance(v, dict) and isinstance(out.get(k), dict):
            out[k].update(v)
        else:
            out[k] = v
    return out


def load_settings(path: Path | None = None) -> Dict[str, Any]:
    path = path or settings_file()
    if path.exists():
        try:
            loaded = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, ValueError):
            log.warning("Ignoring unreadable settings file %s", path)
            return _merge(_DEFAULTS, {})
        if isinstance(loaded, dict):
            return _merge(_DEFAULTS, loaded)
    return _merge(_DEFAULTS, {})


def save_settings(data: Dict[str, Any], path: Path | None = None) -> None:
    path = path or settings_file()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2), encoding="utf-8")
