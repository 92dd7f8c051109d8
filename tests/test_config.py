# tests/test_config.py
from __future__ import annotations

import logging
from pathlib import Path

from taskmanager.app_context import AppContext
from taskmanager.services.task_store import TASKS_KEY
from taskmanager.utils.config import AppConfig, load_settings, save_settings
from taskmanager.utils.logging_setup import setup_logging, teardown_logging


def test_app_config_defaults():
    cfg = AppConfig.from_env({})
    assert cfg.prefs_backend == "sqlite"
    assert cfg.prefs_path is None
    assert cfg.log_level == "INFO"
    assert cfg.resolved_prefs_path().name == "preferences.db"


def test_app_config_from_env(tmp_path: Path):
    cfg = AppConfig.from_env({
        "TASKMANAGER_PREFS_BACKEND": "QSettings",
        "TASKMANAGER_PREFS_PATH": str(tmp_path / "p.ini"),
        "TASKMANAGER_LOG_LEVEL": "debug",
    })
    assert cfg.prefs_backend == "qsettings"
    assert cfg.resolved_prefs_path() == tmp_path / "p.ini"
    assert cfg.log_level == "DEBUG"


def test_unknown_backend_falls_back_to_sqlite():
    assert AppConfig.from_env({"TASKMANAGER_PREFS_BACKEND": "redis"}).prefs_backend == "sqlite"


def test_settings_round_trip_and_defaults(tmp_path: Path):
    path = tmp_path / "settings.json"
    assert load_settings(path)["main_window"]["width"] == 560
    save_settings({"main_window": {"width": 800}}, path)
    loaded = load_settings(path)
    assert loaded["main_window"] == {"width": 800, "height": 720}
    assert loaded["ui"]["diagnostics_dock_visible"] is False


def test_corrupt_settings_yield_defaults(tmp_path: Path):
    path = tmp_path / "settings.json"
    path.write_text("{oops", encoding="utf-8")
    assert load_settings(path)["main_window"]["height"] == 720


def test_setup_logging_writes_file(tmp_path: Path):
    try:
        logfile = setup_logging("DEBUG", log_dir=tmp_path)
        logging.getLogger("taskManager.test").info("hello from test")
        for h in logging.getLogger().handlers:
            h.flush()
        assert "hello from test" in logfile.read_text(encoding="utf-8")
    finally:
        teardown_logging()


def test_app_context_lifecycle(tmp_path: Path):
    cfg = AppConfig(prefs_backend="sqlite", prefs_path=tmp_path / "p.db")
    ctx = AppContext.create(cfg)
    ctx.store.add("persist me")
    ctx.theme.set_dark(True)
    ctx.close()

    again = AppContext.create(cfg)
    try:
        assert [t.name for t in again.store.tasks] == ["persist me"]
        assert again.theme.is_dark is True
        assert again.prefs.get_string(TASKS_KEY) is not None
    finally:
        again.close()
