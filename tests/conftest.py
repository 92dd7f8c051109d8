# Rev 0.2.0

"""Pytest fixtures for taskManager"""
from __future__ import annotations
import itertools
import os
from datetime import datetime, timedelta
from pathlib import Path

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from taskmanager.repositories.db import Database
from taskmanager.repositories.kv_store import SQLiteKeyValueStore
from taskmanager.services.task_store import TaskStore


T0 = datetime(2024, 3, 1, 9, 0, 0)


class StepClock:
    """Deterministic clock: each call is one second after the previous one."""
    def __init__(self, start: datetime = T0):
        self._next = start

    def __call__(self) -> datetime:
        now = self._next
        self._next += timedelta(seconds=1)
        return now


@pytest.fixture(autouse=True)
def _isolated_xdg(tmp_path: Path, monkeypatch):
    for var in ("XDG_DATA_HOME", "XDG_STATE_HOME", "XDG_CONFIG_HOME"):
        monkeypatch.setenv(var, str(tmp_path / var.lower()))


@pytest.fixture()
def db(tmp_path: Path):
    database = Database(path=tmp_path / "prefs.db")
    try:
        yield database
    finally:
        database.close()


@pytest.fixture()
def prefs(db):
    return SQLiteKeyValueStore(db)


@pytest.fixture()
def clock() -> StepClock:
    return StepClock()


@pytest.fixture()
def ids():
    counter = itertools.count(1)
    return lambda: f"t{next(counter)}"


@pytest.fixture()
def store(prefs, clock, ids) -> TaskStore:
    s = TaskStore(prefs, clock=clock, id_factory=ids)
    s.load()
    return s


@pytest.fixture(scope="session")
def qapp():
    from PySide6.QtWidgets import QApplication
    app = QApplication.instance() or QApplication([])
    yield app
