# Rev 0.2.0

# taskManager – key-value preference backends
# Both backends expose the same four accessors; reads of a missing key give None,
# writes report success as a bool and never raise.

from __future__ import annotations
import logging
import sqlite3
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional, Protocol

from PySide6.QtCore import QSettings

from .db import Database

log = logging.getLogger(__name__)

_TRUE, _FALSE = "true", "false"


class KeyValueStore(Protocol):
    def get_string(self, key: str) -> Optional[str]: ...
    def set_string(self, key: str, value: str) -> bool: ...
    def get_bool(self, key: str) -> Optional[bool]: ...
    def set_bool(self, key: str, value: bool) -> bool: ...
    def close(self) -> None: ...


class SQLiteKeyValueStore:
    """
    Preferences kept in the `preferences` table of a Database wrapper.
    Booleans are stored as the literals 'true' / 'false'.
    """

    def __init__(self, db: Database):
        self._db = db
        self._db.run_migrations()

    @classmethod
    def open(cls, path: Path | str) -> "SQLiteKeyValueStore":
        return cls(Database(path))

    def close(self) -> None:
        self._db.close()

    # --- public API ---------------------------------------------------------

    def get_string(self, key: str) -> Optional[str]:
        row = self._db.conn.execute("SELECT value FROM preferences WHERE key = ?", (key,)).fetchone()
        return row["value"] if row else None

    def set_string(self, key: str, value: str) -> bool:
        try:
            self._db.conn.execute(
                """
                INSERT INTO preferences(key, value, updated_at_utc) VALUES (?, ?, ?)
                ON CONFLICT(key) DO UPDATE SET value = excluded.value,
                                               updated_at_utc = excluded.updated_at_utc
                """,
                (key, value, datetime.now(timezone.utc).isoformat()),
            )
            return True
        except sqlite3.Error:
            log.exception("Failed to write preference %s", key)
            return False

    def get_bool(self, key: str) -> Optional[bool]:
        raw = self.get_string(key)
        if raw == _TRUE:
            return True
        if raw == _FALSE:
            return False
        return None

    def set_bool(self, key: str, value: bool) -> bool:
        return self.set_string(key, _TRUE if value else _FALSE)


class QSettingsKeyValueStore:
    """Preferences in an INI-format QSettings file."""

    def __init__(self, path: Path | str):
        self._path = Path(path)
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._settings = QSettings(str(self._path), QSettings.Format.IniFormat)
        log.info("QSettings open %s", self._path)

    def close(self) -> None:
        self._settings.sync()

    def _flush(self, key: str) -> bool:
        self._settings.sync()
        ok = self._settings.status() == QSettings.Status.NoError
        if not ok:
            log.warning("Failed to write preference %s (status=%s)", key, self._settings.status())
        return ok

    def get_string(self, key: str) -> Optional[str]:
        if not self._settings.contains(key):
            return None
        raw = self._settings.value(key)
        if isinstance(raw, list):
            # INI reader splits unquoted comma lists
            return ",".join(str(x) for x in raw)
        return str(raw)

    def set_string(self, key: str, value: str) -> bool:
        self._settings.setValue(key, value)
        return self._flush(key)

    def get_bool(self, key: str) -> Optional[bool]:
        if not self._settings.contains(key):
            return None
        raw = self._settings.value(key)
        if isinstance(raw, bool):
            return raw
        text = str(raw).strip().lower()
        if text == _TRUE:
            return True
        if text == _FALSE:
            return False
        return None

    def set_bool(self, key: str, value: bool) -> bool:
        self._settings.setValue(key, bool(value))
        return self._flush(key)


def open_store(backend: str, path: Path | str) -> KeyValueStore:
    if backend == "qsettings":
        return QSettingsKeyValueStore(path)
    if backend == "sqlite":
        return SQLiteKeyValueStore.open(path)
    raise ValueError(f"unknown preferences backend: {backend!r}")
