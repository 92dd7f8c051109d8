# Rev 0.2.0

"""SQLite connection & schema runner
- WAL mode
- Applies the ordered MIGRATIONS list once each
- Tracks applied steps in schema_migrations(name TEXT PRIMARY KEY, applied_at UTC)
"""
from __future__ import annotations
import logging
import sqlite3
from pathlib import Path
from datetime import datetime, timezone

log = logging.getLogger(__name__)


MIGRATIONS: list[tuple[str, str]] = [
    (
        "0001_preferences",
        """
        CREATE TABLE IF NOT EXISTS preferences (
            key TEXT PRIMARY KEY,
            value TEXT NOT NULL,
            updated_at_utc TEXT NOT NULL
        );
        """,
    ),
]


class Database:
    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)
        if str(self.path) != ":memory:":
            self.path.parent.mkdir(parents=True, exist_ok=True)
        self.conn = sqlite3.connect(self.path, isolation_level=None, check_same_thread=False)
        self.conn.row_factory = sqlite3.Row
        self.conn.execute("PRAGMA journal_mode=WAL;")
        self.conn.execute(
            "CREATE TABLE IF NOT EXISTS schema_migrations (name TEXT PRIMARY KEY, applied_at TEXT NOT NULL)"
        )
        log.info("SQLite open %s", self.path)

    def close(self) -> None:
        self.conn.close()

    def applied(self) -> set[str]:
        rows = self.conn.execute("SELECT name FROM schema_migrations").fetchall()
        return {r[0] for r in rows}

    def run_migrations(self, migrations: list[tuple[str, str]] = MIGRATIONS) -> list[str]:
        done = self.applied()
        to_apply = [(name, sql) for name, sql in migrations if name not in done]
        for name, sql in to_apply:
            self.conn.executescript(sql)
            self.conn.execute(
                "INSERT INTO schema_migrations(name, applied_at) VALUES(?, ?)",
                (name, datetime.now(timezone.utc).isoformat()),
            )
            log.info("Applied migration %s", name)
        return [name for name, _ in to_apply]
