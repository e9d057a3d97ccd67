# src/cache/sqlite_slot_store.py — v2
"""SQLite-based slot store (CACHE_BACKEND=sqlite).

Uses stdlib sqlite3, no external dependency.
"""

from __future__ import annotations

import logging
import sqlite3
from pathlib import Path

from fotocore.cache.base_slot_store import BaseSlotStore

logger = logging.getLogger(__name__)

_SCHEMA = """
CREATE TABLE IF NOT EXISTS slots (
    key TEXT PRIMARY KEY,
    payload TEXT NOT NULL,
    updated_at TEXT DEFAULT CURRENT_TIMESTAMP
);
"""


class SqliteSlotStore(BaseSlotStore):
    """SQLite-backed key/value slot store."""

    def __init__(self, db_path: Path | str) -> None:
        self._db_path = Path(db_path).expanduser()
        self._db_path.parent.mkdir(parents=True, exist_ok=True)
        self._conn = sqlite3.connect(str(self._db_path))
        self._conn.execute("PRAGMA journal_mode=WAL")
        self._conn.executescript(_SCHEMA)

    def read(self, key: str) -> str | None:
        cursor = self._conn.execute(
            "SELECT payload FROM slots WHERE key = ?", (key,)
        )
        row = cursor.fetchone()
        return None if row is None else row[0]

    def write(self, key: str, payload: str) -> None:
        """Upsert the slot payload."""
        self._conn.execute(
            """INSERT OR REPLACE INTO slots (key, payload, updated_at)
               VALUES (?, ?, CURRENT_TIMESTAMP)""",
            (key, payload),
        )
        self._conn.commit()

    def remove(self, key: str) -> None:
        self._conn.execute("DELETE FROM slots WHERE key = ?", (key,))
        self._conn.commit()

    def close(self) -> None:
        """Close the underlying connection."""
        self._conn.close()
