"""SQLiteStore — single-file store for users who prefer one database file.

Why SQLite as an alternative backend:
- Batteries included: ships with Python, no extra dependencies.
- One file instead of a directory, which is easier to copy between machines
  or keep on a shared drive.
- Each write is its own transaction, so a collection is never half-written.

Schema:
  kv  — one row per logical key; ``value`` holds the JSON text of the whole
        collection, replaced on every save.
"""

from __future__ import annotations

import logging
import sqlite3
from pathlib import Path

from factorlog_store.base import BaseStore, StoreError

logger = logging.getLogger(__name__)

_SCHEMA = """
CREATE TABLE IF NOT EXISTS kv (
    key    TEXT PRIMARY KEY,
    value  TEXT NOT NULL
);
"""


class SQLiteStore(BaseStore):
    """Stores both collections in a local SQLite database file.

    The database file path defaults to ``.factorlog.db`` in the current working
    directory. Configure via .factorlog.yml: ``store: sqlite`` and
    ``store_path: /path/to/factorlog.db``.
    """

    def __init__(self, db_path: str = ".factorlog.db"):
        path = Path(db_path).expanduser()
        path.parent.mkdir(parents=True, exist_ok=True)
        self._conn = sqlite3.connect(str(path))
        self._conn.executescript(_SCHEMA)
        self._conn.commit()

    def read(self, key: str) -> str | None:
        try:
            row = self._conn.execute("SELECT value FROM kv WHERE key=?", (key,)).fetchone()
        except sqlite3.Error as e:
            raise StoreError(f"could not read {key!r}: {e}") from e
        return row[0] if row else None

    def write(self, key: str, text: str) -> None:
        try:
            with self._conn:
                self._conn.execute(
                    "INSERT INTO kv (key, value) VALUES (?, ?) "
                    "ON CONFLICT(key) DO UPDATE SET value=excluded.value",
                    (key, text),
                )
        except sqlite3.Error as e:
            raise StoreError(f"could not write {key!r}: {e}") from e
        logger.debug("Saved %r (%d bytes)", key, len(text))

    def close(self) -> None:
        self._conn.close()
