"""Abstract store interface.

Every backend (JSON files, SQLite, in-memory) implements two primitives,
``read`` and ``write``, over a handful of string keys. The shared ``load`` and
``save`` built on top of them give all backends the same contract:

- ``load`` never raises for bad data. A missing key, invalid JSON, or a value
  that is not a JSON array of objects degrades to an empty list so a corrupted
  file can never abort startup.
- ``save`` overwrites the whole collection. There is no merge and no
  transaction spanning more than one key.
"""

from __future__ import annotations

import json
import logging
from abc import ABC, abstractmethod

logger = logging.getLogger(__name__)

RECORDS_KEY = "app_records_v1"
COMMANDS_KEY = "app_cmds_v1"


class StoreError(Exception):
    """Raised when a backend cannot write (disk full, read-only path, locked DB)."""


class BaseStore(ABC):
    """Pluggable key-value persistence for the record and command collections."""

    @abstractmethod
    def read(self, key: str) -> str | None:
        """Return the raw text stored under *key*, or None if nothing is stored."""

    @abstractmethod
    def write(self, key: str, text: str) -> None:
        """Replace the raw text stored under *key*."""

    def load(self, key: str) -> list[dict]:
        """Return the collection stored under *key*, or [] if absent or malformed."""
        try:
            raw = self.read(key)
        except (OSError, UnicodeDecodeError, StoreError) as e:
            logger.warning("Could not read %r (%s): %s", key, type(e).__name__, e)
            return []
        if not raw:
            return []
        try:
            data = json.loads(raw)
        except ValueError as e:
            # JSONDecodeError, or an integer literal longer than int() accepts.
            logger.warning("Discarding corrupted data under %r: %s", key, e)
            return []
        if not isinstance(data, list) or not all(isinstance(item, dict) for item in data):
            logger.warning("Discarding data under %r: expected a JSON array of objects", key)
            return []
        return data

    def save(self, key: str, items: list[dict]) -> None:
        """Serialize *items* and overwrite whatever was stored under *key*.

        Raises StoreError if *items* cannot be serialized or the write fails.
        """
        try:
            text = json.dumps(items, ensure_ascii=False)
        except ValueError as e:
            raise StoreError(f"Cannot serialize {key!r}: {e}") from e
        self.write(key, text)

    def close(self) -> None:
        """Release any resources held by the store (connections, file handles).

        Subclasses that hold a connection should override this.
        Default is a no-op so callers can always call close() safely.
        """
