"""In-memory store — nothing survives the process.

Useful for throwaway sessions (``store: memory`` in .factorlog.yml) and as
the default store in tests. Values are kept as serialized text so the same
``load``/``save`` code paths run as with the file-backed stores.
"""

from __future__ import annotations

from factorlog_store.base import BaseStore


class MemoryStore(BaseStore):
    """Keeps each key's JSON text in a dict."""

    def __init__(self, initial: dict[str, str] | None = None):
        self._data: dict[str, str] = dict(initial or {})

    def read(self, key: str) -> str | None:
        return self._data.get(key)

    def write(self, key: str, text: str) -> None:
        self._data[key] = text
