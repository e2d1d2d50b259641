"""JSONFileStore — the default local store, one JSON file per key.

Why plain files as the default:
- Zero setup: the store directory is created on first write.
- Human-readable: ``.factorlog/app_records_v1.json`` can be inspected or
  hand-edited, and a bad edit only costs that collection (``load`` fails soft).
- Mirrors the key-value layout the collections have always used, so each
  collection is written independently of the other.

Writes go to a temporary file in the same directory and are moved into place
with ``os.replace`` so a crash mid-write never leaves a truncated file behind.
"""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path

from factorlog_store.base import BaseStore, StoreError

logger = logging.getLogger(__name__)


class JSONFileStore(BaseStore):
    """Stores each collection as ``<directory>/<key>.json``.

    The directory defaults to ``.factorlog`` in the current working directory.
    Configure via .factorlog.yml: ``store_path: /path/to/dir``.
    """

    def __init__(self, directory: str = ".factorlog"):
        self._dir = Path(directory).expanduser()

    def _path(self, key: str) -> Path:
        return self._dir / f"{key}.json"

    def read(self, key: str) -> str | None:
        path = self._path(key)
        if not path.exists():
            return None
        return path.read_text(encoding="utf-8")

    def write(self, key: str, text: str) -> None:
        path = self._path(key)
        try:
            self._dir.mkdir(parents=True, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(dir=self._dir, prefix=f".{key}.", suffix=".tmp")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    f.write(text)
                os.replace(tmp_path, path)
            except BaseException:
                if os.path.exists(tmp_path):
                    os.unlink(tmp_path)
                raise
        except OSError as e:
            raise StoreError(f"could not write {path}: {e}") from e
        logger.debug("Wrote %d bytes to %s", len(text), path)
