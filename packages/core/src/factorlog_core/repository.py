"""RecordRepository — sole owner of the record collection."""

from __future__ import annotations

import logging
from typing import Callable, Iterable, Optional

from factorlog_core.errors import StoreError, ValidationError
from factorlog_core.search import filter_records
from factorlog_store.base import RECORDS_KEY, BaseStore
from factorlog_store.base import StoreError as BackendStoreError
from factorlog_store.models import Record, new_id, utc_now

logger = logging.getLogger(__name__)


class RecordRepository:
    """Holds records newest-first and writes the whole collection after every change.

    Ids are never reused: every id loaded or issued during the process lifetime
    is remembered, including those of deleted records.
    """

    def __init__(
        self,
        store: BaseStore,
        records: Optional[Iterable[Record]] = None,
        clock: Callable[[], str] = utc_now,
    ):
        self._store = store
        self._clock = clock
        self._records: list[Record] = list(records or [])
        self._seen_ids: set[str] = {r.id for r in self._records}

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, record_id: object) -> bool:
        return any(r.id == record_id for r in self._records)

    def _fresh_id(self) -> str:
        record_id = new_id("rec")
        while record_id in self._seen_ids:
            record_id = new_id("rec")
        self._seen_ids.add(record_id)
        return record_id

    def _save(self, records: list[Record]) -> None:
        try:
            self._store.save(RECORDS_KEY, [r.to_dict() for r in records])
        except BackendStoreError as e:
            raise StoreError(str(e)) from e

    def save(self) -> None:
        self._save(self._records)

    def create(self, label: Optional[str], value: int) -> Record:
        """Create a record and persist the collection.

        Raises:
            ValidationError: *value* is not an int (bools are rejected too), or
                has more digits than the interpreter can write out as text.
            StoreError: the store rejected the write; nothing was added.
        """
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValidationError("Value must be an integer")
        try:
            str(value)
        except ValueError:
            raise ValidationError("Value has too many digits to store") from None
        record = Record(
            id=self._fresh_id(),
            label=(label or "").strip() or None,
            value=value,
            created_at=self._clock(),
        )
        # The collection only changes once the store has accepted it.
        records = [record, *self._records]
        self._save(records)
        self._records = records
        logger.debug("Created record %s (value=%d)", record.id, record.value)
        return record

    def delete(self, record_id: str) -> bool:
        """Remove the record with *record_id*.

        Returns False, without touching the store, if no such record exists.
        """
        remaining = [r for r in self._records if r.id != record_id]
        if len(remaining) == len(self._records):
            return False
        self._save(remaining)
        self._records = remaining
        logger.debug("Deleted record %s", record_id)
        return True

    def get(self, record_id: Optional[str]) -> Optional[Record]:
        if record_id is None:
            return None
        return next((r for r in self._records if r.id == record_id), None)

    def list(self) -> list[Record]:
        return list(self._records)

    def search(self, query: str) -> list[Record]:
        return filter_records(self._records, query)
