"""Application state — the one object a front-end talks to.

``App`` owns both collections for the lifetime of a session:

- Startup: both collections are read through ``BaseStore.load``. An entry
  that does not convert to a model empties its whole collection (logged),
  the same soft failure ``load`` applies to unreadable JSON.
- Every mutation is written through immediately by the repository or engine.
- Shutdown: ``close()`` saves both collections one last time and closes the
  store.
"""

from __future__ import annotations

import json
import logging
import math
from datetime import datetime, timezone
from typing import Callable, Optional, TypeVar

from factorlog_core.engine import DEFAULT_HISTORY_LIMIT, CommandEngine
from factorlog_core.errors import ValidationError
from factorlog_core.repository import RecordRepository
from factorlog_store.base import COMMANDS_KEY, RECORDS_KEY, BaseStore
from factorlog_store.models import CommandRun, Record, utc_now

logger = logging.getLogger(__name__)

T = TypeVar("T")


def parse_integer(value) -> int:
    """Interpret user input as an integer.

    Accepts ints, integral floats and strings such as ``"12"``, ``" -3 "``,
    ``"12.0"`` or ``"1e3"``. Raises ValidationError for anything else,
    including ``""``, ``"1.5"``, ``"inf"`` and booleans, and for digit
    strings longer than the interpreter will convert.
    """
    if isinstance(value, bool):
        raise ValidationError("Value must be an integer")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if math.isfinite(value) and value.is_integer():
            return int(value)
        raise ValidationError("Value must be an integer")
    if not isinstance(value, str):
        raise ValidationError("Value must be an integer")

    text = value.strip()
    if not text:
        raise ValidationError("Value must be an integer")
    try:
        return int(text, 10)
    except ValueError:
        if text.lstrip("+-").isdecimal():
            # Well-formed, but longer than int() will convert.
            raise ValidationError(f"Value has too many digits ({len(text)})") from None
    try:
        number = float(text)
    except ValueError:
        raise ValidationError(f"Value must be an integer, got {value!r}") from None
    if not math.isfinite(number) or not number.is_integer():
        raise ValidationError(f"Value must be an integer, got {value!r}")
    return int(number)


def export_filename(now: Optional[datetime] = None) -> str:
    """Default file name for a records export, e.g. ``records_20260102T030405Z.json``."""
    now = now or datetime.now(timezone.utc)
    return f"records_{now.astimezone(timezone.utc).strftime('%Y%m%dT%H%M%SZ')}.json"


def _load_models(store: BaseStore, key: str, factory: Callable[[dict], T]) -> list[T]:
    items = store.load(key)
    try:
        return [factory(item) for item in items]
    except ValueError as e:
        logger.warning("Discarding data under %r: %s", key, e)
        return []


class App:
    """Controller that owns the records, the command history and their store."""

    def __init__(
        self,
        store: BaseStore,
        history_limit: int = DEFAULT_HISTORY_LIMIT,
        clock: Callable[[], str] = utc_now,
    ):
        self._store = store
        records = _load_models(store, RECORDS_KEY, Record.from_dict)
        history = _load_models(store, COMMANDS_KEY, CommandRun.from_dict)
        self.records = RecordRepository(store, records, clock=clock)
        self.commands = CommandEngine(
            self.records,
            store,
            history=history,
            history_limit=history_limit,
            clock=clock,
        )
        logger.debug("Loaded %d record(s) and %d command run(s)", len(records), len(history))

    def create_record(self, label: Optional[str], value_text) -> Record:
        return self.records.create(label, parse_integer(value_text))

    def delete_record(self, record_id: str) -> None:
        """Delete a record and every command run that references it.

        Deleting an unknown id is a no-op.
        """
        self.records.delete(record_id)
        self.commands.prune(record_id)

    def search_records(self, query: str) -> list[Record]:
        return self.records.search(query)

    def list_records(self) -> list[Record]:
        return self.records.list()

    def run_command(self, command: str, record_id: Optional[str] = None) -> CommandRun:
        return self.commands.run(command, record_id)

    def get_command_history(self) -> list[CommandRun]:
        return self.commands.history()

    def latest_output(self) -> Optional[str]:
        return self.commands.latest_output()

    def delete_command(self, run_id: str) -> None:
        self.commands.delete(run_id)

    def export_records_as_json(self) -> str:
        return json.dumps([r.to_dict() for r in self.records.list()], indent=2, ensure_ascii=False)

    def close(self) -> None:
        try:
            self.records.save()
            self.commands.save()
        finally:
            self._store.close()
