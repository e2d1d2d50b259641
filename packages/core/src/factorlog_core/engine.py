"""CommandEngine — runs named commands against the records and keeps a bounded log.

Recognized commands:
  check      — composite check on one record (needs a record id)
  check:all  — composite check on every record, newest first

Anything else still produces a CommandRun whose output names the unknown
command. The engine never raises for a bad command name or a missing record;
those outcomes are described in the run's output instead.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable, Optional

from factorlog_core.checker import check_composite
from factorlog_core.errors import StoreError
from factorlog_core.repository import RecordRepository
from factorlog_store.base import COMMANDS_KEY, BaseStore
from factorlog_store.base import StoreError as BackendStoreError
from factorlog_store.models import CommandRun, Record, new_id, utc_now

logger = logging.getLogger(__name__)

CHECK = "check"
CHECK_ALL = "check:all"
DEFAULT_HISTORY_LIMIT = 200

RECORD_NOT_FOUND = "Record not found (it may have been deleted)."


def _verdict(result: bool) -> str:
    return "YES" if result else "NO"


def format_check(record: Record) -> str:
    res = check_composite(record.value)
    return f"{_verdict(res.result)}: {res.explanation}"


def format_check_all(records: Iterable[Record]) -> str:
    lines = []
    for r in records:
        res = check_composite(r.value)
        lines.append(f"{r.id} ({r.value}) → {_verdict(res.result)}: {res.explanation}")
    return "\n\n".join(lines)


class CommandEngine:
    """Executes commands and owns the newest-first command history.

    History holds at most *history_limit* runs; the oldest are evicted first.
    """

    def __init__(
        self,
        repository: RecordRepository,
        store: BaseStore,
        history: Optional[Iterable[CommandRun]] = None,
        history_limit: int = DEFAULT_HISTORY_LIMIT,
        clock: Callable[[], str] = utc_now,
    ):
        if history_limit < 1:
            raise ValueError("history_limit must be at least 1")
        self._repo = repository
        self._store = store
        self._limit = history_limit
        self._clock = clock
        self._history: list[CommandRun] = list(history or [])[:history_limit]
        self._seen_ids: set[str] = {c.id for c in self._history}

    def _fresh_id(self) -> str:
        run_id = new_id("cmd")
        while run_id in self._seen_ids:
            run_id = new_id("cmd")
        self._seen_ids.add(run_id)
        return run_id

    def _execute(self, command: str, record_id: Optional[str]) -> str:
        if command == CHECK and record_id:
            record = self._repo.get(record_id)
            if record is None:
                return RECORD_NOT_FOUND
            return format_check(record)
        if command == CHECK_ALL:
            return format_check_all(self._repo.list())
        return f"Unknown command: {command}"

    def _save(self, history: list[CommandRun]) -> None:
        try:
            self._store.save(COMMANDS_KEY, [c.to_dict() for c in history])
        except BackendStoreError as e:
            raise StoreError(str(e)) from e

    def save(self) -> None:
        self._save(self._history)

    def run(self, command: str, record_id: Optional[str] = None) -> CommandRun:
        """Execute *command* and prepend the resulting run to the history.

        Raises StoreError if the history could not be saved; the in-memory
        history is then left as it was.
        """
        started_at = self._clock()
        output = self._execute(command, record_id)
        # Only keep references that resolve now, so history never points at
        # a record that was already gone when the command ran.
        if record_id is not None and record_id not in self._repo:
            record_id = None
        run = CommandRun(
            id=self._fresh_id(),
            record_id=record_id,
            command=command,
            output=output,
            started_at=started_at,
        )
        history = [run, *self._history][: self._limit]
        self._save(history)
        self._history = history
        logger.debug("Ran %r on %s -> %d chars of output", command, record_id or "<all>", len(output))
        return run

    def history(self) -> list[CommandRun]:
        return list(self._history)

    def latest_output(self) -> Optional[str]:
        return self._history[0].output if self._history else None

    def get(self, run_id: str) -> Optional[CommandRun]:
        return next((c for c in self._history if c.id == run_id), None)

    def delete(self, run_id: str) -> bool:
        """Remove one run from the history. Returns False if it was not there."""
        remaining = [c for c in self._history if c.id != run_id]
        if len(remaining) == len(self._history):
            return False
        self._save(remaining)
        self._history = remaining
        return True

    def prune(self, record_id: str) -> int:
        """Drop every run that references *record_id*, persisting only if any were removed.

        Returns the number of runs removed.
        """
        remaining = [c for c in self._history if c.record_id != record_id]
        removed = len(self._history) - len(remaining)
        if removed:
            self._save(remaining)
            self._history = remaining
            logger.debug("Pruned %d command run(s) for record %s", removed, record_id)
        return removed
