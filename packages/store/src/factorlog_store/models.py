"""Record and command-run data models.

Decoupled from factorlog_core so the store layer can be used on its own and
the core has no knowledge of how entries are serialized.

The persisted layout uses camelCase keys (``createdAt``, ``recordId``,
``startedAt``) so files written by older front-ends stay readable.
"""

from __future__ import annotations

import secrets
import string
from dataclasses import dataclass
from datetime import datetime, timezone

_ID_ALPHABET = string.digits + string.ascii_lowercase
_ID_LENGTH = 10


def new_id(prefix: str) -> str:
    """Return ``<prefix>_`` followed by random base-36 characters."""
    return f"{prefix}_" + "".join(secrets.choice(_ID_ALPHABET) for _ in range(_ID_LENGTH))


def utc_now() -> str:
    return datetime.now(timezone.utc).isoformat()


def _require(data: dict, key: str, kind: type) -> object:
    if key not in data:
        raise ValueError(f"missing field {key!r}")
    value = data[key]
    # bool is an int subclass; a persisted true/false is never a valid value.
    if not isinstance(value, kind) or isinstance(value, bool):
        raise ValueError(f"field {key!r} must be {kind.__name__}, got {type(value).__name__}")
    return value


def _optional_str(data: dict, key: str) -> str | None:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValueError(f"field {key!r} must be a string or null")
    return value


@dataclass(frozen=True)
class Record:
    """A user-created integer record."""

    id: str
    value: int
    created_at: str  # ISO-8601 UTC timestamp
    label: str | None = None

    def to_dict(self) -> dict:
        d: dict = {"id": self.id}
        if self.label is not None:
            d["label"] = self.label
        d["value"] = self.value
        d["createdAt"] = self.created_at
        return d

    @classmethod
    def from_dict(cls, data: dict) -> Record:
        return cls(
            id=_require(data, "id", str),
            label=_optional_str(data, "label") or None,
            value=_require(data, "value", int),
            created_at=_require(data, "createdAt", str),
        )


@dataclass(frozen=True)
class CommandRun:
    """One execution of a named command.

    ``record_id`` is a weak reference: it named a live record when the command
    ran, and is None for global commands such as ``check:all``.
    """

    id: str
    command: str
    output: str
    started_at: str  # ISO-8601 UTC timestamp
    record_id: str | None = None

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "recordId": self.record_id,
            "command": self.command,
            "output": self.output,
            "startedAt": self.started_at,
        }

    @classmethod
    def from_dict(cls, data: dict) -> CommandRun:
        return cls(
            id=_require(data, "id", str),
            record_id=_optional_str(data, "recordId"),
            command=_require(data, "command", str),
            output=_require(data, "output", str),
            started_at=_require(data, "startedAt", str),
        )
