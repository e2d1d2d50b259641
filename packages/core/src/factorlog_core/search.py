from __future__ import annotations

from typing import Iterable

from factorlog_store.models import Record


def matches(record: Record, needle: str) -> bool:
    """Return True if *needle* (already lower-cased) occurs in any searchable field.

    Searchable fields are the label (when present), the decimal value and the id.
    """
    if record.label is not None and needle in record.label.lower():
        return True
    if needle in str(record.value):
        return True
    return needle in record.id.lower()


def filter_records(records: Iterable[Record], query: str) -> list[Record]:
    """Case-insensitive substring filter that keeps the input order.

    A blank or whitespace-only query returns every record.
    """
    needle = (query or "").strip().lower()
    if not needle:
        return list(records)
    return [r for r in records if matches(r, needle)]
