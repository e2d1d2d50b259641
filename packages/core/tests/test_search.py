"""Tests for the record search filter."""

import pytest

from factorlog_core.search import filter_records, matches
from factorlog_store.models import Record


def _rec(record_id, value, label=None):
    return Record(id=record_id, label=label, value=value, created_at="2026-01-01T00:00:00+00:00")


RECORDS = [
    _rec("rec_c3", 1234, "Gamma"),
    _rec("rec_b2", 77, None),
    _rec("rec_a1", -5, "alpha Sample"),
]


class TestFilterRecords:
    @pytest.mark.parametrize("query", ["", "   ", "\t\n", None])
    def test_blank_query_returns_everything_in_order(self, query):
        assert filter_records(RECORDS, query) == RECORDS

    def test_label_match_is_case_insensitive(self):
        assert filter_records(RECORDS, "SAMPLE") == [RECORDS[2]]

    def test_value_substring(self):
        assert filter_records(RECORDS, "23") == [RECORDS[0]]

    def test_negative_value_matches_sign(self):
        assert filter_records(RECORDS, "-5") == [RECORDS[2]]

    def test_id_match_is_case_insensitive(self):
        assert filter_records(RECORDS, "REC_B") == [RECORDS[1]]

    def test_query_is_trimmed(self):
        assert filter_records(RECORDS, "  gamma  ") == [RECORDS[0]]

    def test_or_across_fields_keeps_order(self):
        # "7" only occurs in 77; "rec" is in every id.
        assert filter_records(RECORDS, "7") == [RECORDS[1]]
        assert filter_records(RECORDS, "rec") == RECORDS

    def test_no_match(self):
        assert filter_records(RECORDS, "zzz") == []

    def test_missing_label_never_matches_by_label(self):
        assert filter_records([_rec("rec_x", 1)], "none") == []

    def test_returns_new_list(self):
        result = filter_records(RECORDS, "")
        result.clear()
        assert len(RECORDS) == 3


class TestMatches:
    @pytest.mark.parametrize("record", RECORDS)
    def test_every_field_substring_matches(self, record):
        fields = [record.id, str(record.value)] + ([record.label] if record.label else [])
        for field in fields:
            for start in range(len(field)):
                needle = field[start : start + 2].lower()
                assert matches(record, needle)
