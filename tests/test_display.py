"""Tests for entry formatting."""

import json
from datetime import datetime, timedelta, timezone

import pytest

from tally.core.display import (
    NO_RESULTS,
    entries_to_json,
    format_entries,
    format_entry_line,
)
from tally.core.entries import Entry, Priority


@pytest.fixture
def entry():
    return Entry(
        id=3,
        description="Buy scissors",
        priority=Priority.CRITICAL,
        created_at=datetime(2023, 2, 25, 14, 3, 11, tzinfo=timezone(timedelta(hours=1))),
    )


class TestFormatEntryLine:
    def test_plain(self, entry):
        assert format_entry_line(entry) == "#3   [critical ]  2023-02-25  Buy scissors"

    def test_extended_shows_time_and_offset(self, entry):
        line = format_entry_line(entry, extended=True)
        assert line == "#3   [critical ]  2023-02-25 14:03:11 +0100  Buy scissors"


class TestFormatEntries:
    def test_one_line_per_entry(self, entry):
        other = Entry(id=12, description="Call mom", priority=Priority.NORMAL, created_at=entry.created_at)
        output = format_entries([entry, other])
        assert output.splitlines() == [
            "#3   [critical ]  2023-02-25  Buy scissors",
            "#12  [normal   ]  2023-02-25  Call mom",
        ]

    def test_empty(self):
        assert format_entries([]) == NO_RESULTS == "No results found."


class TestEntriesToJson:
    def test_serializes_records(self, entry):
        data = json.loads(entries_to_json([entry]))
        assert data == [
            {
                "id": 3,
                "description": "Buy scissors",
                "priority": "critical",
                "created_at": "2023-02-25T14:03:11+01:00",
            }
        ]

    def test_empty(self):
        assert json.loads(entries_to_json([])) == []
