"""Shared fixtures for moodjournal tests."""

import itertools
from typing import Any

import pytest

from moodjournal.insights import EntryFormatter
from moodjournal.journal import EntryStore, JournalEntry


@pytest.fixture
def make_entry():
    """Factory for entries with sensible defaults."""
    counter = itertools.count(1)

    def _make(
        content: str = "",
        mood: Any = "neutral",
        timestamp: str = "2025-03-01T12:00:00.000Z",
        title: str = "Entry",
        **extra: Any,
    ) -> JournalEntry:
        record = {
            "id": extra.pop("id", f"entry-{next(counter)}"),
            "title": title,
            "content": content,
            "mood": mood,
            "timestamp": timestamp,
            **extra,
        }
        return JournalEntry.from_dict(record)

    return _make


@pytest.fixture
def utc_formatter() -> EntryFormatter:
    return EntryFormatter("UTC")


@pytest.fixture
def store(tmp_path) -> EntryStore:
    return EntryStore(tmp_path / "store.json")
