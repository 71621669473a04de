"""Tests for calendar browsing."""

from datetime import date

from moodjournal.journal import Mood, entries_on, marked_dates


def test_marked_dates_last_entry_wins(make_entry):
    entries = [
        make_entry(mood="positive", timestamp="2025-03-01T08:00:00.000Z"),
        make_entry(mood="negative", timestamp="2025-03-01T20:00:00.000Z"),
        make_entry(mood="neutral", timestamp="2025-03-04T08:00:00.000Z"),
        make_entry(mood="positive", timestamp="not a date"),
    ]

    assert marked_dates(entries, "UTC") == {
        "2025-03-01": Mood.NEGATIVE,
        "2025-03-04": Mood.NEUTRAL,
    }


def test_marked_dates_follow_local_timezone(make_entry):
    entries = [make_entry(timestamp="2025-03-01T03:00:00.000Z")]

    assert list(marked_dates(entries, "America/Los_Angeles")) == ["2025-02-28"]


def test_entries_on_a_day(make_entry):
    entries = [
        make_entry(id="a", timestamp="2025-03-01T08:00:00.000Z"),
        make_entry(id="b", timestamp="2025-03-02T08:00:00.000Z"),
        make_entry(id="c", timestamp="2025-03-01T21:00:00.000Z"),
    ]

    assert [e.id for e in entries_on(entries, date(2025, 3, 1), "UTC")] == ["a", "c"]
    assert entries_on(entries, date(2025, 3, 9), "UTC") == []
