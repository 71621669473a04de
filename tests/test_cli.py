"""Tests for the command-line interface."""

import json

import pytest

from moodjournal.cli import main
from moodjournal.journal import EntryStore, JournalEntry, Mood
from moodjournal.quotes import Quote


@pytest.fixture
def run(tmp_path):
    store_path = tmp_path / "store.json"

    def _run(*args: str) -> int:
        return main(["--store", str(store_path), "--tz", "UTC", *args])

    _run.store = EntryStore(store_path)
    return _run


def test_write_and_list(run, capsys):
    assert run("write", "--title", "Park", "--content", "A lovely walk", "--mood", "positive") == 0

    entries = run.store.load_all()
    assert len(entries) == 1
    assert entries[0].mood is Mood.POSITIVE

    capsys.readouterr()
    assert run("list") == 0
    out = capsys.readouterr().out
    assert "[positive] Park" in out
    assert entries[0].id in out


def test_write_requires_content(run, capsys):
    assert run("write", "--title", "Park", "--content", "   ") == 1
    assert "Content is required" in capsys.readouterr().err
    assert run.store.load_all() == []


def test_edit_keeps_id(run):
    entry = JournalEntry.create("Draft", "first thoughts")
    run.store.upsert(entry)

    assert run("edit", entry.id, "--content", "second thoughts", "--mood", "negative") == 0

    updated = run.store.get(entry.id)
    assert updated.content == "second thoughts"
    assert updated.mood is Mood.NEGATIVE
    assert updated.timestamp == entry.timestamp


@pytest.mark.parametrize("option,message", [
    ("--title", "Title is required"),
    ("--content", "Content is required"),
])
def test_edit_rejects_blank_text(run, capsys, option, message):
    entry = JournalEntry.create("Draft", "first thoughts")
    run.store.upsert(entry)

    assert run("edit", entry.id, option, "  ") == 1

    assert message in capsys.readouterr().err
    assert run.store.get(entry.id) == entry


def test_list_orders_by_instant(run, capsys):
    for entry_id, timestamp in [
        ("utc-ten", "2025-03-01T10:00:00.000Z"),
        ("kolkata-noon", "2025-03-01T12:00:00.000+05:30"),
        ("undated", ""),
        ("utc-eleven", "2025-03-01T11:00:00.000Z"),
    ]:
        run.store.upsert(JournalEntry.from_dict({
            "id": entry_id, "title": entry_id, "content": "x", "mood": "neutral",
            "timestamp": timestamp,
        }))

    assert run("list") == 0

    out = capsys.readouterr().out
    order = [line.split("id: ")[1] for line in out.splitlines() if "id: " in line]
    assert order == ["utc-eleven", "utc-ten", "kolkata-noon", "undated"]


def test_write_and_edit_presentation(run, capsys):
    assert run("write", "--title", "Styled", "--content", "Bold words",
               "--bold", "--text-color", "#333333") == 0
    entry = run.store.load_all()[0]

    assert entry.text_style == {"bold": True, "italic": False, "underline": False}
    assert entry.text_color == "#333333"

    assert run("edit", entry.id, "--italic", "--no-bold") == 0
    updated = run.store.get(entry.id)
    assert updated.text_style == {"bold": False, "italic": True, "underline": False}
    assert updated.text_color == "#333333"

    capsys.readouterr()
    assert run("show", entry.id) == 0
    out = capsys.readouterr().out
    assert "style: italic" in out
    assert "color: #333333" in out


def test_write_without_presentation_options(run):
    run("write", "--title", "Plain", "--content", "Nothing fancy")

    entry = run.store.load_all()[0]
    assert entry.text_style is None
    assert entry.text_color is None


def test_show_and_delete(run, capsys):
    entry = JournalEntry.create("Evening", "Quiet reading by the window")
    run.store.upsert(entry)

    assert run("show", entry.id) == 0
    assert "Quiet reading by the window" in capsys.readouterr().out

    assert run("delete", entry.id) == 0
    assert run("delete", entry.id) == 1
    assert run("show", entry.id) == 1


def test_calendar(run, capsys):
    run.store.upsert(JournalEntry.from_dict({
        "id": "a", "title": "Run", "content": "5k", "mood": "positive",
        "timestamp": "2025-03-01T08:00:00.000Z",
    }))

    assert run("calendar") == 0
    assert "2025-03-01  positive" in capsys.readouterr().out

    assert run("calendar", "--date", "2025-03-01") == 0
    assert "[positive] Run" in capsys.readouterr().out


def test_insights_json(run, capsys):
    run("write", "--title", "One", "--content", "Grateful grateful morning", "--mood", "positive")
    run("write", "--title", "Two", "--content", "Tired evening", "--mood", "negative")
    capsys.readouterr()

    assert run("insights", "--range", "all", "--json") == 0

    report = json.loads(capsys.readouterr().out)
    assert report["positiveCount"] == 1
    assert report["negativeCount"] == 1
    assert report["commonWords"][0] == {"word": "grateful", "count": 2}
    assert len(report["moodTrend"]) == 2


def test_insights_without_entries(run, capsys):
    assert run("insights") == 0
    assert "No journal entries to analyze" in capsys.readouterr().out


def test_sentiment(run, capsys):
    assert run("sentiment", "") == 0
    assert capsys.readouterr().out.strip() == "0"


def test_quote(run, capsys, monkeypatch):
    monkeypatch.setattr(
        "moodjournal.cli.QuoteProvider.fetch_quote",
        lambda self: Quote("Keep going.", "Anonymous"),
    )

    assert run("quote") == 0
    out = capsys.readouterr().out
    assert '"Keep going."' in out
    assert "Anonymous" in out


def test_profile(run, capsys):
    assert run("profile", "show") == 0
    assert "No profile saved" in capsys.readouterr().out

    assert run("profile", "set", "--name", "Sam", "--email", "sam@example.com",
               "--reminders", "--theme", "dark") == 0

    profile = run.store.load_profile()
    assert profile.name == "Sam"
    assert profile.reminder_enabled is True

    capsys.readouterr()
    assert run("profile", "show") == 0
    out = capsys.readouterr().out
    assert "Theme: dark" in out
    assert "Reminders: on" in out


def test_profile_rejects_bad_email(run, capsys):
    assert run("profile", "set", "--name", "Sam", "--email", "sam@") == 1
    assert "valid email" in capsys.readouterr().err
    assert run.store.load_profile() is None


def test_no_command_prints_help(run, capsys):
    assert run() == 1
    assert "usage" in capsys.readouterr().out
