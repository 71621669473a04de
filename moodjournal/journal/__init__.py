"""
Journal module for storing and browsing mood-tagged entries.

Provides the entry and profile model, the JSON-backed entry store,
and calendar helpers.
"""

from moodjournal.journal.entry import JournalEntry, Mood, Theme, UserProfile, ValidationError
from moodjournal.journal.store import EntryStore, StorageError
from moodjournal.journal.calendar import entries_on, marked_dates

__all__ = [
    "JournalEntry",
    "Mood",
    "Theme",
    "UserProfile",
    "ValidationError",
    "EntryStore",
    "StorageError",
    "entries_on",
    "marked_dates",
]
