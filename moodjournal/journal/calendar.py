"""
Calendar browsing over journal entries.

Groups entries by the local calendar date of their timestamp.
"""

from datetime import date
from typing import Iterable, Optional

from moodjournal.config import CALENDAR_DATE_FORMAT
from moodjournal.journal.entry import JournalEntry, Mood
from moodjournal.utils.timezone import to_local


def local_date(entry: JournalEntry, timezone_str: Optional[str] = None) -> Optional[date]:
    """
    Get the local calendar date an entry was written on.

    Args:
        entry: The entry.
        timezone_str: User's timezone, or None for the system local zone.

    Returns:
        The local date, or None if the timestamp cannot be parsed.
    """
    created_at = entry.created_at
    if created_at is None:
        return None
    return to_local(created_at, timezone_str).date()


def marked_dates(
    entries: Iterable[JournalEntry],
    timezone_str: Optional[str] = None,
) -> dict[str, Mood]:
    """
    Build the calendar markers: one mood per day that has entries.

    When several entries share a day, the last one in the input wins.

    Args:
        entries: Entries to mark.
        timezone_str: User's timezone.

    Returns:
        Mapping of YYYY-MM-DD strings to the mood shown for that day.
    """
    marks: dict[str, Mood] = {}
    for entry in entries:
        day = local_date(entry, timezone_str)
        if day is not None:
            marks[day.strftime(CALENDAR_DATE_FORMAT)] = entry.mood
    return marks


def entries_on(
    entries: Iterable[JournalEntry],
    day: date,
    timezone_str: Optional[str] = None,
) -> list[JournalEntry]:
    """
    Get the entries written on a given local date, in input order.

    Args:
        entries: Entries to filter.
        day: The calendar date to select.
        timezone_str: User's timezone.

    Returns:
        Matching entries.
    """
    return [e for e in entries if local_date(e, timezone_str) == day]
