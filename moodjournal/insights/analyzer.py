"""
Journal insight analysis.

Aggregates a snapshot of entries into mood counts, a mood trend and the most
common words. Analysis is pure: it never touches storage or the network.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Any, Iterable, Optional, Union

from moodjournal.config import ALL_TIME_RANGE, DEFAULT_TIME_RANGE, TIME_RANGE_DAYS
from moodjournal.insights.formatting import EntryFormatter
from moodjournal.insights.trend import TrendPoint, mood_trend
from moodjournal.insights.words import WordCount, common_words
from moodjournal.journal.entry import JournalEntry, Mood, ValidationError

logger = logging.getLogger(__name__)

EntryLike = Union[JournalEntry, dict[str, Any]]

TEXT_FIELDS = ("title", "content", "timestamp")


@dataclass(frozen=True)
class InsightReport:
    """Aggregated insights for a set of entries."""

    positive_count: int = 0
    neutral_count: int = 0
    negative_count: int = 0
    mood_trend: list[TrendPoint] = field(default_factory=list)
    common_words: list[WordCount] = field(default_factory=list)

    @property
    def total_count(self) -> int:
        """Entries with a recognized mood."""
        return self.positive_count + self.neutral_count + self.negative_count

    def to_dict(self) -> dict[str, Any]:
        """Return the report as a JSON-ready dictionary."""
        return {
            "positiveCount": self.positive_count,
            "neutralCount": self.neutral_count,
            "negativeCount": self.negative_count,
            "moodTrend": [point.to_dict() for point in self.mood_trend],
            "commonWords": [word.to_dict() for word in self.common_words],
        }


def _coerce_entries(entries: Iterable[EntryLike]) -> list[JournalEntry]:
    """
    Accept entries or plain records.

    Raises:
        ValidationError: If an item is neither, or a record is malformed.
    """
    result = []
    for item in entries:
        if isinstance(item, JournalEntry):
            changes: dict[str, Any] = {}
            for name in TEXT_FIELDS:
                value = getattr(item, name)
                if value is None:
                    changes[name] = ""
                elif not isinstance(value, str):
                    raise ValidationError(
                        f"Entry {item.id!r} {name} must be text, got {type(value).__name__}"
                    )
            if not isinstance(item.mood, Mood):
                changes["mood"] = item.mood
            result.append(item.with_changes(**changes) if changes else item)
        else:
            result.append(JournalEntry.from_dict(item))
    return result


def analyze(
    entries: Iterable[EntryLike],
    formatter: Optional[EntryFormatter] = None,
) -> InsightReport:
    """
    Analyze journal entries.

    Args:
        entries: Entries (or camelCase records) in any order.
        formatter: Date and text formatting; defaults to the system local
                   timezone and plain lower-casing.

    Returns:
        The insight report. Empty input gives zero counts and empty lists.

    Raises:
        ValidationError: If an entry's text fields are not strings.
    """
    snapshot = _coerce_entries(entries)
    formatter = formatter or EntryFormatter()

    counts = {mood: 0 for mood in Mood}
    for entry in snapshot:
        counts[entry.mood] += 1

    if counts[Mood.UNRECOGNIZED]:
        logger.debug(f"{counts[Mood.UNRECOGNIZED]} entries have an unrecognized mood")

    return InsightReport(
        positive_count=counts[Mood.POSITIVE],
        neutral_count=counts[Mood.NEUTRAL],
        negative_count=counts[Mood.NEGATIVE],
        mood_trend=mood_trend(snapshot, formatter),
        common_words=common_words(snapshot, formatter),
    )


def filter_by_time_range(
    entries: Iterable[JournalEntry],
    time_range: str = DEFAULT_TIME_RANGE,
    now: Optional[datetime] = None,
) -> list[JournalEntry]:
    """
    Keep entries written within a recent window.

    Args:
        entries: Entries to filter.
        time_range: "7days", "30days", "90days" or "all". Unknown names
                    use 30 days.
        now: End of the window (defaults to the current time).

    Returns:
        Entries at or after the window start, in input order.
    """
    entries = list(entries)
    if time_range == ALL_TIME_RANGE:
        return entries

    days = TIME_RANGE_DAYS.get(time_range)
    if days is None:
        logger.warning(f"Unknown time range '{time_range}', using {DEFAULT_TIME_RANGE}")
        days = TIME_RANGE_DAYS[DEFAULT_TIME_RANGE]

    now = now or datetime.now(timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    cutoff = now - timedelta(days=days)

    return [
        entry for entry in entries
        if entry.created_at is not None and entry.created_at >= cutoff
    ]
