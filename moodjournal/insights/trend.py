"""
Mood trend sampling.

Turns a list of entries into at most seven chronological chart points.
"""

import logging
from dataclasses import dataclass
from typing import Sequence, TypeVar

from moodjournal.config import TREND_SAMPLE_SIZE
from moodjournal.insights.formatting import EntryFormatter
from moodjournal.journal.entry import JournalEntry

logger = logging.getLogger(__name__)

T = TypeVar("T")

UNDATED_LABEL = ""


@dataclass(frozen=True)
class TrendPoint:
    """One point on the mood trend chart."""

    label: str
    value: int

    def to_dict(self) -> dict[str, object]:
        return {"label": self.label, "value": self.value}


def sample_evenly(items: Sequence[T], count: int = TREND_SAMPLE_SIZE) -> list[T]:
    """
    Pick a representative sample from a chronological sequence.

    Always keeps the first and last items and fills the slots between them
    at a fixed stride of ``len(items) // (count - 1)``.

    Args:
        items: Items in chronological order.
        count: Number of items to keep.

    Returns:
        All items if there are at most ``count``, otherwise exactly ``count``.
    """
    if count < 2:
        raise ValueError(f"Sample size must be at least 2, got {count}")
    if len(items) <= count:
        return list(items)

    last = len(items) - 1
    step = len(items) // (count - 1)

    result = [items[0]]
    for i in range(1, count - 1):
        result.append(items[min(i * step, last)])
    result.append(items[last])

    return result


def mood_trend(
    entries: Sequence[JournalEntry],
    formatter: EntryFormatter,
    sample_size: int = TREND_SAMPLE_SIZE,
) -> list[TrendPoint]:
    """
    Build the mood-over-time series.

    Entries are ordered by timestamp (ties keep input order), sampled down to
    ``sample_size`` points and labelled with their local month/day. Entries
    whose timestamp is missing or malformed follow the dated ones in input
    order and get an empty label.

    Args:
        entries: Entries to chart, in any order.
        formatter: Supplies the date label format and timezone.
        sample_size: Maximum number of points.

    Returns:
        Chart points in chronological order.
    """
    dated = []
    undated = []
    for entry in entries:
        created_at = entry.created_at
        if created_at is None:
            logger.debug(f"Entry {entry.id!r} has no usable timestamp, charting it last")
            undated.append((None, entry))
        else:
            dated.append((created_at, entry))

    dated.sort(key=lambda pair: pair[0])

    return [
        TrendPoint(
            label=formatter.trend_label(created_at) if created_at else UNDATED_LABEL,
            value=entry.mood.score,
        )
        for created_at, entry in sample_evenly(dated + undated, sample_size)
    ]
