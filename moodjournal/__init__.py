"""
moodjournal: mood-tagged personal journaling.

This package stores dated, mood-tagged journal entries and a user profile,
derives mood and word-frequency insights from them, and serves
inspirational quotes.
"""

__version__ = "0.1.0"
__description__ = "Mood-tagged journaling with insights"

from moodjournal.insights import InsightReport, analyze, score_sentiment
from moodjournal.journal import EntryStore, JournalEntry, Mood, UserProfile
from moodjournal.quotes import Quote, QuoteProvider

__all__ = [
    "InsightReport",
    "analyze",
    "score_sentiment",
    "EntryStore",
    "JournalEntry",
    "Mood",
    "UserProfile",
    "Quote",
    "QuoteProvider",
]
