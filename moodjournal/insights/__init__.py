"""
Insights module for analyzing journal entries.

Provides mood counts, mood trend sampling, common word extraction and
sentiment scoring.
"""

from moodjournal.insights.analyzer import InsightReport, analyze, filter_by_time_range
from moodjournal.insights.formatting import EntryFormatter
from moodjournal.insights.sentiment import score_sentiment
from moodjournal.insights.trend import TrendPoint
from moodjournal.insights.words import WordCount

__all__ = [
    "InsightReport",
    "analyze",
    "filter_by_time_range",
    "EntryFormatter",
    "score_sentiment",
    "TrendPoint",
    "WordCount",
]
