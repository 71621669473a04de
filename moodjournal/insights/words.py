"""
Common word extraction.

Counts the most frequent meaningful words across entry bodies.
"""

import re
from collections import Counter
from dataclasses import dataclass
from typing import Sequence

from moodjournal.config import COMMON_WORDS_LIMIT, MIN_WORD_LENGTH
from moodjournal.insights.formatting import EntryFormatter
from moodjournal.journal.entry import JournalEntry

# Apostrophes are not in this set, so "didn't" stays one token.
PUNCTUATION_PATTERN = re.compile(r"[.,/#!$%^&*;:{}=\-_`~()]")

STOP_WORDS: frozenset[str] = frozenset([
    "i", "me", "my", "myself", "we", "our", "ours", "ourselves", "you", "your",
    "yours", "yourself", "yourselves", "he", "him", "his", "himself", "she",
    "her", "hers", "herself", "it", "its", "itself", "they", "them", "their",
    "theirs", "themselves", "what", "which", "who", "whom", "this", "that",
    "these", "those", "am", "is", "are", "was", "were", "be", "been", "being",
    "have", "has", "had", "having", "do", "does", "did", "doing", "a", "an",
    "the", "and", "but", "if", "or", "because", "as", "until", "while", "of",
    "at", "by", "for", "with", "about", "against", "between", "into", "through",
    "during", "before", "after", "above", "below", "to", "from", "up", "down",
    "in", "out", "on", "off", "over", "under", "again", "further", "then",
    "once", "here", "there", "when", "where", "why", "how", "all", "any",
    "both", "each", "few", "more", "most", "other", "some", "such", "no", "nor",
    "not", "only", "own", "same", "so", "than", "too", "very", "s", "t", "can",
    "will", "just", "don", "should", "now",
])


@dataclass(frozen=True)
class WordCount:
    """A word and how many times it appears."""

    word: str
    count: int

    def to_dict(self) -> dict[str, object]:
        return {"word": self.word, "count": self.count}


def tokenize(text: str, formatter: EntryFormatter) -> list[str]:
    """
    Split text into candidate words.

    Lower-cases, strips the fixed punctuation set and splits on whitespace,
    then drops short words and stop words.

    Args:
        text: Raw text.
        formatter: Supplies the case normalization.

    Returns:
        Remaining words in order of appearance.
    """
    cleaned = PUNCTUATION_PATTERN.sub("", formatter.normalize(text))
    return [
        word for word in cleaned.split()
        if len(word) >= MIN_WORD_LENGTH and word not in STOP_WORDS
    ]


def common_words(
    entries: Sequence[JournalEntry],
    formatter: EntryFormatter,
    limit: int = COMMON_WORDS_LIMIT,
) -> list[WordCount]:
    """
    Find the most frequent words across all entry bodies.

    Ties keep the order in which words were first seen.

    Args:
        entries: Entries to scan.
        formatter: Supplies the case normalization.
        limit: Maximum number of words to return.

    Returns:
        Word counts, most frequent first.
    """
    if not entries:
        return []

    all_text = " ".join(entry.content for entry in entries)
    counts = Counter(tokenize(all_text, formatter))

    # sorted() is stable and Counter keeps first-seen order
    ranked = sorted(counts.items(), key=lambda item: item[1], reverse=True)
    return [WordCount(word=word, count=count) for word, count in ranked[:limit]]
