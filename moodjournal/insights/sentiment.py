"""
Lexicon-based sentiment scoring.

Scores text by summing word valences from the VADER lexicon and clamps the
result to a small integer scale.
"""

import re
from typing import Callable, Optional

from vaderSentiment.vaderSentiment import SentimentIntensityAnalyzer

from moodjournal.config import SENTIMENT_BOUND
from moodjournal.journal.entry import ValidationError

_WORD_PATTERN = re.compile(r"[a-z0-9']+")

_analyzer = SentimentIntensityAnalyzer()


def lexicon_score(text: str) -> int:
    """
    Sum the lexicon valence of every word in the text.

    Args:
        text: Text to score.

    Returns:
        Unbounded integer score (0 for text with no known words).
    """
    lexicon = _analyzer.lexicon
    total = sum(lexicon.get(word, 0.0) for word in _WORD_PATTERN.findall(text.lower()))
    return int(round(total))


def score_sentiment(
    text: str,
    scorer: Optional[Callable[[str], float]] = None,
) -> int:
    """
    Score the sentiment of a piece of text on a -5 to 5 scale.

    Args:
        text: Text to score.
        scorer: Lexicon scorer returning an unbounded score
                (defaults to lexicon_score).

    Returns:
        Integer score between -5 (very negative) and 5 (very positive).

    Raises:
        ValidationError: If text is not a string.
    """
    if not isinstance(text, str):
        raise ValidationError(f"Sentiment text must be a string, got {type(text).__name__}")

    score = int(round((scorer or lexicon_score)(text)))
    return max(-SENTIMENT_BOUND, min(SENTIMENT_BOUND, score))
