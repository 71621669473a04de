"""Tests for sentiment scoring."""

import pytest

from moodjournal.insights import score_sentiment
from moodjournal.insights.sentiment import lexicon_score
from moodjournal.journal import ValidationError


def test_empty_text_scores_zero():
    assert score_sentiment("") == 0


def test_neutral_text_scores_zero():
    assert score_sentiment("the table is next to the window") == 0


def test_positive_text_scores_positive():
    assert score_sentiment("I love this wonderful day") > 0


def test_negative_text_scores_negative():
    assert score_sentiment("terrible awful horrible day") < 0


@pytest.mark.parametrize("raw,expected", [
    (42, 5),
    (5, 5),
    (3, 3),
    (0, 0),
    (-2, -2),
    (-17, -5),
    (2.6, 3),
])
def test_scores_are_clamped(raw, expected):
    assert score_sentiment("anything", scorer=lambda text: raw) == expected


@pytest.mark.parametrize("text", [
    "",
    "great great great great great great great great",
    "sad sad sad sad sad sad sad sad sad sad",
    "mixed: good and bad",
])
def test_score_is_bounded_and_idempotent(text):
    first = score_sentiment(text)

    assert -5 <= first <= 5
    assert isinstance(first, int)
    assert score_sentiment(text) == first


def test_lexicon_score_is_unbounded():
    assert lexicon_score("great " * 20) > 5


def test_non_text_is_rejected():
    with pytest.raises(ValidationError):
        score_sentiment(None)
