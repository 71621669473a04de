"""Tests for common word extraction."""

from moodjournal.insights import EntryFormatter
from moodjournal.insights.words import STOP_WORDS, WordCount, common_words, tokenize


def _words(result):
    return [(w.word, w.count) for w in result]


def test_repeated_word_ranks_first(make_entry, utc_formatter):
    entries = [make_entry("I love love love journaling today")]

    assert _words(common_words(entries, utc_formatter)) == [
        ("love", 3),
        ("journaling", 1),
        ("today", 1),
    ]


def test_short_words_never_counted(make_entry, utc_formatter):
    entries = [make_entry("the cat sat on the mat cat cat cat")]

    assert common_words(entries, utc_formatter) == []


def test_long_stop_words_are_dropped(make_entry, utc_formatter):
    entries = [make_entry("about because while against between through yourselves")]

    assert common_words(entries, utc_formatter) == []


def test_case_is_folded(make_entry, utc_formatter):
    entries = [make_entry("Coffee COFFEE coffee")]

    assert _words(common_words(entries, utc_formatter)) == [("coffee", 3)]


def test_listed_punctuation_is_removed(make_entry, utc_formatter):
    entries = [make_entry("Sunny! sunny, (sunny) sunny... well-being")]

    assert _words(common_words(entries, utc_formatter)) == [("sunny", 4), ("wellbeing", 1)]


def test_apostrophes_and_unlisted_marks_are_kept(make_entry, utc_formatter):
    entries = [make_entry("didn't didn't really? really")]

    assert _words(common_words(entries, utc_formatter)) == [
        ("didn't", 2),
        ("really?", 1),
        ("really", 1),
    ]


def test_ties_keep_first_seen_order(make_entry, utc_formatter):
    entries = [make_entry("zebra apple zebra apple mango")]

    assert _words(common_words(entries, utc_formatter)) == [
        ("zebra", 2),
        ("apple", 2),
        ("mango", 1),
    ]


def test_entries_are_joined_with_a_space(make_entry, utc_formatter):
    entries = [make_entry("walking"), make_entry("walking")]

    assert _words(common_words(entries, utc_formatter)) == [("walking", 2)]


def test_result_is_capped_and_sorted(make_entry, utc_formatter):
    words = [f"word{chr(ord('a') + i)}" for i in range(25)]
    text = " ".join(words) + " " + " ".join(words[:5] * 3)

    result = common_words([make_entry(text)], utc_formatter)

    assert len(result) == 20
    counts = [w.count for w in result]
    assert counts == sorted(counts, reverse=True)
    assert all(count >= 1 for count in counts)
    assert result[0] == WordCount("worda", 4)


def test_empty_input(utc_formatter):
    assert common_words([], utc_formatter) == []


def test_custom_normalizer_is_used(make_entry):
    formatter = EntryFormatter("UTC", normalizer=str.upper)

    assert tokenize("Quiet evening", formatter) == ["QUIET", "EVENING"]


def test_stop_word_list_size():
    assert len(STOP_WORDS) == 127
    assert {"don", "should", "now", "s", "t"} <= STOP_WORDS
