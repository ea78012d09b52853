import pytest

from services.estimators import (
    analyze_text_statistics,
    calculate_goal_progress,
    calculate_pages,
    estimate_reading_level,
    estimate_reading_time,
    estimate_speaking_time,
)
from services.text_stats import count_sentences, count_words


def words(n: int) -> str:
    return " ".join(["word"] * n)


def sentence(n: int) -> str:
    return words(n) + "."


def test_reading_time():
    assert estimate_reading_time("") == 1
    assert estimate_reading_time(words(199)) == 1
    assert estimate_reading_time(words(200)) == 1
    assert estimate_reading_time(words(201)) == 2
    assert estimate_reading_time(words(450)) == 3


def test_reading_time_custom_rate():
    assert estimate_reading_time(words(300), words_per_minute=100) == 3


def test_speaking_time():
    assert estimate_speaking_time(words(129)) == 1
    assert estimate_speaking_time(words(260)) == 2
    assert estimate_speaking_time(words(261)) == 3


@pytest.mark.parametrize("rate", [0, -5])
def test_non_positive_rate_uses_default(rate):
    assert estimate_reading_time(words(450), rate) == 3
    assert estimate_speaking_time(words(261), rate) == 3
    assert calculate_pages(words(500), rate) == 2.0


def test_pages():
    assert calculate_pages("") == 0.1
    assert calculate_pages(words(10)) == 0.1
    assert calculate_pages(words(125)) == 0.5
    assert calculate_pages(words(250)) == 1.0
    assert calculate_pages(words(300)) == 1.2
    assert calculate_pages(words(100), words_per_page=50) == 2.0


@pytest.mark.parametrize(
    "per_sentence, level",
    [
        (3, "Elementary"),
        (10, "Elementary"),
        (12, "Middle School"),
        (15, "High School"),
        (20, "College"),
        (23, "College Graduate"),
        (30, "Post-graduate"),
    ],
)
def test_reading_level_bands(per_sentence, level):
    text = " ".join([sentence(per_sentence)] * 2)
    assert estimate_reading_level(text) == level


def test_reading_level_blank_is_not_applicable():
    assert estimate_reading_level("") == "N/A"
    assert estimate_reading_level("  \n ") == "N/A"


def test_reading_level_without_terminal_punctuation():
    assert estimate_reading_level("hello world") == "Elementary"


def test_goal_progress():
    progress = calculate_goal_progress(words(250), 500)
    assert progress.word_count == 250
    assert progress.percent == 50
    assert progress.remaining == 250
    assert progress.achieved is False


def test_goal_progress_caps_at_100():
    progress = calculate_goal_progress(words(600), 500)
    assert progress.percent == 100
    assert progress.remaining == 0
    assert progress.achieved is True


def test_goal_progress_invalid_goal_falls_back():
    assert calculate_goal_progress(words(5), 0).goal == 500


def test_text_statistics_bundle_matches_individual_functions():
    text = "First sentence here. Second one!\n\nA new paragraph?"
    stats = analyze_text_statistics(text)
    assert stats.word_count == count_words(text) == 8
    assert stats.sentence_count == count_sentences(text) == 3
    assert stats.paragraph_count == 2
    assert stats.characters.with_spaces == len(text)
    assert stats.reading_time == 1
    assert stats.speaking_time == 1
    assert stats.pages == 0.1
    assert stats.reading_level == "Elementary"
    assert stats.longest_sentence.words == 3


def test_text_statistics_blank():
    stats = analyze_text_statistics("")
    assert stats.word_count == 0
    assert stats.sentence_count == 0
    assert stats.average_sentence_length == 0
    assert stats.reading_level == "N/A"
