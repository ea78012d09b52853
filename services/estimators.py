# services/estimators.py

from __future__ import annotations

import logging
import math

from models.text_models import GoalProgress, TextStatistics
from services.text_stats import (
    average_sentence_length,
    count_characters,
    count_paragraphs,
    count_sentences,
    count_words,
    find_longest_sentence,
    round_half_up,
)

logger = logging.getLogger(__name__)

# ============================================================
# デフォルト値（Settings と同じ値）
# ============================================================

DEFAULT_READING_WPM = 200
DEFAULT_SPEAKING_WPM = 130
DEFAULT_WORDS_PER_PAGE = 250
DEFAULT_WORD_GOAL = 500

MIN_PAGES = 0.1
NOT_APPLICABLE = "N/A"

# (平均単語数の上限, ラベル) を昇順に並べたもの。どれにも当てはまらなければ最上位。
READING_LEVEL_BANDS = [
    (10, "Elementary"),
    (14, "Middle School"),
    (17, "High School"),
    (21, "College"),
    (25, "College Graduate"),
]
TOP_READING_LEVEL = "Post-graduate"


def _positive_or_default(value: float, default: float, name: str) -> float:
    """0 以下のレートはゼロ除算になるのでデフォルト値に差し替える。"""
    if value > 0:
        return value
    logger.debug("[estimators] non-positive %s=%s, using default=%s", name, value, default)
    return default


def _minutes(text: str, words_per_minute: float, default: float, name: str) -> int:
    rate = _positive_or_default(words_per_minute, default, name)
    return max(1, math.ceil(count_words(text) / rate))


# ============================================================
# 推定値
# ============================================================

def estimate_reading_time(text: str, words_per_minute: float = DEFAULT_READING_WPM) -> int:
    """黙読時間（分）。最低 1 分。"""
    return _minutes(text, words_per_minute, DEFAULT_READING_WPM, "reading_wpm")


def estimate_speaking_time(text: str, words_per_minute: float = DEFAULT_SPEAKING_WPM) -> int:
    """音読（スピーチ）時間（分）。最低 1 分。"""
    return _minutes(text, words_per_minute, DEFAULT_SPEAKING_WPM, "speaking_wpm")


def calculate_pages(text: str, words_per_page: float = DEFAULT_WORDS_PER_PAGE) -> float:
    """ページ数（小数第 1 位）。最低 0.1 ページ。"""
    rate = _positive_or_default(words_per_page, DEFAULT_WORDS_PER_PAGE, "words_per_page")
    return max(MIN_PAGES, round_half_up(count_words(text) / rate, 1))


def estimate_reading_level(text: str) -> str:
    """
    1 文あたりの平均単語数から読解レベルを分類する。
    空テキストは "N/A"。
    """
    if not text.strip():
        return NOT_APPLICABLE

    words = count_words(text)
    sentences = count_sentences(text)
    avg_words = words / sentences if sentences > 0 else 0

    for upper, label in READING_LEVEL_BANDS:
        if avg_words <= upper:
            return label
    return TOP_READING_LEVEL


def calculate_goal_progress(text: str, word_goal: int = DEFAULT_WORD_GOAL) -> GoalProgress:
    """
    目標単語数に対する進捗を計算する。
    goal が 1 未満の場合はデフォルトの 500 を使う。
    """
    goal = word_goal if word_goal >= 1 else DEFAULT_WORD_GOAL
    words = count_words(text)
    percent = int(min(100, round_half_up(words / goal * 100)))

    return GoalProgress(
        word_count=words,
        goal=goal,
        percent=percent,
        remaining=max(0, goal - words),
        achieved=percent >= 100,
    )


def analyze_text_statistics(
    text: str,
    reading_wpm: float = DEFAULT_READING_WPM,
    speaking_wpm: float = DEFAULT_SPEAKING_WPM,
    words_per_page: float = DEFAULT_WORDS_PER_PAGE,
) -> TextStatistics:
    """統計パネルに表示する値を一括で計算する。"""
    return TextStatistics(
        word_count=count_words(text),
        characters=count_characters(text),
        sentence_count=count_sentences(text),
        paragraph_count=count_paragraphs(text),
        average_sentence_length=average_sentence_length(text),
        longest_sentence=find_longest_sentence(text),
        reading_time=estimate_reading_time(text, reading_wpm),
        speaking_time=estimate_speaking_time(text, speaking_wpm),
        pages=calculate_pages(text, words_per_page),
        reading_level=estimate_reading_level(text),
    )
