# services/text_stats.py

from __future__ import annotations

import logging
import math
import re
from typing import List

from models.text_models import CharacterCounts, LongestSentence

logger = logging.getLogger(__name__)

# 文末記号（連続可）の直後が空白 or 文字列の終端なら文の区切りとみなす
SENTENCE_BOUNDARY = re.compile(r"[.!?]+(?:\s|\Z)")
PARAGRAPH_BOUNDARY = re.compile(r"\n+")
WHITESPACE = re.compile(r"\s")

# 最長文の表示用の切り詰め
LONGEST_SENTENCE_MAX_CHARS = 100
LONGEST_SENTENCE_KEEP_CHARS = 97
ELLIPSIS = "..."


# ============================================================
# 共通ユーティリティ
# ============================================================

def round_half_up(value: float, digits: int = 0) -> float:
    """
    四捨五入（0.5 は常に切り上げ）。
    組み込みの round() は偶数丸めなので、表示値がずれないようにこちらを使う。
    """
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor


def split_sentences(text: str) -> List[str]:
    """文の区切りで分割し、空白のみの断片を除いた（trim 済みの）文リストを返す。"""
    return [s.strip() for s in SENTENCE_BOUNDARY.split(text) if s.strip()]


def split_paragraphs(text: str) -> List[str]:
    """改行（連続可）で分割し、空でない段落だけを返す。"""
    return [p for p in PARAGRAPH_BOUNDARY.split(text) if p.strip()]


def word_count_of(segment: str) -> int:
    return len(segment.split())


# ============================================================
# カウンタ
# ============================================================

def count_words(text: str) -> int:
    """前後の空白を除き、空白の連続で区切ったトークン数を返す。"""
    return word_count_of(text)


def count_characters(text: str) -> CharacterCounts:
    return CharacterCounts(
        with_spaces=len(text),
        without_spaces=len(WHITESPACE.sub("", text)),
    )


def count_sentences(text: str) -> int:
    if not text.strip():
        return 0
    return len(split_sentences(text))


def count_paragraphs(text: str) -> int:
    if not text.strip():
        return 0
    return len(split_paragraphs(text))


def average_sentence_length(text: str) -> float:
    """文あたりの平均単語数（小数第 1 位）。文が無ければ 0。"""
    sentences = split_sentences(text)
    if not sentences:
        return 0.0

    total_words = sum(word_count_of(s) for s in sentences)
    return round_half_up(total_words / len(sentences), 1)


def find_longest_sentence(text: str) -> LongestSentence:
    """
    単語数が最大の文を返す（同数の場合は先に出現した文）。
    表示用テキストは 100 文字を超える場合に 97 文字 + "..." に切り詰める。
    """
    longest = LongestSentence(words=0, text="")
    if not text.strip():
        return longest

    for sentence in split_sentences(text):
        words = word_count_of(sentence)
        if words > longest.words:
            display = sentence
            if len(sentence) > LONGEST_SENTENCE_MAX_CHARS:
                display = sentence[:LONGEST_SENTENCE_KEEP_CHARS] + ELLIPSIS
            longest = LongestSentence(words=words, text=display)

    logger.debug("[text_stats] longest sentence words=%s", longest.words)
    return longest
