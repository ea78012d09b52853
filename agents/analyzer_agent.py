# agents/analyzer_agent.py

from __future__ import annotations

import logging
import re
from typing import List, Optional

from models.heading_models import HeadingAnalysis
from models.seo_models import SeoScore
from services.html_parser import extract_headings
from services.text_stats import count_words, split_paragraphs, split_sentences, word_count_of

logger = logging.getLogger(__name__)

# ============================================================
# スコアリング用パラメータ
# ============================================================

MAX_SCORE = 100
MIN_SCORE = 0

# --- 見出し構造 ---
MISSING_H1_PENALTY = 20
EXTRA_H1_PENALTY = 10
SKIPPED_LEVEL_PENALTY = 5
LONG_HEADING_PENALTY = 5
MAX_HEADING_CHARS = 60
HEADING_PREVIEW_CHARS = 30

# --- 本文の長さ ---
MIN_WORDS = 300
RECOMMENDED_WORDS = 600
TOO_SHORT_PENALTY = 20
SHORT_PENALTY = 5

# --- ターゲットキーワード ---
KEYWORD_MISSING_PENALTY = 20
LOW_DENSITY = 0.5
LOW_DENSITY_PENALTY = 5
HIGH_DENSITY = 3.0
HIGH_DENSITY_PENALTY = 15
KEYWORD_NOT_IN_FIRST_LINE_PENALTY = 5

# --- 段落 / 文の長さ ---
MAX_PARAGRAPH_WORDS = 100
LONG_PARAGRAPH_PENALTY = 5
LONG_PARAGRAPH_PENALTY_CAP = 3
MAX_SENTENCE_WORDS = 30
LONG_SENTENCE_PENALTY = 3
LONG_SENTENCE_PENALTY_CAP = 5


# ============================================================
# 見出し構造チェック
# ============================================================

def check_heading_structure(text: str) -> HeadingAnalysis:
    """
    <h1>〜<h6> の構造をチェックして 0〜100 のスコアを付ける。

    - H1 が無い: -20
    - H1 が複数: 2 つ目以降 1 つにつき -10
    - レベルの飛び（h2 → h4 など）: 1 回につき -5
    - 60 文字を超える見出し: 1 つにつき -5
    """
    headings = extract_headings(text)
    issues: List[str] = []
    score = MAX_SCORE

    h1_count = sum(1 for h in headings if h.level == 1)
    if h1_count == 0:
        issues.append("Missing H1 heading. Add a main title using <h1>.")
        score -= MISSING_H1_PENALTY
    elif h1_count > 1:
        issues.append(f"Multiple H1 headings found ({h1_count}). Use only one H1 per page.")
        score -= EXTRA_H1_PENALTY * (h1_count - 1)

    previous_level: Optional[int] = None
    for heading in headings:
        if previous_level is not None and heading.level > previous_level + 1:
            issues.append(
                f"Heading level skipped: H{previous_level} is followed by H{heading.level}."
            )
            score -= SKIPPED_LEVEL_PENALTY
        previous_level = heading.level

    for heading in headings:
        if len(heading.text) > MAX_HEADING_CHARS:
            preview = heading.text[:HEADING_PREVIEW_CHARS]
            issues.append(
                f'Heading too long: "{preview}..." ({len(heading.text)} characters). '
                f"Keep headings under {MAX_HEADING_CHARS} characters."
            )
            score -= LONG_HEADING_PENALTY

    logger.debug("[analyzer] headings=%s h1_count=%s score=%s", len(headings), h1_count, score)

    return HeadingAnalysis(
        issues=issues,
        headings=headings,
        score=max(MIN_SCORE, score),
    )


# ============================================================
# SEO スコア
# ============================================================

def _count_keyword(text: str, keyword: str) -> int:
    """大文字小文字を区別せず、単語単位でキーワードの出現回数を数える。"""
    pattern = re.compile(rf"\b{re.escape(keyword)}\b", re.IGNORECASE)
    return len(pattern.findall(text))


def calculate_seo_score(text: str, target_keyword: str = "") -> SeoScore:
    """
    本文の長さ・キーワード使用・段落/文の長さ・見出し構造から SEO スコアを算出する。

    見出し構造のスコアは加算ではなく「上限」として効く:
      final = min(本文側のスコア, 見出しスコア)
    """
    issues: List[str] = []
    suggestions: List[str] = []
    score = MAX_SCORE

    # ----- 1) 本文の長さ -----
    words = count_words(text)
    if words < MIN_WORDS:
        issues.append(f"Content is too short ({words} words). Aim for at least {MIN_WORDS} words.")
        score -= TOO_SHORT_PENALTY
    elif words < RECOMMENDED_WORDS:
        suggestions.append(
            f"Consider expanding your content to {RECOMMENDED_WORDS}+ words "
            f"(currently {words} words)."
        )
        score -= SHORT_PENALTY

    # ----- 2) ターゲットキーワード -----
    keyword = target_keyword.strip()
    if keyword:
        occurrences = _count_keyword(text, keyword)
        density = occurrences / words * 100 if words else 0.0

        if occurrences == 0:
            issues.append(f'Target keyword "{keyword}" not found in content.')
            score -= KEYWORD_MISSING_PENALTY
        elif density < LOW_DENSITY:
            suggestions.append(
                f'Keyword density for "{keyword}" is low ({density:.1f}%). '
                f"Aim for {LOW_DENSITY}-{HIGH_DENSITY:g}%."
            )
            score -= LOW_DENSITY_PENALTY
        elif density > HIGH_DENSITY:
            issues.append(
                f'Keyword density for "{keyword}" is too high ({density:.1f}%). '
                "Reduce usage to avoid keyword stuffing."
            )
            score -= HIGH_DENSITY_PENALTY

        first_line = text.split("\n")[0]
        if keyword.lower() not in first_line.lower():
            suggestions.append(f'Include the target keyword "{keyword}" in your first line or title.')
            score -= KEYWORD_NOT_IN_FIRST_LINE_PENALTY

    # ----- 3) 長すぎる段落 -----
    long_paragraphs = sum(
        1 for p in split_paragraphs(text) if word_count_of(p) > MAX_PARAGRAPH_WORDS
    )
    if long_paragraphs:
        suggestions.append(
            f"{long_paragraphs} paragraph(s) exceed {MAX_PARAGRAPH_WORDS} words. "
            "Break them into shorter paragraphs."
        )
        score -= LONG_PARAGRAPH_PENALTY * min(LONG_PARAGRAPH_PENALTY_CAP, long_paragraphs)

    # ----- 4) 長すぎる文 -----
    long_sentences = sum(
        1 for s in split_sentences(text) if word_count_of(s) > MAX_SENTENCE_WORDS
    )
    if long_sentences:
        suggestions.append(
            f"{long_sentences} sentence(s) exceed {MAX_SENTENCE_WORDS} words. "
            "Consider shortening them."
        )
        score -= LONG_SENTENCE_PENALTY * min(LONG_SENTENCE_PENALTY_CAP, long_sentences)

    # ----- 5) 見出し構造（スコアの上限として適用） -----
    heading_analysis = check_heading_structure(text)
    issues.extend(heading_analysis.issues)
    score = min(score, heading_analysis.score)

    final_score = int(max(MIN_SCORE, min(MAX_SCORE, round(score))))

    logger.debug(
        "[analyzer] seo words=%s keyword=%s heading_score=%s score=%s",
        words,
        keyword or "-",
        heading_analysis.score,
        final_score,
    )

    return SeoScore(score=final_score, issues=issues, suggestions=suggestions)
