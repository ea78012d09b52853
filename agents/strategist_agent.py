# agents/strategist_agent.py

from __future__ import annotations

import logging
import re
from typing import List

from models.seo_models import SeoSuggestions
from services.html_parser import extract_headings
from services.keyword_density import count_frequencies, rank_by_count, tokenize
from services.text_stats import ELLIPSIS, split_paragraphs

logger = logging.getLogger(__name__)

# ============================================================
# 候補生成のパラメータ
# ============================================================

TOP_KEYWORDS = 5
# 「4 文字以上」を対象にする（len > 3）
KEYWORD_MIN_LENGTH = 4

FIRST_SENTENCE_MAX_CHARS = 60
FIRST_PARAGRAPH_MAX_CHARS = 150

# 採用する文字数の範囲（両端は含まない）
TITLE_MIN_CHARS = 10
TITLE_MAX_CHARS = 70
DESCRIPTION_MIN_CHARS = 50
DESCRIPTION_MAX_CHARS = 160

# キーワードが足りないときに 2 番目・3 番目を埋める汎用語
SECOND_KEYWORD_FALLBACK = "related topics"
THIRD_KEYWORD_FALLBACK = "best practices"

SENTENCE_END = re.compile(r"[.!?]")


# ============================================================
# ユーティリティ
# ============================================================

def _top_keywords(text: str) -> List[str]:
    """頻出キーワード上位 5 件（同数は初出順）。"""
    counts = count_frequencies(tokenize(text), KEYWORD_MIN_LENGTH)
    return [word for word, _ in rank_by_count(counts, TOP_KEYWORDS)]


def _truncate(value: str, limit: int) -> str:
    if len(value) > limit:
        return value[:limit] + ELLIPSIS
    return value


def _pick(candidates: List[str], min_chars: int, max_chars: int) -> List[str]:
    """空文字を除き、文字数が範囲内のものだけを初出順・重複なしで返す。"""
    picked: List[str] = []
    for candidate in candidates:
        if not candidate:
            continue
        if not (min_chars < len(candidate) < max_chars):
            continue
        if candidate in picked:
            continue
        picked.append(candidate)
    return picked


# ============================================================
# タイトル候補
# ============================================================

def _title_candidates(text: str, keywords: List[str]) -> List[str]:
    candidates: List[str] = []

    # (a) 最初の H1 / H2
    for heading in extract_headings(text):
        if heading.level <= 2:
            candidates.append(heading.text)
            break

    # (b) 最初の文
    first_sentence = SENTENCE_END.split(text)[0].strip()
    candidates.append(_truncate(first_sentence, FIRST_SENTENCE_MAX_CHARS))

    # (c)〜(e) キーワードのテンプレート
    # キーワードが 1 つも無い場合は " - Key Guide" のような空テンプレートになるので、あえて作らない
    if keywords:
        kw1 = keywords[0]
        kw2 = keywords[1] if len(keywords) > 1 else ""
        pair = f"{kw1} & {kw2}" if kw2 else kw1

        candidates.append(" ".join(k for k in (kw1, kw2) if k) + " - Key Guide")
        candidates.append(f"Everything You Need to Know About {kw1}")
        candidates.append(f"The Ultimate Guide to {pair}")

    return candidates


# ============================================================
# meta description 候補
# ============================================================

def _description_candidates(text: str, keywords: List[str]) -> List[str]:
    candidates: List[str] = []

    # (a) 最初の段落
    paragraphs = split_paragraphs(text)
    if paragraphs:
        candidates.append(_truncate(paragraphs[0].strip(), FIRST_PARAGRAPH_MAX_CHARS))

    # (b)〜(d) キーワードのテンプレート
    if keywords:
        kw1 = keywords[0]
        kw2 = keywords[1] if len(keywords) > 1 else SECOND_KEYWORD_FALLBACK
        kw3 = keywords[2] if len(keywords) > 2 else THIRD_KEYWORD_FALLBACK

        candidates.append(
            f"Learn everything about {kw1} and {kw2}. "
            f"This guide covers what you need to know about {kw1}."
        )
        candidates.append(
            f"Discover key insights on {kw1}, {kw2}, and {kw3}. "
            "Read on for practical tips and expert advice."
        )
        candidates.append(
            f"Looking for information about {kw1}? "
            f"Find out how {kw2} and {kw3} fit in with this detailed overview."
        )

    return candidates


# ============================================================
# 公開関数
# ============================================================

def generate_seo_suggestions(text: str) -> SeoSuggestions:
    """
    本文からタイトル / meta description の候補を生成する。

    - タイトル: 最初の H1/H2 → 最初の文 → キーワードのテンプレート
    - description: 最初の段落 → キーワードのテンプレート
    キーワードが足りない場合はテンプレートを省略・汎用語で補完する（例外は出さない）。
    """
    keywords = _top_keywords(text)

    titles = _pick(_title_candidates(text, keywords), TITLE_MIN_CHARS, TITLE_MAX_CHARS)
    descriptions = _pick(
        _description_candidates(text, keywords),
        DESCRIPTION_MIN_CHARS,
        DESCRIPTION_MAX_CHARS,
    )

    logger.debug(
        "[strategist] keywords=%s titles=%s descriptions=%s",
        keywords,
        len(titles),
        len(descriptions),
    )
    return SeoSuggestions(title_suggestions=titles, description_suggestions=descriptions)
