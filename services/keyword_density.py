# services/keyword_density.py

from __future__ import annotations

import logging
import re
from typing import Dict, List, Tuple

from models.keyword_models import KeywordEntry
from services.text_stats import round_half_up

logger = logging.getLogger(__name__)

# 単語文字・空白以外（記号類）を除去する
NON_WORD = re.compile(r"[^\w\s]")

DEFAULT_MIN_LENGTH = 3
MAX_KEYWORDS = 10


def tokenize(text: str) -> List[str]:
    """
    小文字化 → 記号除去 → 空白区切り の簡易トークナイザ。
    SEO 提案のキーワード抽出でも同じものを使う。
    """
    cleaned = NON_WORD.sub("", text.lower())
    return [t for t in cleaned.split() if t]


def count_frequencies(tokens: List[str], min_length: int) -> Dict[str, int]:
    """min_length 以上のトークンだけを数える（dict は初出順を保つ）。"""
    counts: Dict[str, int] = {}
    for token in tokens:
        if len(token) >= min_length:
            counts[token] = counts.get(token, 0) + 1
    return counts


def rank_by_count(counts: Dict[str, int], limit: int) -> List[Tuple[str, int]]:
    """
    出現回数の降順で上位 limit 件を返す。
    sorted は安定ソートなので、同数の場合は初出順のまま。
    """
    return sorted(counts.items(), key=lambda item: item[1], reverse=True)[:limit]


def analyze_keyword_density(text: str, min_length: int = DEFAULT_MIN_LENGTH) -> List[KeywordEntry]:
    """
    キーワード密度の上位 10 件を返す。

    Notes:
        - 割合の分母は「長さに関係なく全トークン数」。
          min_length 未満の単語も分母には含まれるため、
          短い単語が多い文章では割合の合計が 100% に届かない。
        - 同数のキーワードは初出順。
    """
    if not text.strip():
        return []

    tokens = tokenize(text)
    total = len(tokens)
    counts = count_frequencies(tokens, min_length)

    entries = [
        KeywordEntry(
            word=word,
            count=count,
            percentage=round_half_up(count / total * 1000) / 10,
        )
        for word, count in rank_by_count(counts, MAX_KEYWORDS)
    ]

    logger.debug(
        "[keyword_density] total_tokens=%s distinct=%s returned=%s",
        total,
        len(counts),
        len(entries),
    )
    return entries
