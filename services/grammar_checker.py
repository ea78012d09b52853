# services/grammar_checker.py

from __future__ import annotations

import logging
import re
from typing import List, Tuple

from models.grammar_models import GrammarIssue

logger = logging.getLogger(__name__)

EXTRA_SPACE = re.compile(r"\s{2,}")
EXTRA_SPACE_SUGGESTION = "Remove extra space"

# 紛らわしい同音異義語のセット。どれにマッチしても同じ注意文を出す。
# 正誤は判定しない（使い方の確認を促すだけ）。
HOMOPHONE_SETS: List[Tuple[re.Pattern, str]] = [
    (re.compile(r"\b(its|it's)\b"), "Check 'its' vs 'it's' usage"),
    (re.compile(r"\b(there|their|they're)\b"), "Verify 'there', 'their', or 'they're' usage"),
    (re.compile(r"\b(your|you're)\b"), "Check 'your' vs 'you're' usage"),
    (re.compile(r"\b(to|too|two)\b"), "Verify 'to', 'too', or 'two' usage"),
]


def check_basic_grammar(text: str) -> List[GrammarIssue]:
    """
    ごく簡易な文法チェック。

    並び順:
      1) 連続した空白（出現順）
      2) 同音異義語（セットごとに、HOMOPHONE_SETS の順で出現順）
    """
    issues: List[GrammarIssue] = []

    for match in EXTRA_SPACE.finditer(text):
        issues.append(
            GrammarIssue(type="spacing", suggestion=EXTRA_SPACE_SUGGESTION, position=match.start())
        )

    for pattern, suggestion in HOMOPHONE_SETS:
        for match in pattern.finditer(text):
            issues.append(
                GrammarIssue(type="grammar", suggestion=suggestion, position=match.start())
            )

    logger.debug("[grammar_checker] issues=%s", len(issues))
    return issues
