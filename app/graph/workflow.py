# app/graph/workflow.py
from __future__ import annotations

import logging

from app.config import Settings, get_settings
from app.graph import nodes
from app.graph.state import create_initial_state
from models.analysis_models import WritingReport

logger = logging.getLogger(__name__)


def run_workflow(
    text: str,
    target_keyword: str = "",
    settings: Settings | None = None,
) -> WritingReport:
    """
    /api/analyze 用のシンプルな直列ワークフロー。

    statistics → keywords → grammar → headings → seo
    """
    settings = settings or get_settings()

    logger.info(
        "[workflow] run_workflow start chars=%s target_keyword=%s",
        len(text),
        "YES" if target_keyword.strip() else "NO",
    )

    state = create_initial_state(text=text, target_keyword=target_keyword, settings=settings)

    # 1) 統計（カウンタ + 推定値 + 目標進捗）
    state = nodes.statistics_node(state)

    # 2) キーワード密度
    state = nodes.keyword_node(state)

    # 3) 簡易文法チェック
    state = nodes.grammar_node(state)

    # 4) 見出し構造
    state = nodes.heading_node(state)

    # 5) SEO スコア + タイトル / description 候補
    state = nodes.seo_node(state)

    logger.info(
        "[workflow] run_workflow done current_node=%s",
        state.get("current_node"),
    )

    return WritingReport(
        statistics=state["statistics"],
        goal=state["goal"],
        keywords=state.get("keywords", []),
        grammar_issues=state.get("grammar_issues", []),
        headings=state["headings"],
        heading_tree=state.get("heading_tree", []),
        seo_score=state["seo_score"],
        seo_suggestions=state["seo_suggestions"],
        progress_messages=state.get("progress_messages", []),
    )
