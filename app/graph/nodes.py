# app/graph/nodes.py
from __future__ import annotations

import logging
from typing import List

from agents.analyzer_agent import calculate_seo_score, check_heading_structure
from agents.strategist_agent import generate_seo_suggestions
from app.config import Settings
from app.graph.state import GraphState
from services.estimators import analyze_text_statistics, calculate_goal_progress
from services.grammar_checker import check_basic_grammar
from services.html_parser import build_heading_tree
from services.keyword_density import analyze_keyword_density

logger = logging.getLogger(__name__)


def _log_progress(state: GraphState, node: str, message: str) -> GraphState:
    """
    進捗ログを state に積むユーティリティ。
    state は dict (GraphState) として扱う。
    """
    line = f"[{node}] {message}"

    messages: List[str] = list(state.get("progress_messages", []))
    messages.append(line)

    state["progress_messages"] = messages
    state["current_node"] = node

    logger.info(line)
    return state


# ---------- Statistics ノード ----------


def statistics_node(state: GraphState) -> GraphState:
    """
    Statistics ノード:
    単語数・文数などのカウンタと、読了時間などの推定値、目標進捗を計算する。
    """
    state = _log_progress(state, "statistics", "start: counting text statistics")

    text: str = state["text"]
    settings: Settings = state["settings"]

    statistics = analyze_text_statistics(
        text,
        reading_wpm=settings.reading_words_per_minute,
        speaking_wpm=settings.speaking_words_per_minute,
        words_per_page=settings.words_per_page,
    )
    state["statistics"] = statistics
    state["goal"] = calculate_goal_progress(text, settings.word_goal)

    state = _log_progress(
        state,
        "statistics",
        f"done: {statistics.word_count} words, {statistics.sentence_count} sentences",
    )
    return state


# ---------- Keyword ノード ----------


def keyword_node(state: GraphState) -> GraphState:
    state = _log_progress(state, "keywords", "start: keyword density")

    settings: Settings = state["settings"]
    keywords = analyze_keyword_density(state["text"], settings.keyword_min_length)
    state["keywords"] = keywords

    state = _log_progress(state, "keywords", f"done: {len(keywords)} keywords ranked")
    return state


# ---------- Grammar ノード ----------


def grammar_node(state: GraphState) -> GraphState:
    state = _log_progress(state, "grammar", "start: basic grammar check")

    issues = check_basic_grammar(state["text"])
    state["grammar_issues"] = issues

    state = _log_progress(state, "grammar", f"done: {len(issues)} issues flagged")
    return state


# ---------- Heading ノード ----------


def heading_node(state: GraphState) -> GraphState:
    """
    Heading ノード:
    見出し構造をチェックし、アウトライン（ツリー）も組み立てる。
    """
    state = _log_progress(state, "headings", "start: heading structure")

    analysis = check_heading_structure(state["text"])
    state["headings"] = analysis
    state["heading_tree"] = build_heading_tree(analysis.headings)

    state = _log_progress(
        state,
        "headings",
        f"done: {len(analysis.headings)} headings, score={analysis.score}",
    )
    return state


# ---------- SEO ノード ----------


def seo_node(state: GraphState) -> GraphState:
    """
    SEO ノード:
    SEO スコアと、タイトル / description 候補を生成する。
    """
    state = _log_progress(state, "seo", "start: seo score and suggestions")

    text: str = state["text"]
    target_keyword: str = state.get("target_keyword") or ""

    seo_score = calculate_seo_score(text, target_keyword)
    state["seo_score"] = seo_score
    state["seo_suggestions"] = generate_seo_suggestions(text)

    state = _log_progress(state, "seo", f"done: score={seo_score.score}")
    return state
