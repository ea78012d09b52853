# app/api/routes.py
from __future__ import annotations

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from agents.analyzer_agent import calculate_seo_score, check_heading_structure
from agents.strategist_agent import generate_seo_suggestions
from app.config import Settings, get_settings
from app.graph.workflow import run_workflow
from models.analysis_models import WritingReport
from models.grammar_models import GrammarIssue
from models.heading_models import HeadingAnalysis
from models.keyword_models import KeywordEntry
from models.seo_models import SeoScore, SeoSuggestions
from models.text_models import GoalProgress, TextStatistics
from models.tip_models import WritingTip
from services.estimators import analyze_text_statistics, calculate_goal_progress
from services.grammar_checker import check_basic_grammar
from services.keyword_density import analyze_keyword_density
from services.tips_catalog import ALL_CATEGORIES, search_tips

logger = logging.getLogger(__name__)

router = APIRouter()


# --------- Request モデル ---------


class TextRequest(BaseModel):
    text: str = ""


class GoalRequest(TextRequest):
    # 省略時は settings.word_goal
    word_goal: Optional[int] = Field(None, ge=1)


class KeywordRequest(TextRequest):
    # 省略時は settings.keyword_min_length
    min_length: Optional[int] = Field(None, ge=1)


class SeoRequest(TextRequest):
    target_keyword: str = ""


# --------- エンドポイント ---------


@router.post("/statistics", response_model=TextStatistics)
def api_statistics(
    payload: TextRequest,
    settings: Settings = Depends(get_settings),
) -> TextStatistics:
    """単語数・文数・読了時間などの統計をまとめて返す。"""
    logger.info("[api.statistics] chars=%s", len(payload.text))
    return analyze_text_statistics(
        payload.text,
        reading_wpm=settings.reading_words_per_minute,
        speaking_wpm=settings.speaking_words_per_minute,
        words_per_page=settings.words_per_page,
    )


@router.post("/goal", response_model=GoalProgress)
def api_goal(
    payload: GoalRequest,
    settings: Settings = Depends(get_settings),
) -> GoalProgress:
    goal = payload.word_goal or settings.word_goal
    logger.info("[api.goal] chars=%s goal=%s", len(payload.text), goal)
    return calculate_goal_progress(payload.text, goal)


@router.post("/keywords", response_model=List[KeywordEntry])
def api_keywords(
    payload: KeywordRequest,
    settings: Settings = Depends(get_settings),
) -> List[KeywordEntry]:
    min_length = payload.min_length or settings.keyword_min_length
    logger.info("[api.keywords] chars=%s min_length=%s", len(payload.text), min_length)
    return analyze_keyword_density(payload.text, min_length)


@router.post("/grammar", response_model=List[GrammarIssue])
def api_grammar(payload: TextRequest) -> List[GrammarIssue]:
    logger.info("[api.grammar] chars=%s", len(payload.text))
    return check_basic_grammar(payload.text)


@router.post("/headings", response_model=HeadingAnalysis)
def api_headings(payload: TextRequest) -> HeadingAnalysis:
    logger.info("[api.headings] chars=%s", len(payload.text))
    return check_heading_structure(payload.text)


@router.post("/seo/score", response_model=SeoScore)
def api_seo_score(payload: SeoRequest) -> SeoScore:
    """
    SEO スコアを返す。target_keyword は任意。
    """
    logger.info(
        "[api.seo.score] chars=%s target_keyword=%s",
        len(payload.text),
        "YES" if payload.target_keyword.strip() else "NO",
    )
    return calculate_seo_score(payload.text, payload.target_keyword)


@router.post("/seo/suggestions", response_model=SeoSuggestions)
def api_seo_suggestions(payload: TextRequest) -> SeoSuggestions:
    logger.info("[api.seo.suggestions] chars=%s", len(payload.text))
    return generate_seo_suggestions(payload.text)


@router.post("/analyze", response_model=WritingReport)
def api_analyze(
    payload: SeoRequest,
    settings: Settings = Depends(get_settings),
) -> WritingReport:
    """
    すべての解析をまとめて実行するメインAPI。

    1) 統計 / 目標進捗
    2) キーワード密度
    3) 簡易文法チェック
    4) 見出し構造
    5) SEO スコア + タイトル / description 候補
    """
    logger.info("[api.analyze] start chars=%s", len(payload.text))

    report = run_workflow(
        text=payload.text,
        target_keyword=payload.target_keyword,
        settings=settings,
    )

    logger.info("[api.analyze] done seo_score=%s", report.seo_score.score)
    return report


@router.get("/tips", response_model=List[WritingTip])
def api_tips(query: str = "", category: str = ALL_CATEGORIES) -> List[WritingTip]:
    """ライティングのヒント一覧（検索・カテゴリ絞り込み付き）。"""
    return search_tips(query=query, category=category)
