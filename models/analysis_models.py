# models/analysis_models.py

from typing import List

from pydantic import BaseModel, Field

from models.grammar_models import GrammarIssue
from models.heading_models import HeadingAnalysis, HeadingNode
from models.keyword_models import KeywordEntry
from models.seo_models import SeoScore, SeoSuggestions
from models.text_models import GoalProgress, TextStatistics


class WritingReport(BaseModel):
    """
    /api/analyze がまとめて返す分析レポート。
    各パネルの結果を 1 つに束ねたもの。
    """

    statistics: TextStatistics
    goal: GoalProgress
    keywords: List[KeywordEntry] = Field(default_factory=list)
    grammar_issues: List[GrammarIssue] = Field(default_factory=list)
    headings: HeadingAnalysis
    heading_tree: List[HeadingNode] = Field(default_factory=list)
    seo_score: SeoScore
    seo_suggestions: SeoSuggestions
    progress_messages: List[str] = Field(default_factory=list)
