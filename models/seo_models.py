# models/seo_models.py

from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field


class SeoScore(BaseModel):
    """
    SEO スコア（0〜100）と、その根拠となる指摘・提案。
    issues は減点の大きい問題、suggestions は改善提案。
    """
    model_config = ConfigDict(frozen=True)

    score: int = Field(100, ge=0, le=100)
    issues: List[str] = Field(default_factory=list)
    suggestions: List[str] = Field(default_factory=list)


class SeoSuggestions(BaseModel):
    """
    タイトル / meta description の候補。
    - title_suggestions: 10 文字超 70 文字未満、重複なし
    - description_suggestions: 50 文字超 160 文字未満、重複なし
    """
    model_config = ConfigDict(frozen=True)

    title_suggestions: List[str] = Field(default_factory=list)
    description_suggestions: List[str] = Field(default_factory=list)
