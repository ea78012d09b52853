# models/heading_models.py

from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field


class Heading(BaseModel):
    """
    <hN>...</hN> から抽出した見出し 1 件。
    - level: 見出しレベル (1〜6)
    - text: タグ内テキスト（前後の空白は除去済み）
    """
    model_config = ConfigDict(frozen=True)

    level: int = Field(..., ge=1, le=6)
    text: str


class HeadingNode(BaseModel):
    """
    見出しアウトラインの 1 ノード。
    children には直下の（より深いレベルの）見出しが入る。
    """
    level: int = Field(..., ge=1, le=6)
    text: str
    children: List["HeadingNode"] = Field(default_factory=list)


class HeadingAnalysis(BaseModel):
    """見出し構造チェックの結果。"""

    model_config = ConfigDict(frozen=True)

    issues: List[str] = Field(default_factory=list)

    # 文書内の出現順
    headings: List[Heading] = Field(default_factory=list)

    score: int = Field(100, ge=0, le=100)
