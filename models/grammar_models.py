# models/grammar_models.py

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

IssueType = Literal[
    "spacing",  # 連続した空白
    "grammar",  # 同音異義語の使い分け
]


class GrammarIssue(BaseModel):
    """
    簡易文法チェックで見つかった指摘 1 件。
    position は元テキスト中の文字オフセット。
    """
    model_config = ConfigDict(frozen=True)

    type: IssueType
    suggestion: str
    position: int = Field(..., ge=0)
