# models/keyword_models.py

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


# -----------------------------------------
# キーワード密度の 1 エントリ
# -----------------------------------------
class KeywordEntry(BaseModel):
    """キーワード密度ランキングの 1 行分。

    Attributes:
        word (str): 小文字化したトークン。
        count (int): 出現回数（1 以上）。
        percentage (float): 全トークン数に対する割合（小数第 1 位まで）。
    """

    model_config = ConfigDict(frozen=True)

    word: str
    count: int = Field(..., ge=1)
    percentage: float = Field(..., ge=0)
