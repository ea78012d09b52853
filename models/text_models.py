# models/text_models.py

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class CharacterCounts(BaseModel):
    """
    文字数（空白込み / 空白なし）。
    without_spaces は常に with_spaces 以下になる。
    """
    model_config = ConfigDict(frozen=True)

    with_spaces: int = Field(0, ge=0)
    without_spaces: int = Field(0, ge=0)


class LongestSentence(BaseModel):
    """
    最長の文。
    - words: 単語数
    - text: 表示用テキスト（100 文字を超える場合は 97 文字 + "..."）
    """
    model_config = ConfigDict(frozen=True)

    words: int = Field(0, ge=0)
    text: str = ""


class TextStatistics(BaseModel):
    """統計パネル用に、カウンタと推定値をひとまとめにしたモデル。"""

    model_config = ConfigDict(frozen=True)

    word_count: int = Field(0, ge=0)
    characters: CharacterCounts = Field(default_factory=CharacterCounts)
    sentence_count: int = Field(0, ge=0)
    paragraph_count: int = Field(0, ge=0)
    average_sentence_length: float = 0.0
    longest_sentence: LongestSentence = Field(default_factory=LongestSentence)

    # 推定値（分 / ページ）
    reading_time: int = Field(1, ge=1)
    speaking_time: int = Field(1, ge=1)
    pages: float = 0.1
    reading_level: str = "N/A"


class GoalProgress(BaseModel):
    """
    目標文字数（単語数）に対する進捗。

    Attributes:
        word_count (int): 現在の単語数。
        goal (int): 目標単語数。
        percent (int): 達成率（0〜100 で頭打ち）。
        remaining (int): 目標までの残り単語数。
        achieved (bool): 目標を達成したかどうか。
    """

    model_config = ConfigDict(frozen=True)

    word_count: int = Field(0, ge=0)
    goal: int = Field(500, ge=1)
    percent: int = Field(0, ge=0, le=100)
    remaining: int = Field(0, ge=0)
    achieved: bool = False
