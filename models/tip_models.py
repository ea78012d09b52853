# models/tip_models.py
from typing import List

from pydantic import BaseModel, ConfigDict, Field


class WritingTip(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    title: str
    description: str
    category: str
    body: List[str] = Field(default_factory=list)
    example: str
