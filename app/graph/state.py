# app/graph/state.py
from __future__ import annotations

from typing import Any, Dict

from app.config import Settings


class GraphState(Dict[str, Any]):
    """
    ワークフローの「状態」コンテナ。
    実体はただの dict だが、型ヒントとして分かりやすくするためのラッパ。
    """
    pass


def create_initial_state(
    text: str,
    target_keyword: str,
    settings: Settings,
) -> GraphState:
    """
    ワークフロー開始時の初期 state を作成。
    """
    state: GraphState = GraphState()
    state["text"] = text
    state["target_keyword"] = target_keyword
    state["settings"] = settings
    state["progress_messages"] = []  # 各ノードからのログ的メッセージ
    state["current_node"] = None
    return state
