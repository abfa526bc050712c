"""
事件模型（Event Model）

評分核心不直接輸出任何東西。
若宿主需要知道「本次評分結果」，請使用事件回呼（event handler）。
"""

from __future__ import annotations

from typing import Callable, Literal, TypedDict


class GradingEvent(TypedDict, total=False):
    type: Literal["graded", "aggregated"]
    engine: str

    # graded
    sentence_index: int
    added: int
    missing: int
    typo: int
    wrong: int
    match: int
    total: int

    # aggregated
    score: float
    max_score: int
    passed: bool
    mastered: bool


GradingEventHandler = Callable[[GradingEvent], None]
