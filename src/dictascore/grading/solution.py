"""
解答顯示資料

把 SentenceResult 轉為宿主可直接渲染的單字列表（不產生任何 markup）。
"""

from dataclasses import dataclass
from typing import List, Optional

from dictascore.core.types import MistakeType, token_text
from dictascore.grading.sentence import SentenceResult
from dictascore.text.tokenizer import remove_boundary_markers


@dataclass(frozen=True)
class SolutionWord:
    """
    解答中的一欄

    Attributes:
        solution: 正確單字 (ADDED 時為 None)
        answer: 作答單字 (MISSING 時為 None)
        type: 分類
        space_after: 後面是否顯示空白
        penalty: 此欄扣分 (typo 依 typo_factor 加權)
    """
    solution: Optional[str]
    answer: Optional[str]
    type: MistakeType
    space_after: bool
    penalty: float

    @property
    def shows_penalty(self) -> bool:
        """是否顯示扣分標示 (match 與免扣分的 typo 不顯示)"""
        return self.penalty > 0

    @property
    def label(self) -> str:
        """朗讀用文字：漏寫時念正確單字，其餘念作答"""
        if self.type is MistakeType.MISSING:
            return self.solution or ""
        return self.answer or ""


def penalty_for(mistake_type: MistakeType, typo_factor: float = 1.0) -> float:
    if mistake_type is MistakeType.MATCH:
        return 0.0
    if mistake_type is MistakeType.TYPO:
        return typo_factor
    return 1.0


def renderable_solution(result: SentenceResult, typo_factor: float = 1.0) -> List[SolutionWord]:
    """
    產生顯示用的解答列表

    Args:
        result: 單句評分結果
        typo_factor: typo 的權重，用於計算每欄扣分

    Returns:
        List[SolutionWord]: 依對齊順序排列
    """
    words = []
    for index, (ref, ans, kind) in enumerate(result.columns()):
        words.append(SolutionWord(
            solution=remove_boundary_markers(token_text(ref)),
            answer=remove_boundary_markers(token_text(ans)),
            type=kind,
            space_after=result.spaces[index] if index < len(result.spaces) else False,
            penalty=penalty_for(kind, typo_factor),
        ))
    return words


def solution_text(words: List[SolutionWord]) -> str:
    """以正確單字重建參考句 (驗證 space_after 用)"""
    parts = []
    for word in words:
        if word.solution is None:
            continue
        parts.append(word.solution)
        if word.space_after:
            parts.append(" ")
    return "".join(parts).strip()
