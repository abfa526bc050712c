"""
單字對齊模組

把參考句與作答的單字序列對齊成等長的兩列，缺字處以 Gap 補位。

演算法:
1. 最小成本對齊 (動態規劃，編輯距離表)
   - 相同: 0
   - 拼寫錯誤 (相似): 1
   - 錯字 (替換): 2
   - 多寫 / 漏寫 (單側 Gap): 2
   成本相同時選 Gap 較少者，亦即偏好替換/拼寫錯誤而非「一漏一多」。
2. 方向偏差修正
   正向與反向各對齊一次，取 match + typo 欄數較多者（平手保留正向）。
3. 修剪多餘補位
   開頭的多寫欄位搭配結尾的漏寫欄位時，嘗試把兩列錯開一格合併；
   只有在不增加成本、且不產生空欄時才採用。

複雜度為 O(n·m)，句子長度通常只有數十個字。
"""

from typing import List, Optional, Sequence, Tuple, Union

from dictascore.core.protocols.similarity import SimilarityProtocol
from dictascore.core.types import GAP, AlignedPair, Gap, Token, Word
from dictascore.text.similarity import WordSimilarity
from dictascore.utils.logger import get_logger

# 回溯方向（順序即平手時的優先順序）
_DIAGONAL = 0
_MISSING = 1
_ADDED = 2


class AlignmentConfig:
    """對齊成本配置 (整數權重，避免浮點誤差)"""

    MATCH_COST = 0
    TYPO_COST = 1
    SUBSTITUTION_COST = 2
    GAP_COST = 2


def _as_text(token: Union[str, Word]) -> str:
    if isinstance(token, Word):
        return token.text
    if isinstance(token, str):
        return token
    raise TypeError(f"Cannot align token of type {type(token).__name__}")


class WordAligner:
    """
    單字對齊器

    功能:
    - 以最小成本對齊兩個單字序列
    - 正反兩個方向各跑一次，取較佳結果
    - 移除多餘的首尾補位

    使用範例:
        >>> aligner = WordAligner()
        >>> pair = aligner.align(["the", "cat", "sat"], ["the", "big", "cat", "sat"])
        >>> [str(t) if t else "-" for t in pair.reference]
        ['the', '-', 'cat', 'sat']
    """

    def __init__(self, similarity: Optional[SimilarityProtocol] = None, config=AlignmentConfig):
        self.similarity = similarity or WordSimilarity()
        self.config = config
        self._logger = get_logger("aligner")

    # ========== 成本 ==========

    def pair_cost(self, solution: str, answer: str) -> int:
        """兩個存在的單字放在同一欄的成本"""
        if solution == answer:
            return self.config.MATCH_COST
        if self.similarity.are_similar(solution, answer):
            return self.config.TYPO_COST
        return self.config.SUBSTITUTION_COST

    def column_cost(self, solution: Token, answer: Token) -> int:
        if isinstance(solution, Gap) or isinstance(answer, Gap):
            return self.config.GAP_COST
        return self.pair_cost(solution.text, answer.text)

    def total_cost(self, aligned: AlignedPair) -> int:
        return sum(self.column_cost(ref, ans) for ref, ans in aligned)

    def count_matches(self, aligned: AlignedPair) -> int:
        """計算 match + typo 欄數"""
        count = 0
        for ref, ans in aligned:
            if isinstance(ref, Word) and isinstance(ans, Word):
                if ref.text == ans.text or self.similarity.are_similar(ref.text, ans.text):
                    count += 1
        return count

    # ========== 對齊 ==========

    def align(
        self,
        reference: Sequence[Union[str, Word]],
        answer: Sequence[Union[str, Word]],
    ) -> AlignedPair:
        """
        對齊參考序列與作答序列

        Args:
            reference: 參考單字序列
            answer: 作答單字序列

        Returns:
            AlignedPair: 等長、保持原順序的對齊結果
        """
        solution_words = [_as_text(t) for t in reference]
        answer_words = [_as_text(t) for t in answer]

        forward = self._align_once(solution_words, answer_words)
        backward = self._align_once(solution_words[::-1], answer_words[::-1]).reversed()

        forward_matches = self.count_matches(forward)
        backward_matches = self.count_matches(backward)
        aligned = forward
        if backward_matches > forward_matches:
            aligned = backward

        self._logger.debug(
            f"align: {len(solution_words)}x{len(answer_words)} "
            f"forward={forward_matches} backward={backward_matches} "
            f"-> {'backward' if aligned is backward else 'forward'}"
        )

        return self._trim_padding(aligned)

    def _align_once(self, solution: List[str], answer: List[str]) -> AlignedPair:
        """單一方向的最小成本對齊（成本相同時取 Gap 較少者）"""
        rows, cols = len(solution), len(answer)
        gap_cost = self.config.GAP_COST

        # table[i][j] = (成本, Gap 數)
        table: List[List[Tuple[int, int]]] = [[(0, 0)] * (cols + 1) for _ in range(rows + 1)]
        moves: List[List[int]] = [[_DIAGONAL] * (cols + 1) for _ in range(rows + 1)]

        for i in range(1, rows + 1):
            table[i][0] = (i * gap_cost, i)
            moves[i][0] = _MISSING
        for j in range(1, cols + 1):
            table[0][j] = (j * gap_cost, j)
            moves[0][j] = _ADDED

        for i in range(1, rows + 1):
            for j in range(1, cols + 1):
                diag_cost, diag_gaps = table[i - 1][j - 1]
                up_cost, up_gaps = table[i - 1][j]
                left_cost, left_gaps = table[i][j - 1]

                candidates = (
                    (diag_cost + self.pair_cost(solution[i - 1], answer[j - 1]), diag_gaps),
                    (up_cost + gap_cost, up_gaps + 1),
                    (left_cost + gap_cost, left_gaps + 1),
                )
                best = min(range(3), key=lambda k: candidates[k])
                table[i][j] = candidates[best]
                moves[i][j] = best

        columns: List[Tuple[Token, Token]] = []
        i, j = rows, cols
        while i > 0 or j > 0:
            move = moves[i][j]
            if move == _DIAGONAL:
                columns.append((Word(solution[i - 1]), Word(answer[j - 1])))
                i -= 1
                j -= 1
            elif move == _MISSING:
                columns.append((Word(solution[i - 1]), GAP))
                i -= 1
            else:
                columns.append((GAP, Word(answer[j - 1])))
                j -= 1

        columns.reverse()
        return AlignedPair.from_columns(columns)

    def _trim_padding(self, aligned: AlignedPair) -> AlignedPair:
        """
        開頭多寫 + 結尾漏寫視為補位：把參考列左移、作答列右截一格

        只有在成本不增加、且沒有兩側皆為 Gap 的欄位時才採用。
        """
        current = aligned
        current_cost = None

        while (
            len(current) > 0
            and isinstance(current.reference[0], Gap)
            and isinstance(current.answer[-1], Gap)
        ):
            candidate = AlignedPair(reference=current.reference[1:], answer=current.answer[:-1])
            if any(isinstance(ref, Gap) and isinstance(ans, Gap) for ref, ans in candidate):
                break
            if current_cost is None:
                current_cost = self.total_cost(current)
            candidate_cost = self.total_cost(candidate)
            if candidate_cost > current_cost:
                break
            self._logger.debug(f"trim padding: cost {current_cost} -> {candidate_cost}")
            current, current_cost = candidate, candidate_cost

        return current


def align(
    reference: Sequence[Union[str, Word]],
    answer: Sequence[Union[str, Word]],
    similarity: Optional[SimilarityProtocol] = None,
) -> AlignedPair:
    """以預設配置對齊兩個單字序列"""
    return WordAligner(similarity=similarity).align(reference, answer)
