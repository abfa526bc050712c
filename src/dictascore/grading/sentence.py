"""
單句評分模組

Sentence 在建立時固定參考句與 max_mistakes，之後可重複呼叫 grade()：
每次都重新分詞、對齊、分類，不保留任何跨呼叫的狀態。
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from dictascore.alignment.aligner import WordAligner
from dictascore.core.protocols.similarity import SimilarityProtocol
from dictascore.core.types import AlignedPair, Gap, MistakeTally, MistakeType, Token, Word, token_text
from dictascore.text.similarity import WordSimilarity
from dictascore.text.tokenizer import DictationTokenizer, compute_spaces, remove_boundary_markers, strip_punctuation
from dictascore.utils.logger import get_logger


def classify(solution: Token, answer: Token, similarity: SimilarityProtocol) -> MistakeType:
    """
    判定單一對齊欄位的類型

    - 參考側為 Gap: ADDED
    - 作答側為 Gap: MISSING
    - 兩側相同: MATCH
    - 兩側相似: TYPO
    - 其餘: WRONG
    """
    if isinstance(solution, Gap):
        if isinstance(answer, Gap):
            raise ValueError("Aligned column cannot have gaps on both sides")
        return MistakeType.ADDED
    if isinstance(answer, Gap):
        return MistakeType.MISSING
    if solution.text == answer.text:
        return MistakeType.MATCH
    if similarity.are_similar(solution.text, answer.text):
        return MistakeType.TYPO
    return MistakeType.WRONG


@dataclass
class SentenceResult:
    """
    單句評分結果

    Attributes:
        aligned: 對齊結果 (供顯示用)
        types: 每一欄的分類
        tally: 各類型計數
        max_mistakes: 參考句的 token 數
        spaces: 每一欄後面是否顯示空白
    """
    aligned: AlignedPair
    types: List[MistakeType]
    tally: MistakeTally
    max_mistakes: int
    spaces: List[bool] = field(default_factory=list)

    @property
    def total(self) -> int:
        """本句計入的錯誤數，不超過 max_mistakes"""
        return min(self.tally.mistakes, self.max_mistakes)

    def columns(self) -> List[Tuple[Token, Token, MistakeType]]:
        return [(ref, ans, kind) for (ref, ans), kind in zip(self.aligned, self.types)]

    def as_dict(self) -> Dict[str, Any]:
        """輸出與練習介面相容的結構 (score / words / spaces)"""
        score = self.tally.as_dict()
        score["total"] = self.total
        return {
            "score": score,
            "words": [
                {
                    "solution": remove_boundary_markers(token_text(ref)),
                    "answer": remove_boundary_markers(token_text(ans)),
                    "type": kind.value,
                }
                for ref, ans, kind in self.columns()
            ],
            "spaces": list(self.spaces),
        }


class Sentence:
    """
    參考句 (Sentence Handle)

    建立後 max_mistakes 固定，與任何作答無關。

    使用範例:
        >>> sentence = Sentence("The cat sat.")
        >>> sentence.max_mistakes
        4
        >>> sentence.grade("The cat sat.").total
        0
    """

    def __init__(
        self,
        reference_text: str,
        ignore_punctuation: bool = False,
        *,
        index: Optional[int] = None,
        tokenizer: Optional[DictationTokenizer] = None,
        similarity: Optional[SimilarityProtocol] = None,
        aligner: Optional[WordAligner] = None,
    ):
        if not isinstance(reference_text, str):
            raise TypeError(f"reference_text must be a str, got {type(reference_text).__name__}")

        self.index = index
        self.ignore_punctuation = ignore_punctuation
        self._tokenizer = tokenizer or DictationTokenizer()
        self._similarity = similarity or WordSimilarity()
        self._aligner = aligner or WordAligner(similarity=self._similarity)
        self._logger = get_logger("sentence")

        self._correct_text = strip_punctuation(reference_text) if ignore_punctuation else reference_text
        self._reference_words: Tuple[Word, ...] = tuple(
            self._tokenizer.tokenize(self._correct_text).words
        )

    @property
    def correct_text(self) -> str:
        """參考文字 (忽略標點時為去除標點後的版本)"""
        return self._correct_text

    @property
    def reference_words(self) -> Tuple[Word, ...]:
        return self._reference_words

    @property
    def max_mistakes(self) -> int:
        return len(self._reference_words)

    @staticmethod
    def is_answer_given(answer_text: str) -> bool:
        return bool(answer_text)

    def grade(self, answer_text: str) -> SentenceResult:
        """
        評分一份作答

        Args:
            answer_text: 學習者輸入的文字 (可為空字串)

        Returns:
            SentenceResult: 對齊、分類與計數
        """
        if not isinstance(answer_text, str):
            raise TypeError(f"answer_text must be a str, got {type(answer_text).__name__}")

        answer_words = self._tokenizer.tokenize(answer_text, self.ignore_punctuation).words
        aligned = self._aligner.align(self._reference_words, answer_words)

        tally = MistakeTally()
        types = []
        for solution, answer in aligned:
            kind = classify(solution, answer, self._similarity)
            tally.count(kind)
            types.append(kind)

        # 參考側為 Gap 時改看作答側的標記
        spaces = compute_spaces([
            token_text(ref) if isinstance(ref, Word) else token_text(ans)
            for ref, ans in aligned
        ])

        result = SentenceResult(
            aligned=aligned,
            types=types,
            tally=tally,
            max_mistakes=self.max_mistakes,
            spaces=spaces,
        )
        self._logger.debug(f"sentence {self.index}: {tally.as_dict()} total={result.total}")
        return result

    def __repr__(self) -> str:
        return f"Sentence(index={self.index!r}, max_mistakes={self.max_mistakes})"
