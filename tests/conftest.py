"""
共用測試工具
"""

import pytest

from dictascore.text.similarity import WordSimilarity


class PairSimilarity:
    """
    測試用相似度判斷：
    - 只有明確列出的單字組合視為相似 (對稱)
    - 讓 typo 判定完全可控，不受實際距離門檻影響
    """

    def __init__(self, *pairs):
        self._pairs = {frozenset(pair) for pair in pairs}

    def are_similar(self, word1: str, word2: str) -> bool:
        return word1 == word2 or frozenset((word1, word2)) in self._pairs


class CountingSimilarity(WordSimilarity):
    """記錄 are_similar 呼叫次數"""

    def __init__(self):
        super().__init__()
        self.calls = 0

    def are_similar(self, word1: str, word2: str) -> bool:
        self.calls += 1
        return super().are_similar(word1, word2)


@pytest.fixture
def elephant_similarity():
    return PairSimilarity(("elephant", "elefant"))
