"""
Similarity Protocol

定義單字相似度判斷的最小介面（word, word -> bool）。
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class SimilarityProtocol(Protocol):
    def are_similar(self, word1: str, word2: str) -> bool:
        """判斷兩個單字是否只差拼寫錯誤"""
        ...
