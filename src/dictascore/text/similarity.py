"""
單字相似度模組

判斷兩個單字是「拼寫錯誤 (typo)」還是「不同的字」。

規則 (以較長者的字元數為準):
- 編輯距離 0: 相似
- 長度 > 9 且距離 <= 2: 相似
- 長度 > 3 且距離 <= 1: 相似
- 其餘: 不相似

距離預設使用 OSA (Optimal String Alignment)，相鄰字元對調只算一次編輯；
關閉 allow_transpositions 時改用一般 Levenshtein 距離。
"""

from functools import lru_cache

import Levenshtein
from rapidfuzz.distance import OSA


class SimilarityConfig:
    """相似度門檻配置"""

    # (最短長度, 容許距離)：長度大於門檻時套用，由寬到嚴依序比對
    DISTANCE_THRESHOLDS = (
        (9, 2),
        (3, 1),
    )

    # 距離快取大小
    CACHE_SIZE = 4096


@lru_cache(maxsize=SimilarityConfig.CACHE_SIZE)
def _osa_distance(word1: str, word2: str) -> int:
    return OSA.distance(word1, word2)


@lru_cache(maxsize=SimilarityConfig.CACHE_SIZE)
def _levenshtein_distance(word1: str, word2: str) -> int:
    return Levenshtein.distance(word1, word2)


class WordSimilarity:
    """
    單字相似度判斷

    實作 SimilarityProtocol，供對齊器與分類器使用。
    判斷是對稱的：are_similar(a, b) == are_similar(b, a)。

    使用範例:
        >>> similarity = WordSimilarity()
        >>> similarity.are_similar("elephant", "elefant")
        False
        >>> similarity.are_similar("elephant", "elephnat")
        True
    """

    def __init__(self, allow_transpositions: bool = True, thresholds=None):
        """
        Args:
            allow_transpositions: 相鄰字元對調是否只算一次編輯
            thresholds: 自訂 (最短長度, 容許距離) 門檻，預設使用 SimilarityConfig
        """
        self.allow_transpositions = allow_transpositions
        self.thresholds = tuple(thresholds) if thresholds is not None else SimilarityConfig.DISTANCE_THRESHOLDS

    def distance(self, word1: str, word2: str) -> int:
        # 排序後查快取，確保對稱且快取命中率較高
        if word2 < word1:
            word1, word2 = word2, word1
        if self.allow_transpositions:
            return _osa_distance(word1, word2)
        return _levenshtein_distance(word1, word2)

    def are_similar(self, word1: str, word2: str) -> bool:
        if not word1 or not word2:
            return False
        if word1 == word2:
            return True

        length = max(len(word1), len(word2))
        distance = self.distance(word1, word2)

        for min_length, max_distance in self.thresholds:
            if length > min_length and distance <= max_distance:
                return True
        return False

    def __call__(self, word1: str, word2: str) -> bool:
        return self.are_similar(word1, word2)


_default_similarity = WordSimilarity()


def are_similar(word1: str, word2: str) -> bool:
    """使用預設配置判斷兩個單字是否相似"""
    return _default_similarity.are_similar(word1, word2)


def clear_similarity_cache() -> None:
    """清除距離快取"""
    _osa_distance.cache_clear()
    _levenshtein_distance.cache_clear()
