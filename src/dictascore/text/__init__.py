"""
文字處理模組

- DictationTokenizer: 分詞與標點邊界標記
- WordSimilarity: 單字拼寫錯誤判斷
"""

from .similarity import SimilarityConfig, WordSimilarity, are_similar, clear_similarity_cache
from .tokenizer import (
    BOUNDARY_MARKER,
    DictationTokenizer,
    add_boundary_markers,
    compute_spaces,
    remove_boundary_markers,
    strip_punctuation,
    tokenize,
)

__all__ = [
    "DictationTokenizer",
    "tokenize",
    "strip_punctuation",
    "add_boundary_markers",
    "remove_boundary_markers",
    "compute_spaces",
    "BOUNDARY_MARKER",
    "WordSimilarity",
    "SimilarityConfig",
    "are_similar",
    "clear_similarity_cache",
]
