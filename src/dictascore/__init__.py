"""
dictascore - 聽寫作答評分 (Dictation Grader)

核心概念：
- 參考句與作答都切成單字序列（黏著的標點切成獨立 token）
- 以最小成本對齊兩個序列，缺字處補 Gap
- 每一欄分類為 match / typo / wrong / missing / added
- 依分類計算每句錯誤數 (上限為參考句 token 數) 與整份作答的分數、通過/精熟判定

官方入口（穩定 API）：
- `dictascore.DictationEngine`
- `dictascore.GradingConfig`
"""

# =============================================================================
# Engine 層（官方入口）
# =============================================================================
from dictascore.engine import DictationEngine
from dictascore.config import DEFAULT_CONFIG, GradingConfig

# =============================================================================
# 日誌工具
# =============================================================================
from dictascore.utils.logger import enable_debug_logging, enable_timing_logging, get_logger

# =============================================================================
# 核心型別
# =============================================================================
from dictascore.core.types import GAP, AlignedPair, Gap, MistakeTally, MistakeType, Word

# =============================================================================
# 演算法元件（進階用途）
# =============================================================================
from dictascore.alignment.aligner import WordAligner, align
from dictascore.grading.scorer import SubmissionResult, aggregate
from dictascore.grading.sentence import Sentence, SentenceResult, classify
from dictascore.grading.solution import SolutionWord, renderable_solution
from dictascore.text.similarity import WordSimilarity, are_similar
from dictascore.text.tokenizer import DictationTokenizer, tokenize

__all__ = [
    # Engine
    "DictationEngine",
    "GradingConfig",
    "DEFAULT_CONFIG",
    # Logging
    "get_logger",
    "enable_debug_logging",
    "enable_timing_logging",
    # Types
    "GAP",
    "Gap",
    "Word",
    "AlignedPair",
    "MistakeType",
    "MistakeTally",
    # Components (advanced)
    "DictationTokenizer",
    "tokenize",
    "WordSimilarity",
    "are_similar",
    "WordAligner",
    "align",
    "Sentence",
    "SentenceResult",
    "classify",
    "SubmissionResult",
    "aggregate",
    "SolutionWord",
    "renderable_solution",
]

__version__ = "0.1.0"
