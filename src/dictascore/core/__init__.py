"""
核心抽象層

定義資料型別與語言無關的介面。
"""

from .types import (
    GAP,
    AlignedPair,
    Gap,
    MistakeTally,
    MistakeType,
    Token,
    TokenizedText,
    Word,
    token_text,
)
from .tokenizer_interface import Tokenizer
from .protocols.similarity import SimilarityProtocol
from .events import GradingEvent, GradingEventHandler
from .engine_interface import GradingEngine

__all__ = [
    "GAP",
    "Gap",
    "Word",
    "Token",
    "token_text",
    "AlignedPair",
    "MistakeType",
    "MistakeTally",
    "TokenizedText",
    "Tokenizer",
    "SimilarityProtocol",
    "GradingEvent",
    "GradingEventHandler",
    "GradingEngine",
]
