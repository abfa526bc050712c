"""
評分引擎抽象基類

定義評分引擎必須實作的介面。
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Callable, Optional, Sequence

from dictascore.utils.logger import TimingContext, get_logger, setup_logger

if TYPE_CHECKING:
    from dictascore.grading.scorer import SubmissionResult
    from dictascore.grading.sentence import Sentence, SentenceResult


class GradingEngine(ABC):
    """
    評分引擎抽象基類 (Abstract Base Class)

    職責:
    - 持有共享的分詞器、相似度判斷與對齊器
    - 提供工廠方法建立參考句 (Sentence)
    - 管理配置選項
    - 提供日誌與計時功能

    生命週期:
    - Engine 應在應用程式啟動時建立一次
    - 之後透過 configure_sentence() 建立多個參考句
    """

    _engine_name: str = "base"

    def _init_logger(
        self,
        verbose: bool = False,
        on_timing: Optional[Callable[[str, float], None]] = None,
    ) -> None:
        self._verbose = verbose
        self._timing_callback = on_timing

        if verbose:
            setup_logger(level=logging.DEBUG)

        self._logger = get_logger(f"engine.{self._engine_name}")

    def _log_timing(self, operation: str) -> TimingContext:
        return TimingContext(
            operation=operation,
            logger=self._logger,
            level=logging.DEBUG,
            callback=self._timing_callback,
        )

    @abstractmethod
    def configure_sentence(self, reference_text: str, ignore_punctuation: Optional[bool] = None) -> "Sentence":
        pass

    @abstractmethod
    def grade(self, sentence: "Sentence", answer_text: str) -> "SentenceResult":
        pass

    @abstractmethod
    def aggregate(self, results: Sequence["SentenceResult"]) -> "SubmissionResult":
        pass
