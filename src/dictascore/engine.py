"""
聽寫評分引擎 (DictationEngine)

負責持有共享的分詞器、相似度判斷與對齊器，
並提供工廠方法建立參考句、評分與合併總分。

使用方式:
    from dictascore import DictationEngine, GradingConfig

    engine = DictationEngine(GradingConfig(typo_factor=0.5, mistakes_passing=1))
    sentences = engine.create_sentences(["The cat sat.", "It was late."])
    results = engine.grade_all(sentences, ["The cat sad.", "It was"])
    submission = engine.aggregate(results)
    submission.score, submission.max_score, submission.passed
"""

from typing import Callable, List, Optional, Sequence

from dictascore.alignment.aligner import WordAligner
from dictascore.config import GradingConfig
from dictascore.core.engine_interface import GradingEngine
from dictascore.core.events import GradingEvent, GradingEventHandler
from dictascore.core.protocols.similarity import SimilarityProtocol
from dictascore.grading.scorer import SubmissionResult, aggregate
from dictascore.grading.sentence import Sentence, SentenceResult
from dictascore.grading.solution import SolutionWord, renderable_solution
from dictascore.text.similarity import WordSimilarity
from dictascore.text.tokenizer import DictationTokenizer


class DictationEngine(GradingEngine):
    _engine_name = "dictation"

    def __init__(
        self,
        config: Optional[GradingConfig] = None,
        *,
        similarity: Optional[SimilarityProtocol] = None,
        on_event: Optional[GradingEventHandler] = None,
        verbose: bool = False,
        on_timing: Optional[Callable[[str, float], None]] = None,
    ):
        self._config = config or GradingConfig()
        self._init_logger(
            verbose=verbose or self._config.verbose,
            on_timing=on_timing or self._config.on_timing,
        )

        self._tokenizer = DictationTokenizer()
        self._similarity = similarity or WordSimilarity()
        self._aligner = WordAligner(similarity=self._similarity)
        self._on_event = on_event

        self._logger.info("DictationEngine initialized")

    @property
    def config(self) -> GradingConfig:
        return self._config

    @property
    def tokenizer(self) -> DictationTokenizer:
        return self._tokenizer

    @property
    def similarity(self) -> SimilarityProtocol:
        return self._similarity

    @property
    def aligner(self) -> WordAligner:
        return self._aligner

    def configure_sentence(
        self,
        reference_text: str,
        ignore_punctuation: Optional[bool] = None,
        *,
        index: Optional[int] = None,
    ) -> Sentence:
        if ignore_punctuation is None:
            ignore_punctuation = self._config.ignore_punctuation

        sentence = Sentence(
            reference_text,
            ignore_punctuation,
            index=index,
            tokenizer=self._tokenizer,
            similarity=self._similarity,
            aligner=self._aligner,
        )
        self._logger.debug(f"Configured sentence {index} with {sentence.max_mistakes} reference tokens")
        return sentence

    def create_sentences(self, reference_texts: Sequence[str]) -> List[Sentence]:
        """依序建立多個參考句 (index 從 1 開始)"""
        return [
            self.configure_sentence(text, index=index)
            for index, text in enumerate(reference_texts, start=1)
        ]

    def grade(self, sentence: Sentence, answer_text: str) -> SentenceResult:
        with self._log_timing("DictationEngine.grade"):
            result = sentence.grade(answer_text)

        self._emit({
            "type": "graded",
            "engine": self._engine_name,
            "sentence_index": sentence.index,
            **result.tally.as_dict(),
            "total": result.total,
        })
        return result

    def grade_all(self, sentences: Sequence[Sentence], answers: Sequence[str]) -> List[SentenceResult]:
        if len(sentences) != len(answers):
            raise ValueError(f"Expected {len(sentences)} answers, got {len(answers)}")
        return [self.grade(sentence, answer) for sentence, answer in zip(sentences, answers)]

    def aggregate(self, results: Sequence[SentenceResult]) -> SubmissionResult:
        with self._log_timing("DictationEngine.aggregate"):
            submission = aggregate(
                results,
                typo_factor=self._config.typo_factor,
                mistakes_mastering=self._config.mistakes_mastering,
                mistakes_passing=self._config.mistakes_passing,
            )

        self._emit({
            "type": "aggregated",
            "engine": self._engine_name,
            "score": submission.score,
            "max_score": submission.max_score,
            "passed": submission.passed,
            "mastered": submission.mastered,
        })
        return submission

    def renderable_solution(self, result: SentenceResult) -> List[SolutionWord]:
        return renderable_solution(result, typo_factor=self._config.typo_factor)

    def _emit(self, event: GradingEvent) -> None:
        try:
            if self._on_event is not None:
                self._on_event(event)
        except Exception:
            self._logger.exception("on_event 回呼執行失敗")
