"""
總分計算模組

把所有句子的結果合併成一份作答的分數與通過/精熟判定。

公式:
    max_mistakes     = Σ 各句 max_mistakes
    mistakes_total   = Σ(added + missing + wrong) + typo_factor * Σ typo
    mistakes_capped  = min(mistakes_total, max_mistakes)
    score            = max_mistakes - mistakes_capped
    max_score        = max_mistakes

門檻以「容許錯誤數」設定：
    percentage_mastering = (max - mistakes_mastering) / max
    percentage_passing   = min(percentage_mastering, (max - mistakes_passing) / max)

max_mistakes 為 0 時視為已通過且已精熟，所有比例為 1.0。
"""

import math
from dataclasses import dataclass, field
from typing import Any, Dict, Sequence

from dictascore.core.types import MistakeTally
from dictascore.grading.sentence import SentenceResult
from dictascore.utils.logger import get_logger

_logger = get_logger("scorer")


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


@dataclass
class SubmissionResult:
    """
    整份作答的評分結果

    Attributes:
        tally: 所有句子的計數總和
        max_mistakes: 所有句子 max_mistakes 的總和
        mistakes_total: 加權錯誤數
        mistakes_capped: 加權錯誤數 (上限為 max_mistakes)
        percentage_mastering: 精熟門檻比例
        percentage_passing: 通過門檻比例
        passed: 是否通過
        mastered: 是否精熟
        sentence_totals: 各句計入的錯誤數
    """
    tally: MistakeTally
    max_mistakes: int
    mistakes_total: float
    mistakes_capped: float
    percentage_mastering: float
    percentage_passing: float
    passed: bool
    mastered: bool
    sentence_totals: list = field(default_factory=list)

    @property
    def score(self) -> float:
        return self.max_mistakes - self.mistakes_capped

    @property
    def max_score(self) -> int:
        return self.max_mistakes

    @property
    def score_ratio(self) -> float:
        if self.max_mistakes == 0:
            return 1.0
        return self.score / self.max_mistakes

    @property
    def mastery_percentage(self) -> int:
        """相對於精熟門檻的得分百分比 (0-100)"""
        if self.max_mistakes == 0 or self.percentage_mastering <= 0:
            return 100
        ratio = min(self.percentage_mastering, self.score_ratio)
        return _round_half_up(ratio / self.percentage_mastering * 100)

    def per_type_counts(self) -> Dict[str, int]:
        return self.tally.as_dict()

    def as_dict(self) -> Dict[str, Any]:
        return {
            "score": self.score,
            "maxScore": self.max_score,
            "passed": self.passed,
            "mastered": self.mastered,
            "perTypeCounts": self.per_type_counts(),
            "mistakesTotal": self.mistakes_total,
            "mistakesCapped": self.mistakes_capped,
        }


def compute_thresholds(max_mistakes: int, mistakes_mastering: float, mistakes_passing: float):
    """
    計算精熟/通過門檻比例

    通過門檻被限制在精熟門檻之下（比例不會高於精熟）。

    Returns:
        (percentage_mastering, percentage_passing)
    """
    if max_mistakes == 0:
        return 1.0, 1.0
    percentage_mastering = (max_mistakes - mistakes_mastering) / max_mistakes
    percentage_passing = min(percentage_mastering, (max_mistakes - mistakes_passing) / max_mistakes)
    return percentage_mastering, percentage_passing


def within_tolerance(mistakes_capped: float, max_mistakes: int, percentage: float) -> bool:
    """mistakes_capped 是否在門檻比例所對應的容許錯誤數之內"""
    if max_mistakes == 0:
        return True
    tolerance = max_mistakes - _round_half_up(percentage * max_mistakes)
    return mistakes_capped <= tolerance


def aggregate(
    results: Sequence[SentenceResult],
    typo_factor: float = 1.0,
    mistakes_mastering: float = 0,
    mistakes_passing: float = 0,
) -> SubmissionResult:
    """
    合併各句結果

    Args:
        results: 各句的 SentenceResult
        typo_factor: typo 的權重 (0 = 不扣分, 1 = 與錯字相同)
        mistakes_mastering: 精熟容許錯誤數
        mistakes_passing: 通過容許錯誤數

    Returns:
        SubmissionResult
    """
    tally = MistakeTally()
    for result in results:
        tally = tally + result.tally

    max_mistakes = sum(result.max_mistakes for result in results)
    mistakes_total = tally.weighted(typo_factor)
    mistakes_capped = min(mistakes_total, max_mistakes)

    percentage_mastering, percentage_passing = compute_thresholds(
        max_mistakes, mistakes_mastering, mistakes_passing
    )

    submission = SubmissionResult(
        tally=tally,
        max_mistakes=max_mistakes,
        mistakes_total=mistakes_total,
        mistakes_capped=mistakes_capped,
        percentage_mastering=percentage_mastering,
        percentage_passing=percentage_passing,
        passed=within_tolerance(mistakes_capped, max_mistakes, percentage_passing),
        mastered=within_tolerance(mistakes_capped, max_mistakes, percentage_mastering),
        sentence_totals=[result.total for result in results],
    )

    _logger.debug(
        f"aggregate: {len(results)} sentences, mistakes={mistakes_total} "
        f"capped={mistakes_capped}/{max_mistakes} passed={submission.passed} mastered={submission.mastered}"
    )
    return submission
