"""
評分模組

- Sentence / SentenceResult: 單句分類與計數
- aggregate / SubmissionResult: 總分與門檻判定
- renderable_solution / SolutionWord: 顯示用解答
"""

from .sentence import Sentence, SentenceResult, classify
from .scorer import SubmissionResult, aggregate, compute_thresholds, within_tolerance
from .solution import SolutionWord, penalty_for, renderable_solution, solution_text

__all__ = [
    "Sentence",
    "SentenceResult",
    "classify",
    "SubmissionResult",
    "aggregate",
    "compute_thresholds",
    "within_tolerance",
    "SolutionWord",
    "renderable_solution",
    "penalty_for",
    "solution_text",
]
