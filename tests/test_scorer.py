"""
總分計算測試
"""
import pytest

from dictascore.grading.scorer import aggregate, compute_thresholds, within_tolerance
from dictascore.grading.sentence import Sentence

TEN_WORDS = "a b c d e f g h i j"


def _grade(reference, answer, **kwargs):
    return Sentence(reference, **kwargs).grade(answer)


class TestAggregate:
    """合併計分測試"""

    def test_perfect_submission(self):
        results = [_grade("The cat sat.", "The cat sat."), _grade("It was late", "It was late")]
        submission = aggregate(results)
        assert submission.max_mistakes == 7
        assert submission.score == submission.max_score == 7
        assert submission.mistakes_total == 0
        assert submission.passed
        assert submission.mastered

    def test_counts_are_summed(self):
        results = [_grade("the cat sat", "the dog sat"), _grade("one two", "one two three")]
        submission = aggregate(results)
        assert submission.per_type_counts() == {"added": 1, "missing": 0, "typo": 0, "wrong": 1, "match": 4}
        assert submission.mistakes_total == 2
        assert submission.score == 3
        assert submission.sentence_totals == [1, 1]

    def test_typo_free_with_zero_factor(self, elephant_similarity):
        """測試 typo_factor = 0 時只有 typo 的作答拿滿分"""
        result = _grade("elephant walks", "elefant walks", similarity=elephant_similarity)
        assert result.tally.typo == 1
        submission = aggregate([result], typo_factor=0)
        assert submission.score == submission.max_score

    def test_typo_counts_as_wrong_with_full_factor(self, elephant_similarity):
        """測試 typo_factor = 1 時 typo 與錯字同分"""
        typo = _grade("elephant walks", "elefant walks", similarity=elephant_similarity)
        wrong = _grade("elephant walks", "zebra walks", similarity=elephant_similarity)
        assert aggregate([typo], typo_factor=1).score == aggregate([wrong], typo_factor=1).score == 1

    def test_half_typo_factor(self, elephant_similarity):
        result = _grade("elephant walks", "elefant walks", similarity=elephant_similarity)
        submission = aggregate([result], typo_factor=0.5)
        assert submission.mistakes_total == pytest.approx(0.5)
        assert submission.score == pytest.approx(1.5)

    def test_mistakes_capped(self):
        """測試總錯誤數不超過 max_mistakes"""
        submission = aggregate([_grade("a", "x y z")])
        assert submission.mistakes_total == 3
        assert submission.mistakes_capped == 1
        assert submission.score == 0

    def test_pass_without_mastery(self):
        """測試通過但未精熟"""
        result = _grade(TEN_WORDS, "x x x d e f g h i j")
        assert result.tally.wrong == 3
        submission = aggregate([result], mistakes_mastering=2, mistakes_passing=4)
        assert submission.passed
        assert not submission.mastered
        assert submission.score_ratio == pytest.approx(0.7)

    def test_fail(self):
        result = _grade(TEN_WORDS, "x x x x x f g h i j")
        submission = aggregate([result], mistakes_mastering=2, mistakes_passing=4)
        assert not submission.passed
        assert not submission.mastered

    def test_zero_tolerance_requires_perfect(self):
        assert not aggregate([_grade("the cat", "the cap")]).passed
        assert aggregate([_grade("the cat", "the cat")]).mastered

    def test_empty_submission(self):
        """測試沒有任何參考 token 時視為通過與精熟"""
        submission = aggregate([])
        assert submission.max_mistakes == 0
        assert submission.passed
        assert submission.mastered
        assert submission.score_ratio == 1.0
        assert submission.mastery_percentage == 100
        assert submission.percentage_mastering == submission.percentage_passing == 1.0

    def test_empty_reference_sentence(self):
        submission = aggregate([_grade("", "extra word")])
        assert submission.tally.added == 2
        assert submission.mistakes_capped == 0
        assert submission.score == 0
        assert submission.passed

    def test_mastery_percentage(self):
        """測試相對於精熟門檻的百分比"""
        result = _grade("a b c d", "a b c x")
        assert aggregate([result]).mastery_percentage == 75
        assert aggregate([result], mistakes_mastering=2).mastery_percentage == 100

    def test_as_dict(self):
        submission = aggregate([_grade("the cat", "the cat")])
        data = submission.as_dict()
        assert data["score"] == 2
        assert data["maxScore"] == 2
        assert data["passed"] is True
        assert data["perTypeCounts"]["match"] == 2


class TestThresholds:
    """門檻比例測試"""

    def test_mastering_and_passing(self):
        assert compute_thresholds(10, 2, 5) == (pytest.approx(0.8), pytest.approx(0.5))

    @pytest.mark.parametrize("mastering, passing", [(5, 2), (3, 0), (1, 1)])
    def test_passing_clamped_to_mastering(self, mastering, passing):
        """測試通過門檻比例不會高於精熟門檻"""
        percentage_mastering, percentage_passing = compute_thresholds(10, mastering, passing)
        assert percentage_passing == percentage_mastering

    @pytest.mark.parametrize("mastering, passing", [(0, 1), (2, 5), (0, 10)])
    def test_passing_never_above_mastering(self, mastering, passing):
        percentage_mastering, percentage_passing = compute_thresholds(10, mastering, passing)
        assert percentage_passing <= percentage_mastering

    def test_zero_max_mistakes(self):
        assert compute_thresholds(0, 3, 5) == (1.0, 1.0)

    def test_within_tolerance(self):
        assert within_tolerance(2, 10, 0.8)
        assert not within_tolerance(2.5, 10, 0.8)
        assert within_tolerance(5, 0, 0.0)

    def test_tolerance_above_max_always_passes(self):
        submission = aggregate([_grade("a b", "x y")], mistakes_passing=5)
        assert submission.passed
