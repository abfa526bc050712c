"""
單字對齊測試
"""
import pytest

from dictascore.alignment.aligner import AlignmentConfig, WordAligner, align
from dictascore.core.types import GAP, AlignedPair, Gap, Word

from conftest import PairSimilarity


def _texts(tokens):
    return [t.text if isinstance(t, Word) else None for t in tokens]


class TestAlignBasics:
    """對齊基本情境測試"""

    def test_identity(self):
        """測試相同序列全部對上"""
        words = ["the", "quick", "brown", "fox"]
        pair = align(words, words)
        assert _texts(pair.reference) == words
        assert _texts(pair.answer) == words

    def test_substitution(self):
        """測試替換維持同一欄"""
        pair = align(["the", "cat", "sat"], ["the", "dog", "sat"])
        assert _texts(pair.reference) == ["the", "cat", "sat"]
        assert _texts(pair.answer) == ["the", "dog", "sat"]

    def test_insertion(self):
        """測試多寫的單字在參考側補 Gap"""
        pair = align(["the", "cat", "sat"], ["the", "big", "cat", "sat"])
        assert _texts(pair.reference) == ["the", None, "cat", "sat"]
        assert _texts(pair.answer) == ["the", "big", "cat", "sat"]

    def test_deletion(self):
        """測試漏寫的單字在作答側補 Gap"""
        pair = align(["the", "big", "cat"], ["the", "cat"])
        assert _texts(pair.reference) == ["the", "big", "cat"]
        assert _texts(pair.answer) == ["the", None, "cat"]

    def test_empty_answer(self):
        """測試空作答：每個參考字各自一欄 missing"""
        pair = align(["the", "cat", "sat"], [])
        assert len(pair) == 3
        assert all(isinstance(t, Gap) for t in pair.answer)

    def test_empty_reference(self):
        """測試空參考句：每個作答字各自一欄 added"""
        pair = align([], ["extra", "word"])
        assert len(pair) == 2
        assert all(isinstance(t, Gap) for t in pair.reference)

    def test_both_empty(self):
        assert len(align([], [])) == 0

    def test_accepts_word_tokens(self):
        """測試可直接傳入 Word"""
        pair = align([Word("a"), Word("b")], [Word("a")])
        assert _texts(pair.answer) == ["a", None]

    def test_rejects_other_tokens(self):
        with pytest.raises(TypeError):
            align([1, 2], ["a"])


class TestAlignCosts:
    """成本與平手規則測試"""

    def test_typo_preferred_over_gaps(self):
        """測試拼寫錯誤留在同一欄而非拆成一漏一多"""
        pair = align(["house"], ["horse"])
        assert _texts(pair.reference) == ["house"]
        assert _texts(pair.answer) == ["horse"]

    def test_typo_preferred_over_substitution(self):
        """測試相似字優先配對"""
        similarity = PairSimilarity(("elephant", "elefant"))
        pair = align(["big", "elephant"], ["elefant"], similarity=similarity)
        assert _texts(pair.answer) == [None, "elefant"]

    def test_substitutions_preferred_over_gap_pairs(self):
        """測試成本相同時偏好替換 (Gap 較少)"""
        pair = align(["a", "b"], ["b", "c"])
        assert not any(isinstance(t, Gap) for t in pair.reference + pair.answer)

    def test_repeated_word_tie_keeps_forward_run(self):
        """測試重複單字平手時保留正向結果"""
        pair = align(["a", "b", "a"], ["a"])
        assert _texts(pair.answer) == [None, None, "a"]

    def test_total_cost(self):
        aligner = WordAligner()
        pair = aligner.align(["the", "cat", "sat"], ["the", "big", "cat"])
        assert aligner.total_cost(pair) == 2 * AlignmentConfig.GAP_COST

    def test_minimal_cost(self):
        """測試結果不比全部替換/全部補位更貴"""
        aligner = WordAligner()
        reference = ["one", "two", "three", "four"]
        answer = ["two", "three", "five"]
        pair = aligner.align(reference, answer)
        all_gaps = (len(reference) + len(answer)) * AlignmentConfig.GAP_COST
        assert aligner.total_cost(pair) <= all_gaps
        assert aligner.total_cost(pair) == 2 * AlignmentConfig.GAP_COST


class TestAlignDirection:
    """方向偏差修正測試"""

    def test_backward_run_wins_when_it_matches_more(self, monkeypatch):
        """測試反向結果 match 較多時採用反向"""
        aligner = WordAligner()
        worse = AlignedPair(reference=(Word("x"), Word("y")), answer=(Word("q"), Word("r")))
        better = AlignedPair(reference=(Word("y"), Word("x")), answer=(Word("y"), Word("q")))
        runs = iter([worse, better])
        monkeypatch.setattr(aligner, "_align_once", lambda solution, answer: next(runs))

        pair = aligner.align(["x", "y"], ["q", "y"])
        assert _texts(pair.reference) == ["x", "y"]
        assert _texts(pair.answer) == ["q", "y"]

    def test_forward_kept_on_tie(self, monkeypatch):
        aligner = WordAligner()
        forward = AlignedPair(reference=(Word("a"),), answer=(Word("a"),))
        backward = AlignedPair(reference=(Word("a"),), answer=(Word("a"),))
        runs = iter([forward, backward])
        monkeypatch.setattr(aligner, "_align_once", lambda solution, answer: next(runs))
        assert aligner.align(["a"], ["a"]) is forward


class TestTrimPadding:
    """首尾補位修剪測試"""

    def test_trim_when_cost_does_not_grow(self):
        """測試開頭多寫 + 結尾漏寫合併為替換"""
        aligner = WordAligner()
        padded = AlignedPair(
            reference=(GAP, Word("a"), Word("b")),
            answer=(Word("x"), Word("a"), GAP),
        )
        trimmed = aligner._trim_padding(padded)
        assert _texts(trimmed.reference) == ["a", "b"]
        assert _texts(trimmed.answer) == ["x", "a"]

    def test_keep_when_trim_costs_more(self):
        """測試合併會增加成本時保留原對齊"""
        aligner = WordAligner()
        padded = AlignedPair(
            reference=(GAP, Word("a"), Word("b"), Word("c")),
            answer=(Word("x"), Word("a"), Word("b"), GAP),
        )
        assert aligner._trim_padding(padded) == padded

    def test_no_trim_without_leading_gap(self):
        aligner = WordAligner()
        pair = AlignedPair(reference=(Word("a"),), answer=(GAP,))
        assert aligner._trim_padding(pair) == pair


@pytest.mark.parametrize(
    "reference, answer",
    [
        (["the", "cat", "sat"], ["the", "dog", "sat"]),
        (["a", "b", "a", "b"], ["b", "a"]),
        (["to", "be", "or", "not", "to", "be"], ["to", "be", "to", "be", "or"]),
        (["one"], ["two", "three", "four", "one"]),
        (["house", "mouse", "horse"], ["horse", "house"]),
        ([], ["x"]),
        (["x"], []),
    ],
)
def test_order_preserved(reference, answer):
    """測試去掉 Gap 後兩側都等於原序列，且沒有空欄"""
    pair = align(reference, answer)
    assert pair.reference_words() == reference
    assert pair.answer_words() == answer
    assert len(pair.reference) == len(pair.answer)
    assert not any(isinstance(ref, Gap) and isinstance(ans, Gap) for ref, ans in pair)
