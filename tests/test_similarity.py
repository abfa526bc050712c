"""
單字相似度測試
"""
import pytest

from dictascore.core.protocols.similarity import SimilarityProtocol
from dictascore.text.similarity import WordSimilarity, are_similar, clear_similarity_cache


class TestWordSimilarity:
    """拼寫錯誤判定測試"""

    def test_identical(self):
        assert are_similar("cat", "cat")

    def test_empty_is_never_similar(self):
        assert not are_similar("", "cat")
        assert not are_similar("cat", "")

    def test_short_words_need_exact_match(self):
        """測試 3 個字元以下必須完全相同"""
        assert not are_similar("cat", "cot")

    def test_single_edit_on_medium_word(self):
        """測試長度 > 3 容許一次編輯"""
        assert are_similar("house", "horse")
        assert are_similar("house", "hose")

    def test_two_edits_on_medium_word(self):
        """測試長度 <= 9 不容許兩次編輯"""
        assert not are_similar("elephant", "elefant")

    def test_two_edits_on_long_word(self):
        """測試長度 > 9 容許兩次編輯"""
        assert are_similar("information", "informatoin")
        assert are_similar("information", "infromatoin")
        assert not are_similar("information", "infrmtn")

    def test_transposition_counts_as_one_edit(self):
        """測試相鄰對調只算一次編輯"""
        assert are_similar("elephant", "elephnat")

    def test_transposition_disabled(self):
        """測試關閉對調時使用一般 Levenshtein 距離"""
        similarity = WordSimilarity(allow_transpositions=False)
        assert not similarity.are_similar("elephant", "elephnat")
        assert similarity.are_similar("house", "horse")

    def test_custom_thresholds(self):
        """測試自訂門檻"""
        similarity = WordSimilarity(thresholds=[(0, 1)])
        assert similarity.are_similar("cat", "cot")

    def test_callable(self):
        assert WordSimilarity()("house", "horse")

    def test_implements_protocol(self):
        assert isinstance(WordSimilarity(), SimilarityProtocol)

    @pytest.mark.parametrize(
        "word1, word2",
        [
            ("house", "horse"),
            ("elephant", "elephnat"),
            ("cat", "dog"),
            ("information", "infromatoin"),
            ("abc", "abcd"),
            ("Word", "word"),
        ],
    )
    def test_symmetry(self, word1, word2):
        """測試判定對稱"""
        clear_similarity_cache()
        assert are_similar(word1, word2) == are_similar(word2, word1)
        for allow in (True, False):
            similarity = WordSimilarity(allow_transpositions=allow)
            assert similarity.are_similar(word1, word2) == similarity.are_similar(word2, word1)
