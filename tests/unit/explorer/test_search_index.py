"""Unit tests for SearchIndex over a corpus."""

import re

import pytest

from explorer import FuzzyMatcher, SearchIndex

HALVING_QUESTIONS = {
    "What is the block reward halving?",
    "What happens after the last halving?",
    "Do fees rise after a halving?",
}


class TestQuery:
    """Test ranked corpus queries."""

    def test_indexes_every_item(self, model, index):
        assert len(index) == len(model.all_items())

    def test_exact_word(self, index):
        assert {i.question for i in index.query("halving")} == HALVING_QUESTIONS

    def test_typo_tolerant(self, index):
        assert {i.question for i in index.query("halvng")} == HALVING_QUESTIONS

    def test_word_order(self, index):
        results = index.query("reward block")
        assert results[0].question == "What is the block reward halving?"

    def test_best_match_first(self, index):
        assert index.query("mining pool")[0].question == "What is a mining pool?"

    def test_searches_answers(self, index):
        results = index.query("ASIC machines")
        assert [i.question for i in results] == ["What hardware is used for mining?"]

    def test_ties_in_corpus_order(self, index):
        results = index.query("wallet feature")
        assert [i.category_name for i in results] == ["Wallets"] * 12
        assert [i.position for i in results] == list(range(12))

    def test_scores_descending(self, index):
        scores = [h.score for h in index.hits("halving block")]
        assert scores == sorted(scores, reverse=True)

    def test_no_match(self, index):
        assert index.query("zebra crossing") == []


class TestBlankQuery:
    """Blank text is 'no search', never 'match everything'."""

    @pytest.mark.parametrize("text", ["", "   ", "\t\n"])
    def test_blank_returns_nothing(self, index, text):
        assert index.query(text) == []

    def test_blank_never_reaches_matcher(self, model):
        calls = []

        class CountingMatcher(FuzzyMatcher):
            def score_text(self, query, text):
                calls.append(query)
                return super().score_text(query, text)

        index = SearchIndex.from_model(model, CountingMatcher())
        index.query("   ")
        assert calls == []


class TestConfiguration:
    """Test matcher settings flow through."""

    def test_stricter_threshold_narrows(self, model):
        loose = SearchIndex.from_model(model, FuzzyMatcher(threshold=60))
        strict = SearchIndex.from_model(model, FuzzyMatcher(threshold=100))
        assert len(strict.query("halvng")) <= len(loose.query("halvng"))
        assert strict.query("halvng") == []

    def test_empty_corpus(self, empty_model):
        assert SearchIndex.from_model(empty_model).query("halving") == []


class TestShortWords:
    """Common short words stay narrow."""

    def test_two_letter_word(self, index):
        assert index.query("is") == []

    def test_three_letter_word_needs_whole_word(self, index, model):
        results = index.query("the")
        assert len(results) < len(model)
        for item in results:
            words = re.findall(r"\w+", f"{item.question} {item.answer}".lower())
            assert "the" in words
        questions = {i.question for i in results}
        assert "What is a mining pool?" not in questions
        assert "How long does a confirmation take?" not in questions

    def test_longer_word_unaffected(self, index):
        assert {i.question for i in index.query("halving")} == HALVING_QUESTIONS
