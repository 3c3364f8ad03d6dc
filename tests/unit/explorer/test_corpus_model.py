"""Unit tests for CorpusModel aggregation."""

import pytest

from models import Corpus
from explorer import CorpusModel


class TestUniqueNames:
    """Test category name normalization."""

    def test_first_occurrence_order(self, model):
        assert model.unique_category_names() == ["Intro", "Mining", "Wallets", "Transactions"]

    def test_no_duplicates(self, model):
        names = model.unique_category_names()
        assert len(names) == len(set(names))

    def test_stable(self, model):
        assert model.unique_category_names() == model.unique_category_names()

    def test_returns_copy(self, model):
        model.unique_category_names().append("Injected")
        assert "Injected" not in model.unique_category_names()


class TestCounts:
    """Test aggregated counts."""

    def test_sums_across_sources(self, model):
        assert model.count_for_category_name("Mining") == 7

    def test_single_source(self, model):
        assert model.count_for_category_name("Wallets") == 12

    def test_unknown_name_is_zero(self, model):
        assert model.count_for_category_name("Nope") == 0

    def test_counts_sum_to_all_items(self, model):
        total = sum(model.count_for_category_name(n) for n in model.unique_category_names())
        assert total == len(model.all_items())

    def test_total_count_verbatim(self, model):
        assert model.total_count == 999

    def test_empty_corpus(self, empty_model):
        assert empty_model.unique_category_names() == []
        assert empty_model.all_items() == []
        assert empty_model.count_for_category_name("Mining") == 0
        assert empty_model.questions_for_category_name("Mining") == []


class TestQuestions:
    """Test flattened question sequences."""

    def test_aggregated_order(self, model):
        items = model.questions_for_category_name("Mining")
        assert len(items) == 7
        assert [i.category_source for i in items] == ["A"] * 3 + ["B"] * 4
        assert items[0].question == "What is the block reward halving?"
        assert items[3].question == "What hardware is used for mining?"

    def test_positions_are_aggregated(self, model):
        items = model.questions_for_category_name("Mining")
        assert [i.position for i in items] == list(range(7))
        assert items[4].key == "Mining-4"

    def test_unknown_name_empty(self, model):
        assert model.questions_for_category_name("Nope") == []

    def test_all_items_follow_record_order(self, model):
        items = model.all_items()
        sources = [i.category_source for i in items]
        # Mining/A, then Wallets, then Mining/B
        assert sources.index("A") < sources.index("forum") < sources.index("B")
        assert items[0].category_name == "Intro"

    def test_all_items_share_identity_with_category_items(self, model):
        by_key = {i.key: i for i in model.all_items()}
        for item in model.questions_for_category_name("Mining"):
            assert by_key[item.key] == item

    def test_duplicate_question_text_allowed(self):
        corpus = Corpus.model_validate({"categories": [
            {"name": "A", "source": "x", "faqs": [{"question": "Same?", "answer": "1"}]},
            {"name": "B", "source": "y", "faqs": [{"question": "Same?", "answer": "2"}]},
        ]})
        items = CorpusModel(corpus).all_items()
        assert len(items) == 2
        assert items[0].key != items[1].key


class TestCategoryInfos:
    """Test picker rows."""

    def test_infos(self, model):
        infos = {i.name: i for i in model.category_infos()}
        assert infos["Mining"].count == 7
        assert infos["Mining"].sources == ("A", "B")
        assert list(infos) == model.unique_category_names()
