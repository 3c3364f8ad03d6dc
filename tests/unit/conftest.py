"""
Unit test fixtures.

All unit tests should be:
- Fast (< 100ms)
- Isolated (no external dependencies)
- Deterministic (same result every time)
"""

import pytest

from models import Corpus
from explorer import CorpusModel, SearchIndex


@pytest.fixture
def corpus(corpus_data):
    return Corpus.model_validate(corpus_data)


@pytest.fixture
def model(corpus):
    return CorpusModel(corpus)


@pytest.fixture
def index(model):
    return SearchIndex.from_model(model)


@pytest.fixture
def empty_model():
    return CorpusModel(Corpus())
