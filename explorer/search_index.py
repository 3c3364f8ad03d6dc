"""
Search index over every question and answer of one corpus.
"""

import logging
from typing import Optional

from models import SearchableItem
from .corpus_model import CorpusModel
from .matcher import FuzzyMatcher, SearchHit

logger = logging.getLogger(__name__)

SEARCH_KEYS = ("question", "answer")


class SearchIndex:
    """
    Built once per corpus load; never updated.

    A reload builds a new SearchIndex from the new CorpusModel.
    """

    def __init__(self, items: list[SearchableItem], matcher: Optional[FuzzyMatcher] = None):
        self.matcher = matcher or FuzzyMatcher()
        self._handle = self.matcher.index(items, SEARCH_KEYS)
        logger.debug("Search index built over %d items", len(self._handle))

    @classmethod
    def from_model(cls, model: CorpusModel, matcher: Optional[FuzzyMatcher] = None) -> "SearchIndex":
        return cls(model.all_items(), matcher)

    def __len__(self) -> int:
        return len(self._handle)

    def hits(self, text: str) -> list[SearchHit[SearchableItem]]:
        """Scored hits, best first. Blank text is not a search."""
        if not text or not text.strip():
            return []
        return self._handle.search(text.strip())

    def query(self, text: str) -> list[SearchableItem]:
        """Matching items, best first. Blank text matches nothing."""
        return [hit.item for hit in self.hits(text)]
