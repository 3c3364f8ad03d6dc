"""
Fuzzy matcher - scored approximate search over object fields.

Thin layer over rapidfuzz with the contract the explorer relies on:
    handle = FuzzyMatcher(...).index(items, keys)
    handle.search(text) -> [SearchHit(item, score, index), ...]  best first

Scoring for one field (0-100):
- phrase: best partial alignment of the whole query inside the field
- words:  weakest of the per-word partial alignments, so every word must
          appear somewhere, in any order
Words shorter than `whole_word_chars` are not aligned fuzzily; they score 100
only when they are a whole word of the field, and 0 otherwise.
The field score is the better of the two; an item scores its best field.
"""

from dataclasses import dataclass
from typing import Any, Generic, Sequence, TypeVar

from rapidfuzz import fuzz, utils

T = TypeVar("T")


@dataclass(frozen=True)
class SearchHit(Generic[T]):
    """One match: the item, its score and its position in the indexed list."""
    item: T
    score: float
    index: int


class FuzzyMatcher:
    """
    Matcher configuration.

    threshold:        minimum score (0-100) for a hit; higher = narrower
    ignore_location:  when False, matches far from the start of a field are
                      penalised by offset / distance * 100
    distance:         characters over which the location penalty reaches 100
    min_match_chars:  queries (and query words) shorter than this are ignored
    whole_word_chars: query words shorter than this must match a whole word
    """

    def __init__(
        self,
        threshold: float = 80,
        ignore_location: bool = True,
        distance: int = 100,
        min_match_chars: int = 3,
        whole_word_chars: int = 4,
    ):
        self.threshold = threshold
        self.ignore_location = ignore_location
        self.distance = max(1, distance)
        self.min_match_chars = max(1, min_match_chars)
        self.whole_word_chars = whole_word_chars

    def index(self, items: Sequence[T], keys: Sequence[str]) -> "FuzzyHandle[T]":
        return FuzzyHandle(items, keys, self)

    def score_text(self, query: str, text: str) -> float:
        """Score an already-processed query against an already-processed field."""
        if not query or not text:
            return 0.0

        phrase = self._phrase_score(query, text)
        words = [w for w in query.split() if len(w) >= self.min_match_chars]
        if len(words) > 1:
            return max(phrase, min(self._phrase_score(w, text) for w in words))
        return phrase

    def _phrase_score(self, query: str, text: str) -> float:
        if len(query) < self.whole_word_chars:
            return 100.0 if query in text.split() else 0.0
        if len(query) > len(text):
            # A field cannot contain a longer query; compare whole strings.
            return fuzz.ratio(query, text)
        if self.ignore_location:
            return fuzz.partial_ratio(query, text)

        alignment = fuzz.partial_ratio_alignment(query, text)
        if alignment is None:
            return 0.0
        penalty = 100.0 * alignment.dest_start / self.distance
        return max(0.0, alignment.score - penalty)


class FuzzyHandle(Generic[T]):
    """An immutable index over `items`, built by FuzzyMatcher.index()."""

    def __init__(self, items: Sequence[T], keys: Sequence[str], matcher: FuzzyMatcher):
        self._items = tuple(items)
        self._keys = tuple(keys)
        self._matcher = matcher
        self._fields = tuple(
            tuple(utils.default_process(_field_text(item, key)) for key in self._keys)
            for item in self._items
        )

    def __len__(self) -> int:
        return len(self._items)

    @property
    def keys(self) -> tuple:
        return self._keys

    def search(self, text: str) -> list[SearchHit[T]]:
        """Ranked hits, best first; ties keep index order."""
        query = utils.default_process(text or "")
        if len(query) < self._matcher.min_match_chars:
            return []

        hits = []
        for i, fields in enumerate(self._fields):
            score = max((self._matcher.score_text(query, f) for f in fields), default=0.0)
            if score >= self._matcher.threshold:
                hits.append(SearchHit(item=self._items[i], score=float(score), index=i))

        hits.sort(key=lambda h: (-h.score, h.index))
        return hits


def _field_text(item: Any, key: str) -> str:
    if isinstance(item, dict):
        value = item.get(key)
    else:
        value = getattr(item, key, None)
    return "" if value is None else str(value)
