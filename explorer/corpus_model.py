"""
Corpus model - aggregation of category records by name.

One logical category may be contributed by several sources, each as its own
Category record. Everything here groups by `name`; `source` is carried along
for display only and never used to deduplicate.
"""

import logging
from collections import OrderedDict

from models import Corpus, SearchableItem, CategoryInfo

logger = logging.getLogger(__name__)


class CorpusModel:
    """
    Read-only view over a Corpus with per-name aggregation tables.

    The tables are built once in __init__. A new corpus gets a new model.
    """

    def __init__(self, corpus: Corpus):
        self.corpus = corpus
        self._by_name: "OrderedDict[str, list[SearchableItem]]" = OrderedDict()
        self._sources: dict[str, list[str]] = {}

        for category in corpus.categories:
            items = self._by_name.setdefault(category.name, [])
            sources = self._sources.setdefault(category.name, [])
            if category.source and category.source not in sources:
                sources.append(category.source)
            for qa in category.questions:
                items.append(SearchableItem(
                    question=qa.question,
                    answer=qa.answer,
                    category_name=category.name,
                    category_source=category.source,
                    position=len(items),
                ))

        # Flat list follows record order, not name order.
        self._all: list[SearchableItem] = []
        offsets = {name: 0 for name in self._by_name}
        for category in corpus.categories:
            start = offsets[category.name]
            end = start + len(category.questions)
            self._all.extend(self._by_name[category.name][start:end])
            offsets[category.name] = end

        logger.debug(
            "Corpus model: %d records, %d names, %d items",
            len(corpus.categories), len(self._by_name), len(self._all),
        )

    @property
    def title(self) -> str:
        return self.corpus.title

    @property
    def description(self) -> str:
        return self.corpus.description

    @property
    def total_count(self) -> int:
        """Externally supplied total, shown as-is."""
        return self.corpus.total_count

    def unique_category_names(self) -> list[str]:
        """Distinct names in first-occurrence order."""
        return list(self._by_name)

    def count_for_category_name(self, name: str) -> int:
        """Question count summed over every record named `name`. 0 if unknown."""
        return len(self._by_name.get(name, ()))

    def questions_for_category_name(self, name: str) -> list[SearchableItem]:
        """All items under `name`, concatenated in record order."""
        return list(self._by_name.get(name, ()))

    def all_items(self) -> list[SearchableItem]:
        """Every item across every record, in record order."""
        return list(self._all)

    def sources_for_category_name(self, name: str) -> list[str]:
        return list(self._sources.get(name, ()))

    def category_infos(self) -> list[CategoryInfo]:
        """One picker row per unique name, with aggregated counts."""
        return [
            CategoryInfo(
                name=name,
                count=len(items),
                sources=tuple(self._sources.get(name, ())),
            )
            for name, items in self._by_name.items()
        ]

    def __len__(self) -> int:
        return len(self._all)
