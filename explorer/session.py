"""
Explorer session - owns the corpus, its derived structures and the view.

    session = ExplorerSession(settings, source)
    session.load()
    session.select_category("Mining")
    view = session.view()

Until a load succeeds the model and index are None and every view is empty.
A reload replaces corpus, model and index wholesale: all three live in one
LoadedCorpus that is swapped in with a single assignment, and readers work
from one snapshot of it.
"""

import logging
import threading
from dataclasses import dataclass
from typing import Optional

from config import Settings
from errors import CorpusLoadError
from models import CategoryInfo, Corpus, ViewResult, ViewState
from repositories import CorpusSource, get_source
from . import selector
from . import view_state as transitions
from .corpus_model import CorpusModel
from .matcher import FuzzyMatcher
from .search_index import SearchIndex

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LoadedCorpus:
    """One successful load: the document and everything derived from it."""
    corpus: Corpus
    model: CorpusModel
    index: SearchIndex


class ExplorerSession:
    """Single-user interaction session over one FAQ corpus."""

    def __init__(self, settings: Optional[Settings] = None, source: Optional[CorpusSource] = None):
        self.settings = settings or Settings()
        self._source = source
        self._lock = threading.Lock()

        self._loaded: Optional[LoadedCorpus] = None
        self.last_error: Optional[str] = None

        self.state: ViewState = transitions.initial_view_state()
        self._touched = False  # Any user action yet?

    @property
    def source(self) -> CorpusSource:
        if self._source is None:
            self._source = get_source()
        return self._source

    @property
    def snapshot(self) -> Optional[LoadedCorpus]:
        return self._loaded

    @property
    def corpus(self) -> Optional[Corpus]:
        loaded = self._loaded
        return loaded.corpus if loaded else None

    @property
    def model(self) -> Optional[CorpusModel]:
        loaded = self._loaded
        return loaded.model if loaded else None

    @property
    def index(self) -> Optional[SearchIndex]:
        loaded = self._loaded
        return loaded.index if loaded else None

    @property
    def loaded(self) -> bool:
        return self._loaded is not None

    def matcher(self) -> FuzzyMatcher:
        return FuzzyMatcher(
            threshold=self.settings.search_threshold,
            ignore_location=self.settings.ignore_location,
        )

    # === Loading ===

    def load(self) -> bool:
        """
        (Re)load the corpus. Returns False on failure.

        Prior corpus state is dropped first, so a failed reload leaves the
        session empty rather than half old, half new.
        """
        with self._lock:
            self._loaded = None
            self.last_error = None

            try:
                corpus = self.source.load()
            except CorpusLoadError as e:
                self.last_error = str(e)
                logger.error("Failed to load FAQ corpus: %s", e)
                return False

            model = CorpusModel(corpus)
            loaded = LoadedCorpus(corpus, model, SearchIndex.from_model(model, self.matcher()))
            self._loaded = loaded

            if not self._touched:
                # Nobody has acted yet; open on the real first featured item.
                self.state = transitions.initial_view_state(self._default_key(loaded))

            logger.info(
                "Loaded %d questions in %d categories from %s",
                len(model), len(model.unique_category_names()), self.source.name,
            )
            return True

    def _default_key(self, loaded: Optional[LoadedCorpus]) -> Optional[str]:
        model = loaded.model if loaded else None
        return selector.default_expanded_key(model, self.settings.intro_marker)

    # === User actions ===

    def _apply(self, transition, *args) -> ViewState:
        with self._lock:
            self.state = transition(self.state, *args)
            self._touched = True
            return self.state

    def select_category(self, name: str) -> ViewState:
        return self._apply(transitions.select_category, name)

    def view_all(self) -> ViewState:
        return self._apply(transitions.view_all)

    def type_query(self, text: str) -> ViewState:
        return self._apply(transitions.type_query, text)

    def back_to_start(self) -> ViewState:
        return self._apply(transitions.back_to_start, self._default_key(self._loaded))

    def toggle_expand(self, key: str) -> ViewState:
        return self._apply(transitions.toggle_expand, key)

    def toggle_category_picker(self) -> ViewState:
        return self._apply(transitions.toggle_category_picker)

    # === Projections ===

    def view(self) -> ViewResult:
        loaded, state = self._loaded, self.state
        return selector.select_view(
            loaded.model if loaded else None,
            loaded.index if loaded else None,
            state,
            intro_marker=self.settings.intro_marker,
            featured_size=self.settings.featured_size,
            preview_size=self.settings.preview_size,
        )

    def categories(self) -> list[CategoryInfo]:
        loaded = self._loaded
        return selector.category_list(loaded.model if loaded else None)

    def summary(self) -> dict:
        """Corpus header info for the UI."""
        loaded, error = self._loaded, self.last_error
        corpus = loaded.corpus if loaded else None
        return {
            "loaded": loaded is not None,
            "title": corpus.title if corpus else "",
            "description": corpus.description if corpus else "",
            "total_count": corpus.total_count if corpus else 0,
            "error": error,
        }
