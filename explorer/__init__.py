"""
Explorer - query and view-state engine for a multi-source FAQ corpus.

Modules:
- corpus_model: aggregate category records by name
- matcher: fuzzy scored search primitive (rapidfuzz)
- search_index: ranked search over every question and answer
- view_state: pure transitions featured / category / all / search
- selector: visible items and counts for a state
- session: owns load, state and projections for one user
"""

from errors import ExplorerError, CorpusLoadError
from .corpus_model import CorpusModel
from .matcher import FuzzyMatcher, FuzzyHandle, SearchHit
from .search_index import SearchIndex
from .view_state import (
    initial_view_state,
    select_category,
    view_all,
    type_query,
    clear_query,
    back_to_start,
    toggle_expand,
    toggle_category_picker,
)
from .selector import (
    ALL_CATEGORIES,
    featured_set,
    default_expanded_key,
    category_preview_set,
    category_full_set,
    all_questions_set,
    search_set,
    visible_items,
    headline_count,
    select_view,
    category_list,
    group_by_category,
)
from .session import ExplorerSession, LoadedCorpus

__all__ = [
    # errors
    "ExplorerError",
    "CorpusLoadError",
    # corpus
    "CorpusModel",
    # search
    "FuzzyMatcher",
    "FuzzyHandle",
    "SearchHit",
    "SearchIndex",
    # view_state
    "initial_view_state",
    "select_category",
    "view_all",
    "type_query",
    "clear_query",
    "back_to_start",
    "toggle_expand",
    "toggle_category_picker",
    # selector
    "ALL_CATEGORIES",
    "featured_set",
    "default_expanded_key",
    "category_preview_set",
    "category_full_set",
    "all_questions_set",
    "search_set",
    "visible_items",
    "headline_count",
    "select_view",
    "category_list",
    "group_by_category",
    # session
    "ExplorerSession",
    "LoadedCorpus",
]
