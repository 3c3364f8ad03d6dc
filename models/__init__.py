"""
Domain models - single source of truth for the FAQ corpus and the view.

Design principles:
- Every record defined once
- Validation at the boundary (document parsing)
- Derived values are frozen
"""

from .base import DocumentModel, ReadOnlyModel
from .corpus import QA, Category, Corpus, SearchableItem, CategoryInfo
from .view import ViewMode, ViewState, ViewResult

__all__ = [
    # Base
    "DocumentModel",
    "ReadOnlyModel",
    # Corpus
    "QA",
    "Category",
    "Corpus",
    "SearchableItem",
    "CategoryInfo",
    # View
    "ViewMode",
    "ViewState",
    "ViewResult",
]
