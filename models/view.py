"""
View models - what the user is looking at.
"""

from enum import Enum
from typing import Optional

from .base import ReadOnlyModel
from .corpus import SearchableItem


class ViewMode(str, Enum):
    """Top-level display context."""
    FEATURED = "featured"
    CATEGORY = "category"
    ALL = "all"
    SEARCH = "search"


class ViewState(ReadOnlyModel):
    """
    Interaction state.

    Immutable: transitions in explorer.view_state return new instances.
    At most one item is expanded at a time.
    """
    mode: ViewMode = ViewMode.FEATURED
    selected_category: Optional[str] = None
    query: str = ""
    expanded_key: Optional[str] = None
    category_picker_open: bool = False

    @property
    def has_query(self) -> bool:
        return bool(self.query.strip())


class ViewResult(ReadOnlyModel):
    """The projection of (corpus, index, state) handed to the UI layers."""
    mode: ViewMode
    selected_category: Optional[str] = None
    query: str = ""
    items: tuple[SearchableItem, ...] = ()
    headline_count: int = 0
    expanded_key: Optional[str] = None
    category_picker_open: bool = False

    @property
    def is_empty(self) -> bool:
        return not self.items

    @property
    def headline(self) -> str:
        """Result count line, e.g. '1 result' / '12 results'."""
        noun = "result" if self.headline_count == 1 else "results"
        return f"{self.headline_count} {noun}"

    @property
    def shows_headline(self) -> bool:
        """Only shown once the user narrowed the view."""
        return self.has_query or self.selected_category is not None

    @property
    def has_query(self) -> bool:
        return bool(self.query.strip())

    def is_expanded(self, item: SearchableItem) -> bool:
        return self.expanded_key is not None and item.key == self.expanded_key
