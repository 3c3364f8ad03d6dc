"""
View state transitions.

Each function takes the current ViewState and returns a new one; nothing is
mutated in place. Transitions are driven by user actions only, never by data
loading.

    featured --select--> category --view all--> all
        ^                    |                   |
        |                 type query          type query
        |                    v                   v
        +----back------- search <-----------------
"""

import logging
from typing import Optional

from models import ViewMode, ViewState

logger = logging.getLogger(__name__)


def initial_view_state(default_key: Optional[str] = None) -> ViewState:
    """Landing view: featured, with the first featured item expanded."""
    return ViewState(mode=ViewMode.FEATURED, expanded_key=default_key)


def _resting_mode(selected_category: Optional[str]) -> ViewMode:
    """Where the view lands when there is no active search."""
    return ViewMode.CATEGORY if selected_category is not None else ViewMode.FEATURED


def select_category(state: ViewState, name: str) -> ViewState:
    new = state.model_copy(update={
        "selected_category": name,
        "mode": ViewMode.CATEGORY,
        "category_picker_open": False,
        "expanded_key": None,
    })
    logger.debug("select_category %r: %s -> %s", name, state.mode.value, new.mode.value)
    return new


def view_all(state: ViewState) -> ViewState:
    """Expand a category preview to its full list, or show every question."""
    if state.mode == ViewMode.CATEGORY and state.selected_category is not None:
        return state.model_copy(update={"mode": ViewMode.ALL})
    return state.model_copy(update={"mode": ViewMode.ALL, "selected_category": None})


def type_query(state: ViewState, text: str) -> ViewState:
    """
    Update the search box.

    Whitespace-only text counts as empty, so search mode always carries a
    real query.
    """
    text = text or ""
    if text.strip():
        mode = ViewMode.SEARCH
    elif state.mode == ViewMode.SEARCH or state.has_query:
        mode = _resting_mode(state.selected_category)
    else:
        mode = state.mode
    return state.model_copy(update={"query": text, "mode": mode})


def clear_query(state: ViewState) -> ViewState:
    return type_query(state, "")


def back_to_start(state: ViewState, default_key: Optional[str] = None) -> ViewState:
    return state.model_copy(update={
        "selected_category": None,
        "mode": ViewMode.FEATURED,
        "query": "",
        "expanded_key": default_key,
    })


def toggle_expand(state: ViewState, key: str) -> ViewState:
    """Collapse if `key` is open, otherwise open it (closing any other)."""
    if state.expanded_key == key:
        return state.model_copy(update={"expanded_key": None})
    return state.model_copy(update={"expanded_key": key})


def toggle_category_picker(state: ViewState) -> ViewState:
    return state.model_copy(update={"category_picker_open": not state.category_picker_open})
