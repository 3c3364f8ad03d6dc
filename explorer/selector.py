"""
Query selector - which items are visible for a given state.

Pure projections over (CorpusModel, SearchIndex, ViewState). Nothing here is
cached or mutated; every call recomputes from its inputs. A missing model or
index (corpus not loaded yet, or failed to load) yields empty results.
"""

from typing import Optional

from config import DEFAULT_INTRO_MARKER, FEATURED_SIZE, PREVIEW_SIZE
from models import CategoryInfo, SearchableItem, ViewMode, ViewResult, ViewState
from .corpus_model import CorpusModel
from .search_index import SearchIndex

ALL_CATEGORIES = "All"


def featured_set(
    model: Optional[CorpusModel],
    intro_marker: str = DEFAULT_INTRO_MARKER,
    size: int = FEATURED_SIZE,
) -> list[SearchableItem]:
    """
    Curated landing sample.

    1. The first item (corpus order) whose question contains the intro marker
    2. The first question of each category name not yet represented
    until `size` items or categories run out.
    """
    if model is None or size <= 0:
        return []

    featured: list[SearchableItem] = []
    used: set[str] = set()

    marker = intro_marker.strip().lower()
    if marker:
        for item in model.all_items():
            if marker in item.question.lower():
                featured.append(item)
                used.add(item.category_name)
                break

    for name in model.unique_category_names():
        if len(featured) >= size:
            break
        if name in used:
            continue
        questions = model.questions_for_category_name(name)
        if questions:
            featured.append(questions[0])
            used.add(name)

    return featured[:size]


def default_expanded_key(
    model: Optional[CorpusModel],
    intro_marker: str = DEFAULT_INTRO_MARKER,
) -> Optional[str]:
    """Key of the first featured item, expanded on the landing view."""
    featured = featured_set(model, intro_marker, size=1)
    return featured[0].key if featured else None


def category_preview_set(
    model: Optional[CorpusModel], name: Optional[str], size: int = PREVIEW_SIZE
) -> list[SearchableItem]:
    return category_full_set(model, name)[:max(size, 0)]


def category_full_set(model: Optional[CorpusModel], name: Optional[str]) -> list[SearchableItem]:
    if model is None or name is None:
        return []
    return model.questions_for_category_name(name)


def all_questions_set(model: Optional[CorpusModel], state: ViewState) -> list[SearchableItem]:
    if model is None:
        return []
    if state.selected_category is not None:
        return category_full_set(model, state.selected_category)
    return model.all_items()


def unfiltered_search_set(index: Optional[SearchIndex], state: ViewState) -> list[SearchableItem]:
    query = state.query.strip()
    if index is None or not query:
        return []
    return index.query(query)


def search_set(index: Optional[SearchIndex], state: ViewState) -> list[SearchableItem]:
    """Search results, narrowed to the selected category when there is one."""
    results = unfiltered_search_set(index, state)
    if state.selected_category is None:
        return results
    return [item for item in results if item.category_name == state.selected_category]


def _dispatch(
    model: Optional[CorpusModel],
    index: Optional[SearchIndex],
    state: ViewState,
    intro_marker: str,
    featured_size: int,
    preview_size: int,
) -> tuple[list[SearchableItem], int]:
    """(visible items, headline count) for the current mode."""
    if state.mode == ViewMode.SEARCH and state.has_query:
        results = unfiltered_search_set(index, state)
        if state.selected_category is None:
            return results, len(results)
        narrowed = [i for i in results if i.category_name == state.selected_category]
        # Headline reports every hit, the list shows the selected category only.
        return narrowed, len(results)

    if state.mode == ViewMode.CATEGORY:
        items = category_preview_set(model, state.selected_category, preview_size)
    elif state.mode == ViewMode.ALL:
        items = all_questions_set(model, state)
    else:
        items = featured_set(model, intro_marker, featured_size)
    return items, len(items)


def visible_items(
    model: Optional[CorpusModel],
    index: Optional[SearchIndex],
    state: ViewState,
    intro_marker: str = DEFAULT_INTRO_MARKER,
    featured_size: int = FEATURED_SIZE,
    preview_size: int = PREVIEW_SIZE,
) -> list[SearchableItem]:
    items, _ = _dispatch(model, index, state, intro_marker, featured_size, preview_size)
    return items


def headline_count(
    model: Optional[CorpusModel],
    index: Optional[SearchIndex],
    state: ViewState,
    intro_marker: str = DEFAULT_INTRO_MARKER,
    featured_size: int = FEATURED_SIZE,
    preview_size: int = PREVIEW_SIZE,
) -> int:
    _, count = _dispatch(model, index, state, intro_marker, featured_size, preview_size)
    return count


def select_view(
    model: Optional[CorpusModel],
    index: Optional[SearchIndex],
    state: ViewState,
    intro_marker: str = DEFAULT_INTRO_MARKER,
    featured_size: int = FEATURED_SIZE,
    preview_size: int = PREVIEW_SIZE,
) -> ViewResult:
    """Everything the UI needs to draw the current view."""
    items, count = _dispatch(model, index, state, intro_marker, featured_size, preview_size)
    return ViewResult(
        mode=state.mode,
        selected_category=state.selected_category,
        query=state.query,
        items=tuple(items),
        headline_count=count,
        expanded_key=state.expanded_key,
        category_picker_open=state.category_picker_open,
    )


def category_list(model: Optional[CorpusModel]) -> list[CategoryInfo]:
    """Picker rows: 'All' with the corpus total, then one row per name."""
    if model is None:
        return []
    return [CategoryInfo(name=ALL_CATEGORIES, count=model.total_count)] + model.category_infos()


def group_by_category(items: list[SearchableItem]) -> list[tuple[str, list[SearchableItem]]]:
    """Group items under their category name, first-seen order."""
    groups: dict[str, list[SearchableItem]] = {}
    for item in items:
        groups.setdefault(item.category_name, []).append(item)
    return list(groups.items())
