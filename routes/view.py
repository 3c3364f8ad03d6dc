"""
View API routes.

Read routes project the current view; POST routes apply one user action
each and return the resulting view.
"""

from flask import jsonify, request

from explorer import group_by_category
from models import CategoryInfo, SearchableItem, ViewResult
from . import explorer_bp
from .session_store import get_session


def _item_json(item: SearchableItem, view: ViewResult) -> dict:
    return {
        "key": item.key,
        "question": item.question,
        "answer": item.answer,
        "category": item.category_name,
        "source": item.category_source,
        "expanded": view.is_expanded(item),
    }


def _category_json(info: CategoryInfo) -> dict:
    return {"name": info.name, "count": info.count, "sources": list(info.sources)}


def _view_json(view: ViewResult) -> dict:
    return {
        "mode": view.mode.value,
        "selected_category": view.selected_category,
        "query": view.query,
        "headline": view.headline if view.shows_headline else None,
        "headline_count": view.headline_count,
        "expanded_key": view.expanded_key,
        "category_picker_open": view.category_picker_open,
        "empty": view.is_empty,
        "items": [_item_json(item, view) for item in view.items],
        "groups": [
            {"category": name, "keys": [item.key for item in items]}
            for name, items in group_by_category(list(view.items))
        ],
    }


def _current_view():
    return jsonify(_view_json(get_session().view()))


def _body_string(field: str, allow_empty: bool = False):
    """Pull a string field out of the JSON body. Returns (value, error_response)."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return None, (jsonify({"error": "JSON object body required"}), 400)
    value = data.get(field)
    if not isinstance(value, str):
        return None, (jsonify({"error": f"'{field}' must be a string"}), 400)
    if not allow_empty and not value.strip():
        return None, (jsonify({"error": f"'{field}' required"}), 400)
    return value, None


@explorer_bp.route("/api/health")
def health():
    return jsonify({"status": "ok", "loaded": get_session().loaded})


@explorer_bp.route("/api/corpus")
def corpus_summary():
    """Title, description and the externally supplied total."""
    return jsonify(get_session().summary())


@explorer_bp.route("/api/categories")
def list_categories():
    """Category picker rows with aggregated counts."""
    return jsonify([_category_json(c) for c in get_session().categories()])


@explorer_bp.route("/api/view")
def current_view():
    return _current_view()


@explorer_bp.route("/api/view/category", methods=["POST"])
def select_category():
    name, error = _body_string("name")
    if error:
        return error
    get_session().select_category(name)
    return _current_view()


@explorer_bp.route("/api/view/all", methods=["POST"])
def view_all():
    get_session().view_all()
    return _current_view()


@explorer_bp.route("/api/view/query", methods=["POST"])
def type_query():
    query, error = _body_string("query", allow_empty=True)
    if error:
        return error
    get_session().type_query(query)
    return _current_view()


@explorer_bp.route("/api/view/back", methods=["POST"])
def back_to_start():
    get_session().back_to_start()
    return _current_view()


@explorer_bp.route("/api/view/toggle", methods=["POST"])
def toggle_expand():
    key, error = _body_string("key")
    if error:
        return error
    get_session().toggle_expand(key)
    return _current_view()


@explorer_bp.route("/api/view/picker", methods=["POST"])
def toggle_picker():
    get_session().toggle_category_picker()
    return _current_view()


@explorer_bp.route("/api/reload", methods=["POST"])
def reload_corpus():
    """Reload the FAQ document. Replaces, never merges."""
    session = get_session()
    if not session.load():
        return jsonify({"error": session.last_error or "Load failed"}), 503
    return jsonify(session.summary())
