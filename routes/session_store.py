"""
Process-wide explorer session for the web layer.

Usage:
    from routes.session_store import get_session

    session = get_session()  # Created and loaded on first use
"""

from typing import Optional

from config import Settings, load_settings
from explorer import ExplorerSession
from repositories import CorpusSource

_instance: Optional[ExplorerSession] = None


def get_session() -> ExplorerSession:
    """Get the shared session, loading the corpus on first use."""
    global _instance

    if _instance is None:
        _instance = ExplorerSession(load_settings())
        _instance.load()

    return _instance


def configure_session(
    settings: Optional[Settings] = None,
    source: Optional[CorpusSource] = None,
    load: bool = True,
) -> ExplorerSession:
    """Replace the shared session (tests, CLI serve)."""
    global _instance
    _instance = ExplorerSession(settings or load_settings(), source)
    if load:
        _instance.load()
    return _instance


def reset_session() -> None:
    global _instance
    _instance = None
