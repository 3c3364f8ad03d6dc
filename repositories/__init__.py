"""
Source layer - abstracts where the FAQ document comes from.

Usage:
    from repositories import get_source

    source = get_source()  # Returns configured backend
    corpus = source.load()

Backends are swappable via configure_source().
"""

from pathlib import Path
from typing import Optional

from .base import CorpusSource
from .json_backend import JsonCorpusSource, DictCorpusSource

# Default backend - can be changed via configure_source()
_backend: str = "json"
_options: dict = {}
_instance: Optional[CorpusSource] = None


def get_source() -> CorpusSource:
    """Get the configured source instance."""
    global _instance

    if _instance is None:
        if _backend == "json":
            path = _options.get("path")
            if path is None:
                from config import load_settings
                path = load_settings().data_path
            _instance = JsonCorpusSource(Path(path))
        elif _backend == "memory":
            _instance = DictCorpusSource(_options.get("data", {}))
        else:
            raise ValueError(f"Unknown backend: {_backend}")

    return _instance


def configure_source(backend: str, **kwargs) -> None:
    """Configure the source backend ('json' with path=, 'memory' with data=)."""
    global _backend, _options, _instance
    _backend = backend
    _options = kwargs
    _instance = None  # Force re-initialization


__all__ = [
    "get_source",
    "configure_source",
    "CorpusSource",
    "JsonCorpusSource",
    "DictCorpusSource",
]
