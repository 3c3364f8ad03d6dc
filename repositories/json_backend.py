"""
JSON backends - file on disk or an already-parsed object.
"""

import copy
import json
from pathlib import Path

from errors import CorpusLoadError
from .base import CorpusSource


class JsonCorpusSource(CorpusSource):
    """Reads the FAQ document from a JSON file."""

    def __init__(self, path: Path):
        self.path = Path(path)

    @property
    def name(self) -> str:
        return str(self.path)

    def fetch(self) -> object:
        if not self.path.exists():
            raise CorpusLoadError("FAQ document not found", source=self.name)
        try:
            with open(self.path, encoding="utf-8") as f:
                return json.load(f)
        except json.JSONDecodeError as e:
            raise CorpusLoadError(f"Invalid JSON: {e}", source=self.name) from e
        except UnicodeDecodeError as e:
            raise CorpusLoadError(f"Invalid encoding: {e}", source=self.name) from e
        except OSError as e:
            raise CorpusLoadError(f"Cannot read file: {e}", source=self.name) from e


class DictCorpusSource(CorpusSource):
    """Wraps a document that is already in memory (tests, embedding)."""

    def __init__(self, data: object, label: str = "<memory>"):
        self._data = data
        self._label = label

    @property
    def name(self) -> str:
        return self._label

    def fetch(self) -> object:
        # Callers may keep mutating their dict; the corpus must not follow.
        return copy.deepcopy(self._data)
