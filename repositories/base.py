"""
Corpus source base class - defines the loading interface.
"""

from abc import ABC, abstractmethod

from pydantic import ValidationError

from models import Corpus
from errors import CorpusLoadError


class CorpusSource(ABC):
    """
    Abstract base for anything that delivers the FAQ document.

    Subclasses fetch the raw object; parsing and validation are shared.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable location, used in logs and errors."""
        pass

    @abstractmethod
    def fetch(self) -> object:
        """Return the parsed document. Raise CorpusLoadError on failure."""
        pass

    def load(self) -> Corpus:
        """Fetch and validate. Always raises CorpusLoadError, never a raw error."""
        raw = self.fetch()
        if not isinstance(raw, dict):
            raise CorpusLoadError(
                f"Expected a JSON object, got {type(raw).__name__}", source=self.name
            )
        try:
            return Corpus.model_validate(raw)
        except ValidationError as e:
            raise CorpusLoadError(
                f"Malformed FAQ document: {e.error_count()} validation error(s)",
                source=self.name,
            ) from e
