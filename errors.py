"""
FAQ explorer errors.
"""


class ExplorerError(Exception):
    """Base for errors raised by the FAQ explorer."""


class CorpusLoadError(ExplorerError):
    """The FAQ document could not be fetched or did not parse."""

    def __init__(self, message: str, source: str = ""):
        super().__init__(message)
        self.source = source

    def __str__(self) -> str:
        base = super().__str__()
        return f"{base} ({self.source})" if self.source else base
