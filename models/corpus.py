"""
Corpus models - the FAQ document as loaded from disk.

Document shape:
    {
        "title": "...",
        "description": "...",
        "total_faqs": 123,
        "categories": [
            {"name": "...", "description": "...", "source": "...",
             "faqs": [{"question": "...", "answer": "..."}]}
        ]
    }
"""

from pydantic import Field

from .base import DocumentModel, ReadOnlyModel


class QA(DocumentModel):
    """A single question/answer pair. Question text is not unique."""
    question: str
    answer: str = ""


class Category(DocumentModel):
    """
    One category record as contributed by one source.

    Several records may share `name` with a different `source`; `name` is
    the aggregation key.
    """
    name: str
    description: str = ""
    source: str = ""
    questions: list[QA] = Field(default_factory=list, alias="faqs")


class Corpus(DocumentModel):
    """The full FAQ dataset."""
    title: str = ""
    description: str = ""
    total_count: int = Field(default=0, alias="total_faqs")  # Displayed verbatim
    categories: list[Category] = Field(default_factory=list)


class SearchableItem(ReadOnlyModel):
    """
    A QA flattened out of its category, tagged with where it came from.

    `position` is the index within the aggregated list of its category name,
    so the same question gets the same key in every view.
    """
    question: str
    answer: str
    category_name: str
    category_source: str = ""
    position: int = 0

    @property
    def key(self) -> str:
        """Expand/collapse identity."""
        return f"{self.category_name}-{self.position}"


class CategoryInfo(ReadOnlyModel):
    """One row of the category picker."""
    name: str
    count: int
    sources: tuple[str, ...] = ()
