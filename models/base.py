"""
Base model classes.
"""

from pydantic import BaseModel, ConfigDict


class DocumentModel(BaseModel):
    """
    Base for records parsed from the input document.

    Unknown keys are ignored so newer documents still load.
    """
    model_config = ConfigDict(
        extra="ignore",
        populate_by_name=True,
    )


class ReadOnlyModel(BaseModel):
    """Base for derived values. Instances never change after construction."""
    model_config = ConfigDict(frozen=True)
