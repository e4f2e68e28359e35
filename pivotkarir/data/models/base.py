"""
Base model classes for PivotKarir data models.
"""

from pydantic import BaseModel, ConfigDict


class EmbeddedModel(BaseModel):
    """
    Base model for in-memory session records.

    Nothing is persisted; records live for one session only.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        use_enum_values=True,
    )
