"""
Profile data model.

A ProfileRecord is parsed from one uploaded JSON document. All fields are
optional and loosely typed: scalars are read as text, null list items are
skipped, nested objects are dropped with a warning, and unknown keys are
ignored.
"""

from typing import Any, Optional

from pydantic import ConfigDict, ValidationInfo, field_validator

from pivotkarir.utils.logger import get_logger

from .base import EmbeddedModel

logger = get_logger(__name__)


def _scalar_text(value: Any) -> Any:
    """Render a JSON scalar the way it reads in text (true, 3, 2.5)."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (int, float)):
        return str(value)
    return value


class ProfileRecord(EmbeddedModel):
    """Candidate or recruiter profile."""

    model_config = ConfigDict(
        populate_by_name=True,
        use_enum_values=True,
        extra="ignore",
    )

    name: Optional[str] = None
    title: Optional[str] = None
    current_title: Optional[str] = None

    # Aspirations, used on the candidate's own profile
    target_position: Optional[str] = None
    target_industry: Optional[str] = None

    # Current employer context
    industry: Optional[str] = None
    company: Optional[str] = None

    bio: Optional[str] = None
    skills: Optional[list[str]] = None
    specialization: Optional[list[str]] = None

    @field_validator(
        "name",
        "title",
        "current_title",
        "target_position",
        "target_industry",
        "industry",
        "company",
        "bio",
        mode="before",
    )
    @classmethod
    def coerce_text(cls, v: Any, info: ValidationInfo) -> Any:
        """Read scalar values as text; falsy scalars count as absent."""
        if v is None or isinstance(v, str):
            return v
        if isinstance(v, (dict, list)):
            logger.warning(f"Ignoring nested value in profile field '{info.field_name}'")
            return None
        if not v:
            return None
        return _scalar_text(v)

    @field_validator("skills", "specialization", mode="before")
    @classmethod
    def coerce_list(cls, v: Any, info: ValidationInfo) -> Any:
        """Read list items as text, skipping nulls and nested values."""
        if v is None:
            return None
        if not isinstance(v, list):
            logger.warning(f"Ignoring non-list value in profile field '{info.field_name}'")
            return None

        items = []
        for item in v:
            if item is None:
                continue
            if isinstance(item, (dict, list)):
                logger.warning(f"Ignoring nested item in profile field '{info.field_name}'")
                continue
            items.append(_scalar_text(item))
        return items

    @property
    def display_title(self) -> Optional[str]:
        """Current role, preferring current_title over title."""
        return self.current_title or self.title

    @property
    def is_empty(self) -> bool:
        """True when no recognized field carries a value."""
        return not any(
            getattr(self, field_name) for field_name in type(self).model_fields
        )
