"""
Comparison result data models.

Transient records built by the ranking step for display; nothing here is
persisted.
"""

from typing import Optional

from pydantic import Field

from pivotkarir.utils.constants import MatchLevel, ProfileSlot

from .base import EmbeddedModel
from .profile import ProfileRecord


class ScoredSubject(EmbeddedModel):
    """A recruiter profile with its match against the candidate."""

    profile: ProfileRecord
    slot: ProfileSlot
    display_name: str
    score: int = Field(ge=-100, le=100)  # Rounded cosine similarity, in percent
    level: MatchLevel
    rank: int = Field(ge=1, le=2)
    rank_marker: str

    @property
    def title(self) -> Optional[str]:
        return self.profile.display_title

    @property
    def company(self) -> Optional[str]:
        return self.profile.company

    @property
    def bio(self) -> Optional[str]:
        return self.profile.bio


class ComparisonResult(EmbeddedModel):
    """Ranked outcome of one comparison run."""

    ranked: list[ScoredSubject] = Field(min_length=2, max_length=2)
    recommendation: str
    model_used: str = ""

    @property
    def top_match(self) -> ScoredSubject:
        """The first-ranked subject."""
        return self.ranked[0]
