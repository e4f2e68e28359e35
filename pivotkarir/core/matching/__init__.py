"""Candidate-recruiter ranking and comparison session."""

from .ranking import (
    RankingBuilder,
    display_name,
    to_percentage,
)
from .session import (
    ComparisonSession,
    ProfileSlots,
)

__all__ = [
    "RankingBuilder",
    "display_name",
    "to_percentage",
    "ComparisonSession",
    "ProfileSlots",
]
