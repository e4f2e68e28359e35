"""
Application-wide constants for PivotKarir.

This module contains the constant values and enums shared across the
loader, scorer, ranking builder and session.
"""

from enum import Enum
from typing import Final


# =============================================================================
# Application Constants
# =============================================================================

APP_NAME: Final[str] = "PivotKarir"
APP_DISPLAY_NAME: Final[str] = "PivotKarir AI - Recruiter Match"
VERSION: Final[str] = "0.1.0"


# =============================================================================
# Scoring Constants
# =============================================================================

# Percentage thresholds; each band includes its lower bound
MATCH_LEVEL_THRESHOLDS: Final[dict[str, int]] = {
    "high": 70,
    "medium": 50,
}

RANK_MARKERS: Final[tuple[str, str]] = ("🥇", "🥈")

RECOMMENDATION_TEMPLATE: Final[str] = (
    "Connect with {name} first! "
    "They have a {score}% match with your profile and career goals."
)

UNKNOWN_NAME: Final[str] = "Unknown"


# =============================================================================
# Enums
# =============================================================================


class ProfileSlot(str, Enum):
    """Named input slot of a comparison session."""

    CANDIDATE = "candidate"
    SUBJECT_A = "subject_a"
    SUBJECT_B = "subject_b"

    @property
    def label(self) -> str:
        """Human-readable slot name."""
        return {
            ProfileSlot.CANDIDATE: "your profile",
            ProfileSlot.SUBJECT_A: "recruiter 1",
            ProfileSlot.SUBJECT_B: "recruiter 2",
        }[self]


class MatchLevel(str, Enum):
    """Qualitative band of a match percentage."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @classmethod
    def from_percentage(
        cls,
        percentage: int,
        high_threshold: int = MATCH_LEVEL_THRESHOLDS["high"],
        medium_threshold: int = MATCH_LEVEL_THRESHOLDS["medium"],
    ) -> "MatchLevel":
        """Convert a rounded integer percentage to a level."""
        if percentage >= high_threshold:
            return cls.HIGH
        elif percentage >= medium_threshold:
            return cls.MEDIUM
        return cls.LOW


class ComparisonState(str, Enum):
    """Lifecycle state of a comparison session."""

    IDLE = "idle"
    LOADING = "loading"
    READY = "ready"
    COMPARING = "comparing"
    DONE = "done"
    FAILED = "failed"
