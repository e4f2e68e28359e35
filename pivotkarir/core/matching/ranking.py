"""
Ranking and presentation building.

Turns the raw similarity of two recruiter profiles into rounded
percentages, match levels, rank markers and a single recommendation.
"""

import math
from typing import Optional

from pivotkarir.data.models import ComparisonResult, ProfileRecord, ScoredSubject
from pivotkarir.utils.config import get_settings
from pivotkarir.utils.constants import (
    RANK_MARKERS,
    RECOMMENDATION_TEMPLATE,
    UNKNOWN_NAME,
    MatchLevel,
    ProfileSlot,
)
from pivotkarir.utils.exceptions import InvalidScoreError
from pivotkarir.utils.logger import get_logger

logger = get_logger(__name__)

SubjectScore = tuple[ProfileRecord, float]


def to_percentage(raw_score: float, subject: str = "subject") -> int:
    """
    Convert a similarity in [-1, 1] to an integer percentage.

    Halves round up (70.5 -> 71, 69.9999 -> 70), not to even.

    Raises:
        InvalidScoreError: If the score is NaN or infinite.
    """
    if not math.isfinite(raw_score):
        raise InvalidScoreError(subject, raw_score)
    return int(math.floor(raw_score * 100 + 0.5))


def display_name(profile: ProfileRecord, source_name: Optional[str] = None) -> str:
    """Name shown for a profile: its name, else the document name."""
    return profile.name or source_name or UNKNOWN_NAME


class RankingBuilder:
    """
    Builds the ranked comparison result for two recruiters.

    Levels use the rounded percentage: high from `high_threshold`,
    medium from `medium_threshold`, low below that.
    """

    def __init__(
        self,
        high_threshold: Optional[int] = None,
        medium_threshold: Optional[int] = None,
    ):
        """
        Args:
            high_threshold: Lowest percentage rated high. Defaults to config setting.
            medium_threshold: Lowest percentage rated medium. Defaults to config setting.
        """
        settings = get_settings().matching
        self.high_threshold = settings.high_threshold if high_threshold is None else high_threshold
        self.medium_threshold = settings.medium_threshold if medium_threshold is None else medium_threshold

    def classify(self, percentage: int) -> MatchLevel:
        return MatchLevel.from_percentage(
            percentage,
            high_threshold=self.high_threshold,
            medium_threshold=self.medium_threshold,
        )

    def build(
        self,
        subject_a: SubjectScore,
        subject_b: SubjectScore,
        source_names: Optional[dict[ProfileSlot, str]] = None,
        model_used: str = "",
    ) -> ComparisonResult:
        """
        Rank two scored recruiter profiles.

        Args:
            subject_a: (profile, raw similarity) for recruiter 1.
            subject_b: (profile, raw similarity) for recruiter 2.
            source_names: Document names, used when a profile has no name.
            model_used: Embedding model name, recorded on the result.

        Returns:
            ComparisonResult with the higher score first. Equal scores keep
            recruiter 1 first.

        Raises:
            InvalidScoreError: If either score is NaN or infinite.
        """
        source_names = source_names or {}

        # Convert both before building anything, so one bad score fails the whole result
        entries = []
        for slot, (profile, raw_score) in (
            (ProfileSlot.SUBJECT_A, subject_a),
            (ProfileSlot.SUBJECT_B, subject_b),
        ):
            name = display_name(profile, source_names.get(slot))
            percentage = to_percentage(raw_score, subject=name)
            entries.append((slot, profile, name, percentage))

        entries = sorted(entries, key=lambda entry: entry[3], reverse=True)

        ranked = [
            ScoredSubject(
                profile=profile,
                slot=slot,
                display_name=name,
                score=percentage,
                level=self.classify(percentage),
                rank=index + 1,
                rank_marker=RANK_MARKERS[index],
            )
            for index, (slot, profile, name, percentage) in enumerate(entries)
        ]

        best = ranked[0]
        recommendation = RECOMMENDATION_TEMPLATE.format(name=best.display_name, score=best.score)

        return ComparisonResult(
            ranked=ranked,
            recommendation=recommendation,
            model_used=model_used,
        )
