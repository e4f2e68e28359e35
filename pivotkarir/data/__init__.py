"""
Data layer for PivotKarir.

Holds the pydantic models for uploaded profiles and comparison results.
"""

from .models import (
    ComparisonResult,
    ProfileRecord,
    ScoredSubject,
)

__all__ = [
    "ComparisonResult",
    "ProfileRecord",
    "ScoredSubject",
]
