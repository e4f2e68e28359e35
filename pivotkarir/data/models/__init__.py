"""
Pydantic data models for PivotKarir.
"""

from .base import EmbeddedModel
from .profile import ProfileRecord
from .match import ComparisonResult, ScoredSubject

__all__ = [
    "EmbeddedModel",
    "ProfileRecord",
    "ComparisonResult",
    "ScoredSubject",
]
