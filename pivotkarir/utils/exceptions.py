"""
Exception hierarchy for PivotKarir.

Every failure a user can recover from (fix a document, retry a
comparison) is raised as a subclass of PivotKarirError.
"""

from typing import Any, Optional


class PivotKarirError(Exception):
    """Base exception for PivotKarir."""

    def __init__(
        self,
        message: str,
        details: Optional[dict[str, Any]] = None,
    ):
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for logging."""
        result = {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "details": self.details,
        }
        if self.__cause__ is not None:
            result["cause"] = str(self.__cause__)
        return result


class ParseError(PivotKarirError):
    """Raised when an uploaded profile document cannot be parsed."""

    def __init__(self, source_name: str, reason: str):
        self.source_name = source_name
        self.reason = reason
        super().__init__(
            f"Error reading {source_name}: {reason}",
            details={"source_name": source_name},
        )


class ProviderInitError(PivotKarirError):
    """Raised when the embedding model cannot be loaded."""

    def __init__(self, model_name: str, reason: str):
        self.model_name = model_name
        super().__init__(
            f"Could not load embedding model {model_name}: {reason}",
            details={"model_name": model_name},
        )


class EmbeddingError(PivotKarirError):
    """Raised when the embedding model fails on a specific text."""

    def __init__(self, reason: str, text_length: Optional[int] = None):
        details = {}
        if text_length is not None:
            details["text_length"] = text_length
        super().__init__(f"Embedding failed: {reason}", details=details)


class InvalidScoreError(PivotKarirError):
    """Raised when a similarity score is NaN or infinite."""

    def __init__(self, subject: str, raw_score: float):
        self.subject = subject
        self.raw_score = raw_score
        super().__init__(
            f"Could not score {subject}: similarity is undefined "
            "(the profile text produced an empty embedding)",
            details={"subject": subject, "raw_score": str(raw_score)},
        )


class SessionNotReadyError(PivotKarirError):
    """Raised when a comparison is triggered before all profiles are loaded."""

    def __init__(self, missing: list[str]):
        self.missing = missing
        super().__init__(
            f"Load all profiles before comparing (missing: {', '.join(missing)})",
            details={"missing": missing},
        )
