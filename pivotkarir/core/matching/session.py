"""
Comparison session.

Holds the three profile slots of one session and runs comparisons:
ensure the embedding model is ready, embed, score, rank. Failures are
reported through the notifier and leave the loaded profiles in place so
the user can retry.
"""

import asyncio
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Optional

from pivotkarir.data.models import ComparisonResult, ProfileRecord
from pivotkarir.ml.embeddings import SemanticMatcher
from pivotkarir.ml.nlp import ProfileLoader
from pivotkarir.utils.constants import ComparisonState, ProfileSlot
from pivotkarir.utils.exceptions import (
    ParseError,
    PivotKarirError,
    SessionNotReadyError,
)
from pivotkarir.utils.logger import LoggerMixin, audit_log

from .ranking import RankingBuilder

Notifier = Callable[[str], None]


@dataclass
class ProfileSlots:
    """The candidate and the two recruiter profiles of a session."""

    candidate: Optional[ProfileRecord] = None
    subject_a: Optional[ProfileRecord] = None
    subject_b: Optional[ProfileRecord] = None
    source_names: dict[ProfileSlot, str] = field(default_factory=dict)

    def get(self, slot: ProfileSlot) -> Optional[ProfileRecord]:
        return getattr(self, slot.value)

    def set(self, slot: ProfileSlot, profile: ProfileRecord, source_name: str) -> None:
        setattr(self, slot.value, profile)
        self.source_names[slot] = source_name

    def missing(self) -> list[ProfileSlot]:
        return [slot for slot in ProfileSlot if self.get(slot) is None]

    @property
    def filled_count(self) -> int:
        return len(ProfileSlot) - len(self.missing())

    def is_ready(self) -> bool:
        """True when all three slots hold a parsed profile."""
        return not self.missing()


class ComparisonSession(LoggerMixin):
    """
    State machine for one user's comparison session.

    IDLE -> LOADING -> READY -> COMPARING -> DONE | FAILED. DONE and FAILED
    both allow another comparison; replacing a profile afterwards returns
    the session to READY.
    """

    def __init__(
        self,
        matcher: Optional[SemanticMatcher] = None,
        ranking: Optional[RankingBuilder] = None,
        loader: Optional[ProfileLoader] = None,
        notifier: Optional[Notifier] = None,
    ):
        """
        Args:
            matcher: Scores profiles; owns the shared embedding provider gate.
            ranking: Builds the ranked result. Defaults to configured thresholds.
            loader: Parses profile documents.
            notifier: Receives user-facing error messages. Defaults to logging them.
        """
        self.matcher = matcher or SemanticMatcher()
        self.ranking = ranking or RankingBuilder()
        self.loader = loader or ProfileLoader()
        self.notifier = notifier or (lambda message: self.logger.warning(message))

        self.slots = ProfileSlots()
        self.last_result: Optional[ComparisonResult] = None
        self.last_error: Optional[PivotKarirError] = None
        self._state = ComparisonState.IDLE
        self._running = 0

    @property
    def state(self) -> ComparisonState:
        return self._state

    @property
    def can_compare(self) -> bool:
        """Whether the comparison trigger is enabled."""
        return self._state in (
            ComparisonState.READY,
            ComparisonState.DONE,
            ComparisonState.FAILED,
        )

    def _refresh_loading_state(self) -> None:
        if self.slots.is_ready():
            self._state = ComparisonState.READY
        elif self.slots.filled_count:
            self._state = ComparisonState.LOADING
        else:
            self._state = ComparisonState.IDLE

    def _store(self, slot: ProfileSlot, profile: ProfileRecord, source_name: str) -> ProfileRecord:
        self.slots.set(slot, profile, source_name)
        self.last_result = None
        self.last_error = None
        if self._state != ComparisonState.COMPARING:
            self._refresh_loading_state()
        self.logger.info(
            f"Loaded {slot.label} from {source_name} "
            f"({self.slots.filled_count}/{len(ProfileSlot)} profiles)"
        )
        return profile

    def _report_parse_error(self, slot: ProfileSlot, error: ParseError) -> None:
        self.logger.warning(f"Could not load {slot.label}: {error.message}")
        self.notifier(error.message)

    def load_profile(
        self,
        slot: ProfileSlot,
        content: str | bytes,
        source_name: str = "document",
    ) -> ProfileRecord:
        """
        Parse a document into a slot.

        A document that fails to parse leaves the slot unchanged.

        Raises:
            ParseError: If the document is malformed.
        """
        try:
            if isinstance(content, bytes):
                profile = self.loader.load_bytes(content, source_name)
            else:
                profile = self.loader.load_text(content, source_name)
        except ParseError as e:
            self._report_parse_error(slot, e)
            raise
        return self._store(slot, profile, source_name)

    async def load_profile_file(self, slot: ProfileSlot, path: str | Path) -> ProfileRecord:
        """Read and parse a document from disk into a slot."""
        path = Path(path)
        try:
            profile = await asyncio.to_thread(self.loader.load_file, path)
        except ParseError as e:
            self._report_parse_error(slot, e)
            raise
        return self._store(slot, profile, path.name)

    async def compare(self) -> ComparisonResult:
        """
        Run one comparison over the loaded profiles.

        Returns:
            The ranked result, also kept as `last_result`.

        Raises:
            SessionNotReadyError: If a profile slot is still empty.
            ProviderInitError, EmbeddingError, InvalidScoreError: On failure;
                the session is left in FAILED and may be retried.
        """
        missing = self.slots.missing()
        if missing:
            raise SessionNotReadyError([slot.label for slot in missing])

        candidate = self.slots.candidate
        subject_a = self.slots.subject_a
        subject_b = self.slots.subject_b

        self._state = ComparisonState.COMPARING
        self._running += 1
        self.logger.info("Comparing profiles")
        try:
            scores = await self.matcher.compute_scores(candidate, subject_a, subject_b)
            result = self.ranking.build(
                (subject_a, scores.subject_a),
                (subject_b, scores.subject_b),
                source_names=dict(self.slots.source_names),
                model_used=scores.model_used,
            )
        except PivotKarirError as e:
            self._running -= 1
            self._fail(e)
            raise
        except BaseException:
            self._running -= 1
            if not self._running:
                self._refresh_loading_state()
            raise

        self._running -= 1
        self.last_result = result
        self.last_error = None
        if not self._running:
            self._state = ComparisonState.DONE

        top = result.top_match
        self.logger.info(f"Comparison done: top match {top.display_name} at {top.score}%")
        audit_log(
            "comparison_completed",
            {
                "model": result.model_used,
                "ranking": [
                    {"name": s.display_name, "score": s.score, "level": s.level}
                    for s in result.ranked
                ],
            },
        )
        return result

    def _fail(self, error: PivotKarirError) -> None:
        self.last_error = error
        self.last_result = None
        if not self._running:
            self._state = ComparisonState.FAILED
        self.logger.error(f"Comparison failed: {error.message}")
        audit_log("comparison_failed", error.to_dict(), audit_type="FAILURE")
        self.notifier(f"Error during comparison: {error.message}")
