"""
Semantic similarity computation for candidate-recruiter matching.

Provides cosine similarity over embedding vectors and a matcher that
embeds the candidate and both recruiter profiles and scores them.
"""

import asyncio
from dataclasses import dataclass
from typing import Optional, Sequence

import numpy as np

from pivotkarir.data.models import ProfileRecord
from pivotkarir.ml.nlp import create_profile_text
from pivotkarir.utils.constants import ProfileSlot
from pivotkarir.utils.logger import get_logger

from .embedding_model import EmbeddingProvider, EmbeddingProviderGate

logger = get_logger(__name__)


def cosine_similarity(a: Sequence[float], b: Sequence[float]) -> float:
    """
    Calculate cosine similarity between two vectors.

    Norms are computed independently, so the result does not rely on the
    inputs being normalized.

    Args:
        a: First vector.
        b: Second vector, same length as `a`.

    Returns:
        Similarity in [-1, 1], or NaN if either vector is all zeros.
    """
    vec_a = np.asarray(a, dtype=np.float64)
    vec_b = np.asarray(b, dtype=np.float64)
    assert vec_a.ndim == 1 and vec_b.ndim == 1, "embeddings must be 1-D"
    assert len(vec_a) == len(vec_b), f"dimension mismatch: {len(vec_a)} != {len(vec_b)}"

    norm_a = float(np.linalg.norm(vec_a))
    norm_b = float(np.linalg.norm(vec_b))
    if norm_a == 0.0 or norm_b == 0.0:
        return float("nan")

    sim = float(np.dot(vec_a, vec_b)) / (norm_a * norm_b)
    # Clip to valid range (numerical precision issues)
    return float(np.clip(sim, -1.0, 1.0))


@dataclass
class SubjectScores:
    """Raw similarity of each recruiter to the candidate."""

    subject_a: float
    subject_b: float
    model_used: str = ""


class SemanticMatcher:
    """
    Scores two recruiter profiles against a candidate profile.

    Profiles are rendered to text, embedded in the order candidate,
    recruiter 1, recruiter 2, and compared with cosine similarity.
    """

    def __init__(self, gate: Optional[EmbeddingProviderGate] = None):
        """
        Args:
            gate: Shared provider gate. A new gate over EmbeddingModel by default.
        """
        self.gate = gate or EmbeddingProviderGate()

    async def embed_text(self, provider: EmbeddingProvider, text: str) -> np.ndarray:
        """Embed one text off the event loop."""
        return await asyncio.to_thread(provider.embed, text)

    async def compute_scores(
        self,
        candidate: ProfileRecord,
        subject_a: ProfileRecord,
        subject_b: ProfileRecord,
    ) -> SubjectScores:
        """
        Compute raw similarity scores for both recruiters.

        Raises:
            ProviderInitError: If the embedding model cannot be loaded.
            EmbeddingError: If any profile fails to embed.
        """
        provider = await self.gate.ensure_ready()

        embeddings: dict[ProfileSlot, np.ndarray] = {}
        for slot, profile in (
            (ProfileSlot.CANDIDATE, candidate),
            (ProfileSlot.SUBJECT_A, subject_a),
            (ProfileSlot.SUBJECT_B, subject_b),
        ):
            text = create_profile_text(profile)
            if not text:
                logger.warning(f"Profile text for {slot.label} is empty")
            logger.debug(f"Embedding {slot.value} ({len(text)} chars)")
            embeddings[slot] = await self.embed_text(provider, text)

        candidate_embedding = embeddings[ProfileSlot.CANDIDATE]
        scores = SubjectScores(
            subject_a=cosine_similarity(candidate_embedding, embeddings[ProfileSlot.SUBJECT_A]),
            subject_b=cosine_similarity(candidate_embedding, embeddings[ProfileSlot.SUBJECT_B]),
            model_used=getattr(provider, "model_name", ""),
        )
        logger.debug(f"Raw similarity: subject_a={scores.subject_a:.4f}, subject_b={scores.subject_b:.4f}")
        return scores
