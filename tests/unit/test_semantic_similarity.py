"""
Tests for pivotkarir.ml.embeddings.semantic_similarity — cosine_similarity
and SemanticMatcher.
"""

import math

import numpy as np
import pytest

from pivotkarir.ml.embeddings import EmbeddingProviderGate, SemanticMatcher, cosine_similarity
from pivotkarir.utils.exceptions import EmbeddingError, ProviderInitError


# ── cosine_similarity ────────────────────────────────────────────────────────


class TestCosineSimilarity:
    def test_self_similarity(self):
        v = [0.3, -1.2, 4.0, 0.05]
        assert cosine_similarity(v, v) == pytest.approx(1.0, abs=1e-6)

    def test_self_similarity_random(self):
        rng = np.random.default_rng(7)
        for _ in range(10):
            v = rng.normal(size=384)
            assert cosine_similarity(v, v) == pytest.approx(1.0, abs=1e-6)

    def test_symmetry(self):
        rng = np.random.default_rng(11)
        a = rng.normal(size=32)
        b = rng.normal(size=32)
        assert cosine_similarity(a, b) == pytest.approx(cosine_similarity(b, a))

    def test_orthogonal(self):
        assert cosine_similarity([1, 0], [0, 1]) == pytest.approx(0.0)

    def test_opposite(self):
        assert cosine_similarity([1, 2], [-1, -2]) == pytest.approx(-1.0)

    def test_unnormalized_inputs(self):
        # Same direction, different lengths
        assert cosine_similarity([3, 4], [6, 8]) == pytest.approx(1.0)

    def test_known_value(self):
        assert cosine_similarity([1, 1], [1, 0]) == pytest.approx(1 / math.sqrt(2))

    def test_zero_vector_is_nan(self):
        assert math.isnan(cosine_similarity([0, 0, 0], [1, 2, 3]))

    def test_both_zero_is_nan(self):
        assert math.isnan(cosine_similarity([0, 0], [0, 0]))

    def test_length_mismatch_fails_fast(self):
        with pytest.raises(AssertionError):
            cosine_similarity([1, 0, 0], [1, 0])

    def test_accepts_numpy_float32(self):
        a = np.array([0.6, 0.8], dtype=np.float32)
        assert cosine_similarity(a, a) == pytest.approx(1.0, abs=1e-6)

    def test_returns_python_float(self):
        assert isinstance(cosine_similarity([1, 0], [1, 1]), float)


# ── SemanticMatcher ─────────────────────────────────────────────────────────


class TestSemanticMatcher:
    @pytest.mark.asyncio
    async def test_closer_profile_scores_higher(
        self, matcher, python_candidate, ml_recruiter, sales_recruiter
    ):
        scores = await matcher.compute_scores(python_candidate, ml_recruiter, sales_recruiter)
        assert scores.subject_a > scores.subject_b
        assert scores.subject_a == pytest.approx(1 / math.sqrt(2), abs=1e-6)

    @pytest.mark.asyncio
    async def test_embeds_in_slot_order(
        self, fake_gate, python_candidate, ml_recruiter, sales_recruiter
    ):
        matcher = SemanticMatcher(gate=fake_gate)
        await matcher.compute_scores(python_candidate, ml_recruiter, sales_recruiter)
        provider = await fake_gate.ensure_ready()
        assert provider.embedded_texts == [
            "Skills: python. ",
            "A. Skills: python, ml. ",
            "B. Skills: sales. ",
        ]

    @pytest.mark.asyncio
    async def test_records_model_name(self, matcher, python_candidate, ml_recruiter, sales_recruiter):
        scores = await matcher.compute_scores(python_candidate, ml_recruiter, sales_recruiter)
        assert scores.model_used == "fake-bag-of-words"

    @pytest.mark.asyncio
    async def test_empty_profile_gives_nan(self, matcher, make_profile, ml_recruiter):
        scores = await matcher.compute_scores(make_profile(), ml_recruiter, ml_recruiter)
        assert math.isnan(scores.subject_a)
        assert math.isnan(scores.subject_b)

    @pytest.mark.asyncio
    async def test_init_failure_propagates(self, fake_provider_cls, python_candidate, ml_recruiter):
        gate = EmbeddingProviderGate(factory=lambda: fake_provider_cls(fail_init=True))
        matcher = SemanticMatcher(gate=gate)
        with pytest.raises(ProviderInitError):
            await matcher.compute_scores(python_candidate, ml_recruiter, ml_recruiter)

    @pytest.mark.asyncio
    async def test_embedding_failure_propagates(self, fake_provider_cls, python_candidate, ml_recruiter):
        gate = EmbeddingProviderGate(factory=lambda: fake_provider_cls(fail_embed=True))
        matcher = SemanticMatcher(gate=gate)
        with pytest.raises(EmbeddingError):
            await matcher.compute_scores(python_candidate, ml_recruiter, ml_recruiter)
