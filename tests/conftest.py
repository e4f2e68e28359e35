"""
Shared test fixtures for the PivotKarir test suite.

Sets environment variables before any pivotkarir imports so settings and
logging are test-safe, then provides profile factories and a deterministic
fake embedding provider so no model download is needed.
"""

import os

# === Set environment BEFORE any pivotkarir imports ===
os.environ.setdefault("APP_ENVIRONMENT", "testing")
os.environ.setdefault("ML_DEVICE", "cpu")
os.environ.setdefault("LOG_CONSOLE_OUTPUT", "false")
os.environ.setdefault("LOG_FILE_OUTPUT", "false")

import re
from typing import Any, Optional

import numpy as np
import pytest

from pivotkarir.core.matching import ComparisonSession, RankingBuilder
from pivotkarir.data.models import ProfileRecord
from pivotkarir.ml.embeddings import EmbeddingProviderGate, SemanticMatcher
from pivotkarir.utils.exceptions import EmbeddingError, ProviderInitError


# ---------------------------------------------------------------------------
# Fake embedding provider
# ---------------------------------------------------------------------------


class FakeEmbeddingProvider:
    """
    Bag-of-words embedder with a shared, collision-free vocabulary.

    Texts sharing more words get closer vectors. Empty text embeds to the
    zero vector.
    """

    DIMENSION = 128
    vocabulary: dict[str, int] = {}
    init_calls = 0

    def __init__(
        self,
        fail_init: bool = False,
        fail_embed: bool = False,
        zero_for: Optional[set[str]] = None,
    ):
        self.model_name = "fake-bag-of-words"
        self.device = "cpu"
        self.dimension = self.DIMENSION
        self.fail_init = fail_init
        self.fail_embed = fail_embed
        self.zero_for = zero_for or set()
        self.initialized = False
        self.embedded_texts: list[str] = []

    def initialize(self) -> "FakeEmbeddingProvider":
        type(self).init_calls += 1
        if self.fail_init:
            raise ProviderInitError(self.model_name, "network unreachable")
        self.initialized = True
        return self

    def embed(self, text: str) -> np.ndarray:
        if self.fail_embed:
            raise EmbeddingError("inference crashed", text_length=len(text))
        self.embedded_texts.append(text)
        vector = np.zeros(self.DIMENSION, dtype=np.float32)
        if text in self.zero_for:
            return vector
        for token in re.findall(r"\w+", text.lower()):
            index = self.vocabulary.setdefault(token, len(self.vocabulary))
            vector[index % self.DIMENSION] += 1.0
        norm = np.linalg.norm(vector)
        return vector / norm if norm else vector


@pytest.fixture(autouse=True)
def reset_fake_provider():
    FakeEmbeddingProvider.vocabulary = {}
    FakeEmbeddingProvider.init_calls = 0
    yield


@pytest.fixture
def fake_provider_cls():
    return FakeEmbeddingProvider


@pytest.fixture
def fake_gate():
    """Gate over a working fake provider."""
    return EmbeddingProviderGate(factory=FakeEmbeddingProvider)


@pytest.fixture
def matcher(fake_gate):
    return SemanticMatcher(gate=fake_gate)


@pytest.fixture
def ranking_builder():
    return RankingBuilder(high_threshold=70, medium_threshold=50)


@pytest.fixture
def notifications():
    return []


@pytest.fixture
def session(matcher, ranking_builder, notifications):
    return ComparisonSession(
        matcher=matcher,
        ranking=ranking_builder,
        notifier=notifications.append,
    )


# ---------------------------------------------------------------------------
# Profile fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def make_profile():
    """Factory that returns a callable to build ProfileRecords."""

    def _factory(**fields: Any) -> ProfileRecord:
        return ProfileRecord.model_validate(fields)

    return _factory


@pytest.fixture
def full_profile_data() -> dict[str, Any]:
    return {
        "name": "Dewi Lestari",
        "current_title": "Data Analyst",
        "title": "Analyst",
        "target_position": "Machine Learning Engineer",
        "target_industry": "Technology",
        "industry": "Banking",
        "company": "Bank Nusantara",
        "bio": "Five years turning transaction data into dashboards",
        "skills": ["python", "sql", "tableau"],
        "specialization": ["forecasting", "credit risk"],
    }


@pytest.fixture
def python_candidate(make_profile):
    return make_profile(skills=["python"])


@pytest.fixture
def ml_recruiter(make_profile):
    return make_profile(name="A", skills=["python", "ml"])


@pytest.fixture
def sales_recruiter(make_profile):
    return make_profile(name="B", skills=["sales"])
