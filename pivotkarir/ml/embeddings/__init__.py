"""
Sentence embeddings and similarity scoring.

Components:
- EmbeddingModel: Wrapper for sentence-transformers models
- EmbeddingProviderGate: One-time, shared provider initialization
- cosine_similarity / SemanticMatcher: Similarity computation
"""

from .embedding_model import (
    EmbeddingModel,
    EmbeddingProvider,
    EmbeddingProviderGate,
)

from .semantic_similarity import (
    SemanticMatcher,
    SubjectScores,
    cosine_similarity,
)

__all__ = [
    # Embedding model
    "EmbeddingModel",
    "EmbeddingProvider",
    "EmbeddingProviderGate",
    # Semantic matching
    "SemanticMatcher",
    "SubjectScores",
    "cosine_similarity",
]
