"""
Embedding model wrapper for generating text embeddings.

Uses the sentence-transformers library with mean pooling over token
embeddings and L2-normalized output. The model is loaded at most once per
session through EmbeddingProviderGate.
"""

import asyncio
from typing import Callable, Optional, Protocol

import numpy as np

from pivotkarir.utils.config import get_settings
from pivotkarir.utils.exceptions import EmbeddingError, ProviderInitError
from pivotkarir.utils.logger import get_logger

logger = get_logger(__name__)


class EmbeddingProvider(Protocol):
    """Text to vector capability used by the matcher."""

    model_name: str

    def initialize(self) -> "EmbeddingProvider":
        ...

    def embed(self, text: str) -> np.ndarray:
        ...


class EmbeddingModel:
    """
    Wrapper for sentence-transformers embedding models.

    Builds the model from a transformer module followed by an explicit
    pooling module, so the pooling mode does not depend on the model's
    published configuration.
    """

    def __init__(
        self,
        model_name: Optional[str] = None,
        device: Optional[str] = None,
    ):
        """
        Initialize the embedding model wrapper.

        Args:
            model_name: Name of the Hugging Face model to use.
                       Defaults to config setting.
            device: Device to run model on ('cpu', 'cuda', 'mps').
                   Defaults to config setting.
        """
        settings = get_settings()
        self.model_name = model_name or settings.ml.embedding_model
        self.device = device or settings.ml.device
        self.pooling = settings.ml.pooling
        self.normalize = settings.ml.normalize
        self.cache_directory = settings.ml.cache_directory
        self.dimension = settings.ml.embedding_dimension

        self._model = None
        self._initialized = False

    @property
    def is_initialized(self) -> bool:
        return self._initialized

    def initialize(self) -> "EmbeddingModel":
        """
        Load the model. Safe to call repeatedly.

        Returns:
            This instance, ready to embed.

        Raises:
            ProviderInitError: If the library is missing or the model cannot be loaded.
        """
        if self._initialized:
            return self

        try:
            from sentence_transformers import SentenceTransformer, models
        except ImportError as e:
            logger.error(
                "sentence-transformers not installed. "
                "Install with: pip install sentence-transformers"
            )
            raise ProviderInitError(self.model_name, "sentence-transformers is not installed") from e

        logger.info(f"Loading embedding model: {self.model_name}")
        try:
            transformer = models.Transformer(
                self.model_name,
                cache_dir=str(self.cache_directory) if self.cache_directory else None,
            )
            pooling = models.Pooling(
                transformer.get_word_embedding_dimension(),
                pooling_mode=self.pooling,
            )
            self._model = SentenceTransformer(
                modules=[transformer, pooling],
                device=self.device,
            )
        except Exception as e:
            logger.error(f"Failed to load embedding model: {e}")
            raise ProviderInitError(self.model_name, str(e)) from e

        self.dimension = pooling.get_sentence_embedding_dimension()
        self._initialized = True
        logger.info(f"Embedding model loaded on device: {self.device} (dim={self.dimension})")
        return self

    def embed(self, text: str) -> np.ndarray:
        """
        Generate the embedding for one text.

        Args:
            text: Text to encode. May be empty.

        Returns:
            1-D numpy array of length `dimension`.

        Raises:
            EmbeddingError: If inference fails.
        """
        if not self._initialized:
            self.initialize()

        try:
            embedding = self._model.encode(
                text,
                show_progress_bar=False,
                normalize_embeddings=self.normalize,
                convert_to_numpy=True,
            )
        except Exception as e:
            logger.error(f"Embedding failed for text of length {len(text)}: {e}")
            raise EmbeddingError(str(e), text_length=len(text)) from e

        return np.asarray(embedding, dtype=np.float32).reshape(-1)


class EmbeddingProviderGate:
    """
    Lazily creates one embedding provider and shares it.

    Callers that arrive while initialization is in flight await that same
    attempt. A failed attempt is forgotten, so the next call starts over.
    """

    def __init__(self, factory: Optional[Callable[[], EmbeddingProvider]] = None):
        """
        Args:
            factory: Builds an uninitialized provider. Defaults to EmbeddingModel.
        """
        self._factory = factory or EmbeddingModel
        self._provider: Optional[EmbeddingProvider] = None
        self._pending: Optional[asyncio.Task] = None

    @property
    def is_ready(self) -> bool:
        return self._provider is not None

    async def ensure_ready(self) -> EmbeddingProvider:
        """
        Return the shared provider, initializing it on first use.

        Raises:
            ProviderInitError: If initialization fails.
        """
        if self._provider is not None:
            return self._provider

        if self._pending is None:
            self._pending = asyncio.create_task(self._initialize())
        else:
            logger.debug("Embedding provider initialization in flight, waiting")
        pending = self._pending

        try:
            provider = await pending
        finally:
            if self._pending is pending:
                self._pending = None

        self._provider = provider
        return provider

    async def _initialize(self) -> EmbeddingProvider:
        provider = self._factory()
        await asyncio.to_thread(provider.initialize)
        return provider
