"""Sentence-embedding provider with lazy model loading and an LRU cache.

The provider is constructed explicitly and handed to the matcher and
scorer, so tests can pass a fake ``model_factory`` instead of loading
a real SentenceTransformer (~90MB for all-MiniLM-L6-v2).
"""

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Sequence

import numpy as np

from services.lru_cache import EmbeddingCache

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "sentence-transformers/all-MiniLM-L6-v2"


class EmbeddingUnavailableError(RuntimeError):
    """The embedding model could not be loaded or failed during inference."""


class VectorLengthMismatchError(ValueError):
    """Two vectors of different dimensionality were compared."""


@dataclass(frozen=True)
class EmbeddingResult:
    """Outcome of a batch embedding request.

    Either ``vectors`` holds one vector per input text, or ``degraded`` is
    set and ``reason`` explains why the provider could not serve it.
    """
    vectors: list[np.ndarray] = field(default_factory=list)
    degraded: bool = False
    reason: str = ""

    @property
    def ok(self) -> bool:
        return not self.degraded


def _load_sentence_transformer(model_name: str) -> Any:
    from sentence_transformers import SentenceTransformer

    return SentenceTransformer(model_name)


class EmbeddingProvider:
    """Turns text into L2-normalised vectors (dot product == cosine)."""

    def __init__(
        self,
        model_name: str = DEFAULT_MODEL,
        cache_size: int = 500,
        model_factory: Callable[[str], Any] | None = None,
    ) -> None:
        self.model_name = model_name
        self._model_factory = model_factory or _load_sentence_transformer
        self._model: Any = None
        self._init_lock = asyncio.Lock()
        self.cache = EmbeddingCache(cache_size)

    @property
    def is_loaded(self) -> bool:
        return self._model is not None

    async def initialize(self) -> None:
        """Load the model once; concurrent callers wait for the same load."""
        if self._model is not None:
            return
        async with self._init_lock:
            if self._model is not None:
                return
            logger.info("Loading embedding model: %s", self.model_name)
            try:
                self._model = await asyncio.to_thread(self._model_factory, self.model_name)
            except Exception as e:
                logger.warning("Failed to load embedding model %s: %s", self.model_name, e)
                raise EmbeddingUnavailableError(
                    f"Embedding model {self.model_name!r} could not be loaded"
                ) from e
            logger.info("Embedding model loaded: %s", self.model_name)

    async def _encode(self, texts: list[str]) -> list[np.ndarray]:
        await self.initialize()
        try:
            # Mean pooling is part of the model's pooling module
            encoded = await asyncio.to_thread(
                self._model.encode,
                texts,
                convert_to_numpy=True,
                normalize_embeddings=True,
            )
        except Exception as e:
            logger.warning("Embedding inference failed: %s", e)
            raise EmbeddingUnavailableError("Embedding inference failed") from e
        return [np.asarray(row, dtype=np.float64) for row in encoded]

    async def embed(self, text: str) -> np.ndarray:
        """Return the embedding for ``text``, serving repeats from the cache."""
        cached = self.cache.get(text)
        if cached is not None:
            return cached
        vector = (await self._encode([text]))[0]
        self.cache.put(text, vector)
        return vector

    async def embed_batch(self, texts: Sequence[str]) -> list[np.ndarray]:
        """Embed many texts, encoding all cache misses in a single model call."""
        vectors = [self.cache.get(t) for t in texts]
        missing = list(dict.fromkeys(t for t, v in zip(texts, vectors) if v is None))
        if not missing:
            return vectors

        fresh = dict(zip(missing, await self._encode(missing)))
        for text in missing:
            self.cache.put(text, fresh[text])
        return [v if v is not None else fresh[t] for t, v in zip(texts, vectors)]

    async def try_embed_batch(self, texts: Sequence[str]) -> EmbeddingResult:
        """Like ``embed_batch`` but reports provider failure instead of raising."""
        try:
            return EmbeddingResult(vectors=await self.embed_batch(texts))
        except EmbeddingUnavailableError as e:
            reason = f"{e}: {e.__cause__}" if e.__cause__ else str(e)
            return EmbeddingResult(degraded=True, reason=reason)

    @staticmethod
    def similarity(vec_a: np.ndarray, vec_b: np.ndarray) -> float:
        """Cosine similarity of two normalised vectors."""
        if len(vec_a) != len(vec_b):
            raise VectorLengthMismatchError(
                f"Vectors must have the same length ({len(vec_a)} != {len(vec_b)})"
            )
        return float(np.dot(vec_a, vec_b))
