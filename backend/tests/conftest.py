"""Shared test configuration, pytest markers and embedding test doubles."""

import hashlib

import numpy as np
import pytest

from services.embedding import EmbeddingProvider


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "integration: loads the real sentence-transformers model (slow)"
    )


class FakeEncoder:
    """Deterministic stand-in for a SentenceTransformer.

    Each text maps to a seeded random unit vector, so distinct texts are
    nearly orthogonal. ``aliases`` makes texts share a vector (similarity
    1.0); ``vectors`` pins unit vectors that are returned as given, so
    threshold tests see exact dot products.
    """

    def __init__(self, aliases=None, vectors=None, dim=128):
        self.aliases = aliases or {}
        self.vectors = vectors or {}
        self.dim = dim
        self.calls: list[list[str]] = []

    def _vector(self, text):
        if text in self.vectors:
            return np.asarray(self.vectors[text], dtype=np.float64)
        key = self.aliases.get(text, text)
        seed = int(hashlib.sha256(key.encode("utf-8")).hexdigest()[:16], 16)
        v = np.random.default_rng(seed).standard_normal(self.dim)
        return v / np.linalg.norm(v)

    def encode(self, texts, convert_to_numpy=True, normalize_embeddings=True):
        self.calls.append(list(texts))
        return np.stack([self._vector(t) for t in texts])

    @property
    def encoded_texts(self):
        return [t for call in self.calls for t in call]


class BrokenEncoder:
    def encode(self, texts, **kwargs):
        raise RuntimeError("CUDA out of memory")


def make_provider(encoder=None, cache_size=500):
    encoder = encoder if encoder is not None else FakeEncoder()
    return EmbeddingProvider(
        model_name="fake-minilm",
        cache_size=cache_size,
        model_factory=lambda name: encoder,
    )


def make_unloadable_provider():
    def factory(name):
        raise OSError(f"Can't load model {name}")

    return EmbeddingProvider(model_name="missing-model", model_factory=factory)


@pytest.fixture
def encoder():
    return FakeEncoder()


@pytest.fixture
def provider(encoder):
    return make_provider(encoder)


@pytest.fixture
def broken_provider():
    return make_provider(BrokenEncoder())
