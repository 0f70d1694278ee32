"""Tests for the embedding provider and its LRU cache."""

import asyncio
import time
from concurrent.futures import ThreadPoolExecutor

import numpy as np
import pytest

from services.embedding import (
    EmbeddingProvider,
    EmbeddingUnavailableError,
    VectorLengthMismatchError,
)
from services.lru_cache import EmbeddingCache

from conftest import FakeEncoder, make_provider, make_unloadable_provider


class TestEmbeddingCache:
    def test_evicts_oldest_insertion(self):
        cache = EmbeddingCache(max_size=2)
        cache.put("a", np.ones(2))
        cache.put("b", np.ones(2))
        cache.put("c", np.ones(2))
        assert "a" not in cache
        assert cache.keys() == ["b", "c"]

    def test_hit_refreshes_recency(self):
        cache = EmbeddingCache(max_size=2)
        cache.put("a", np.ones(2))
        cache.put("b", np.ones(2))
        assert cache.get("a") is not None
        cache.put("c", np.ones(2))
        assert "b" not in cache
        assert cache.keys() == ["a", "c"]

    def test_miss_returns_none(self):
        assert EmbeddingCache(max_size=1).get("nothing") is None

    def test_rejects_zero_size(self):
        with pytest.raises(ValueError):
            EmbeddingCache(max_size=0)

    def test_concurrent_access_keeps_bound(self):
        cache = EmbeddingCache(max_size=50)
        seen = []

        def worker(n):
            for i in range(200):
                key = f"{n}-{i}"
                cache.put(key, np.ones(2))
                assert len(cache) <= 50
                cache.get(key)
                seen.append(key in cache)

        with ThreadPoolExecutor(max_workers=8) as pool:
            list(pool.map(worker, range(8)))
        assert len(cache) == 50
        assert len(cache.keys()) == 50
        assert len(seen) == 1600


class TestEmbed:
    @pytest.mark.asyncio
    async def test_returns_unit_vector(self, provider):
        vec = await provider.embed("python")
        assert np.linalg.norm(vec) == pytest.approx(1.0)

    @pytest.mark.asyncio
    async def test_cache_hit_does_not_recompute(self, provider, encoder):
        first = await provider.embed("react")
        second = await provider.embed("react")
        assert encoder.encoded_texts == ["react"]
        assert np.array_equal(first, second)

    @pytest.mark.asyncio
    async def test_batch_encodes_only_misses(self, provider, encoder):
        await provider.embed("react")
        vectors = await provider.embed_batch(["react", "vue", "vue", "angular"])
        assert len(vectors) == 4
        assert encoder.encoded_texts == ["react", "vue", "angular"]
        assert len(encoder.calls) == 2

    @pytest.mark.asyncio
    async def test_cache_never_exceeds_bound(self, provider):
        await provider.embed_batch([f"skill {i}" for i in range(600)])
        assert len(provider.cache) == 500
        assert "skill 99" not in provider.cache
        assert "skill 100" in provider.cache

    @pytest.mark.asyncio
    async def test_least_recently_accessed_is_evicted(self, encoder):
        provider = make_provider(encoder, cache_size=3)
        for text in ("a", "b", "c"):
            await provider.embed(text)
        await provider.embed("a")
        await provider.embed("d")
        assert provider.cache.keys() == ["c", "a", "d"]


class TestInitialize:
    @pytest.mark.asyncio
    async def test_concurrent_callers_share_one_load(self):
        loads = []

        def slow_factory(name):
            loads.append(name)
            time.sleep(0.05)
            return FakeEncoder()

        provider = EmbeddingProvider(model_name="fake", model_factory=slow_factory)
        await asyncio.gather(*(provider.initialize() for _ in range(5)))
        assert loads == ["fake"]
        assert provider.is_loaded

    @pytest.mark.asyncio
    async def test_initialize_is_idempotent(self, provider):
        await provider.initialize()
        await provider.initialize()
        assert provider.is_loaded

    @pytest.mark.asyncio
    async def test_load_failure_raises_provider_error(self):
        provider = make_unloadable_provider()
        with pytest.raises(EmbeddingUnavailableError):
            await provider.embed("python")
        assert not provider.is_loaded

    @pytest.mark.asyncio
    async def test_inference_failure_raises_provider_error(self, broken_provider):
        with pytest.raises(EmbeddingUnavailableError):
            await broken_provider.embed("python")
        assert len(broken_provider.cache) == 0


class TestTryEmbedBatch:
    @pytest.mark.asyncio
    async def test_ok_result(self, provider):
        result = await provider.try_embed_batch(["python", "java"])
        assert result.ok
        assert len(result.vectors) == 2

    @pytest.mark.asyncio
    async def test_degraded_result_carries_reason(self):
        result = await make_unloadable_provider().try_embed_batch(["python"])
        assert result.degraded
        assert not result.ok
        assert result.vectors == []
        assert "missing-model" in result.reason


class TestSimilarity:
    def test_dot_product_of_unit_vectors(self):
        a = np.array([1.0, 0.0])
        b = np.array([0.6, 0.8])
        assert EmbeddingProvider.similarity(a, b) == pytest.approx(0.6)

    def test_identical_vectors(self):
        v = np.array([0.6, 0.8])
        assert EmbeddingProvider.similarity(v, v) == pytest.approx(1.0)

    def test_length_mismatch_raises(self):
        with pytest.raises(VectorLengthMismatchError):
            EmbeddingProvider.similarity(np.ones(3), np.ones(4))

    def test_length_mismatch_is_not_a_provider_error(self):
        assert not issubclass(VectorLengthMismatchError, EmbeddingUnavailableError)
        assert issubclass(VectorLengthMismatchError, ValueError)
