"""Unit tests for CacheService."""

import pytest
from pydantic import TypeAdapter

from board.adapter.cache import InMemoryCacheBackend
from board.domain.service import CacheService, CommentService

from tests.harness import create_env_fixture

unit_env = create_env_fixture()

_INT_LIST = TypeAdapter(list[int])


class CountingLoader:
    """Compute callback that records how often it ran."""

    def __init__(self, value):
        self.value = value
        self.calls = 0

    async def __call__(self):
        self.calls += 1
        return self.value


class TestReadThrough:
    """Tests for read-through caching."""

    @pytest.mark.asyncio
    async def test_computes_once_then_hits(self):
        service = CacheService(InMemoryCacheBackend(), ttl_seconds=60)
        loader = CountingLoader([1, 2, 3])

        first = await service.read_through("numbers", loader, _INT_LIST)
        second = await service.read_through("numbers", loader, _INT_LIST)

        assert first == second == [1, 2, 3]
        assert loader.calls == 1

    @pytest.mark.asyncio
    async def test_compute_errors_are_not_cached(self):
        backend = InMemoryCacheBackend()
        service = CacheService(backend)

        async def failing():
            raise LookupError("gone")

        with pytest.raises(LookupError):
            await service.read_through("numbers", failing, _INT_LIST)

        assert backend.keys() == []

    @pytest.mark.asyncio
    async def test_key_prefix_is_applied(self):
        backend = InMemoryCacheBackend()
        service = CacheService(backend, key_prefix="test:")

        await service.read_through("numbers", CountingLoader([1]), _INT_LIST)

        assert backend.keys() == ["test:numbers"]

    @pytest.mark.asyncio
    async def test_undecodable_entry_is_recomputed(self):
        backend = InMemoryCacheBackend()
        service = CacheService(backend)
        await backend.set("numbers", "not json", 60)
        loader = CountingLoader([4])

        value = await service.read_through("numbers", loader, _INT_LIST)

        assert value == [4]
        assert loader.calls == 1
        assert await backend.get("numbers") == "[4]"

    @pytest.mark.asyncio
    async def test_fill_skipped_when_invalidated_during_compute(self):
        backend = InMemoryCacheBackend()
        service = CacheService(backend)

        async def mutate_while_loading():
            await service.invalidate("numbers")
            return [1]

        value = await service.read_through("numbers", mutate_while_loading, _INT_LIST)

        assert value == [1]
        assert backend.keys() == []

    @pytest.mark.asyncio
    async def test_fill_resumes_after_invalidation(self):
        backend = InMemoryCacheBackend()
        service = CacheService(backend)
        await service.invalidate("numbers")
        loader = CountingLoader([2])

        await service.read_through("numbers", loader, _INT_LIST)
        await service.read_through("numbers", loader, _INT_LIST)

        assert loader.calls == 1

    @pytest.mark.asyncio
    async def test_expired_entry_is_recomputed(self):
        backend = InMemoryCacheBackend()
        service = CacheService(backend, ttl_seconds=0)
        loader = CountingLoader([1])

        await service.read_through("numbers", loader, _INT_LIST)
        await service.read_through("numbers", loader, _INT_LIST)

        assert loader.calls == 2


class TestUnavailableCache:
    """The cache never turns an outage into an error."""

    @pytest.mark.asyncio
    async def test_read_falls_through_to_compute(self):
        backend = InMemoryCacheBackend()
        backend.available = False
        service = CacheService(backend)
        loader = CountingLoader([1])

        assert await service.read_through("numbers", loader, _INT_LIST) == [1]
        assert await service.read_through("numbers", loader, _INT_LIST) == [1]
        assert loader.calls == 2

    @pytest.mark.asyncio
    async def test_invalidate_is_a_no_op(self):
        backend = InMemoryCacheBackend()
        backend.available = False
        service = CacheService(backend)

        await service.invalidate("numbers", "comments:*")

    @pytest.mark.asyncio
    async def test_increment_returns_none(self):
        backend = InMemoryCacheBackend()
        backend.available = False
        service = CacheService(backend)

        assert await service.increment("counter", 60) is None
        assert await service.is_available() is False

    @pytest.mark.asyncio
    async def test_comment_reads_survive_outage(self, unit_env, alice):
        comments = await unit_env.get(CommentService)
        cache = await unit_env.get(CacheService)
        await comments.create_comment(alice, "hello")
        cache.backend.available = False

        threads = await comments.list_top_level()
        await comments.create_comment(alice, "second")

        assert [c.content for c in threads] == ["hello"]


class TestInvalidate:
    """Tests for explicit invalidation."""

    @pytest.mark.asyncio
    async def test_exact_keys(self):
        backend = InMemoryCacheBackend()
        service = CacheService(backend)
        await backend.set("a", "1", 60)
        await backend.set("b", "2", 60)

        await service.invalidate("a")

        assert backend.keys() == ["b"]

    @pytest.mark.asyncio
    async def test_patterns(self):
        backend = InMemoryCacheBackend()
        service = CacheService(backend)
        await backend.set("comments:all", "[]", 60)
        await backend.set("comments:1", "{}", 60)
        await backend.set("ratelimit:1.2.3.4", "3", 60)

        await service.invalidate("comments:*")

        assert backend.keys() == ["ratelimit:1.2.3.4"]
