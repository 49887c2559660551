"""Cache infrastructure providers."""

from collections.abc import AsyncIterator

import logfire
import redis.asyncio as redis
from dishka import Scope, provide

from board.adapter.cache import RedisCacheBackend
from board.config import CacheSettings
from board.domain.service import CacheBackend
from board.util.di.base import ProviderBase
from board.util.observability import instrument_redis


class CacheProvider(ProviderBase):
    """Cache component base."""

    __mock_component__ = "cache"


class ProdCacheProvider(CacheProvider):
    """Production cache provider using Redis."""

    __is_mock__ = False

    scope = Scope.APP

    @provide
    async def get_redis_client(
        self, settings: CacheSettings
    ) -> AsyncIterator[redis.Redis]:
        """Provide the shared Redis client, closed with the container."""
        instrument_redis()
        client = redis.from_url(
            settings.url,
            max_connections=settings.max_connections,
            socket_timeout=settings.socket_timeout,
            socket_connect_timeout=settings.socket_connect_timeout,
            decode_responses=True,
        )
        yield client
        await client.aclose()
        logfire.info("Redis client closed")

    @provide
    def get_cache_backend(self, client: redis.Redis) -> CacheBackend:
        """Provide the Redis cache backend."""
        return RedisCacheBackend(client)
