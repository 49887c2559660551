"""Cache backend implementations.

Both backends translate every failure into ``CacheFailureError`` so the
cache service can degrade uniformly.
"""

import asyncio
import fnmatch
import time

import logfire
import redis.asyncio as redis

from board.domain.error import CacheFailureError
from board.domain.service.cache_service import CacheBackend

_REDIS_FAILURES = (redis.RedisError, OSError, asyncio.TimeoutError)


class RedisCacheBackend(CacheBackend):
    """Redis-backed cache.

    Expects a client created with ``decode_responses=True`` and socket
    timeouts, so a slow server fails fast instead of stalling requests.
    """

    def __init__(self, client: redis.Redis) -> None:
        """Initialize Redis backend.

        Args:
            client: Shared asyncio Redis client
        """
        self.client = client

    async def get(self, key: str) -> str | None:
        try:
            return await self.client.get(key)
        except _REDIS_FAILURES as e:
            raise CacheFailureError(f"GET {key} failed: {e}") from e

    async def set(self, key: str, value: str, ttl_seconds: int) -> None:
        try:
            await self.client.set(key, value, ex=ttl_seconds)
        except _REDIS_FAILURES as e:
            raise CacheFailureError(f"SET {key} failed: {e}") from e

    async def delete(self, *keys: str) -> None:
        if not keys:
            return
        try:
            await self.client.delete(*keys)
        except _REDIS_FAILURES as e:
            raise CacheFailureError(f"DEL failed: {e}") from e

    async def delete_pattern(self, pattern: str) -> None:
        """Delete keys matching ``pattern`` using SCAN (never KEYS)."""
        try:
            batch: list[str] = []
            async for key in self.client.scan_iter(match=pattern, count=100):
                batch.append(key)
                if len(batch) >= 100:
                    await self.client.delete(*batch)
                    batch = []
            if batch:
                await self.client.delete(*batch)
        except _REDIS_FAILURES as e:
            raise CacheFailureError(f"Pattern delete {pattern} failed: {e}") from e

    async def increment(self, key: str, ttl_seconds: int) -> int:
        try:
            count = int(await self.client.incr(key))
            if count == 1:
                await self.client.expire(key, ttl_seconds)
            return count
        except _REDIS_FAILURES as e:
            raise CacheFailureError(f"INCR {key} failed: {e}") from e

    async def counter(self, key: str) -> int:
        try:
            value = await self.client.get(key)
        except _REDIS_FAILURES as e:
            raise CacheFailureError(f"GET {key} failed: {e}") from e
        return int(value) if value is not None else 0

    async def ping(self) -> bool:
        try:
            return bool(await self.client.ping())
        except _REDIS_FAILURES as e:
            logfire.warn("Redis ping failed", error=str(e))
            return False


class InMemoryCacheBackend(CacheBackend):
    """Process-local cache for tests and local development.

    Honours TTLs lazily on read. ``available`` can be switched off to
    simulate an outage.
    """

    def __init__(self) -> None:
        self._entries: dict[str, tuple[str, float]] = {}
        self._counters: dict[str, tuple[int, float]] = {}
        self.available = True

    def _check(self) -> None:
        if not self.available:
            raise CacheFailureError("In-memory cache marked unavailable")

    def _expired(self, expires_at: float) -> bool:
        return expires_at <= time.monotonic()

    async def get(self, key: str) -> str | None:
        self._check()
        entry = self._entries.get(key)
        if entry is None:
            return None
        value, expires_at = entry
        if self._expired(expires_at):
            del self._entries[key]
            return None
        return value

    async def set(self, key: str, value: str, ttl_seconds: int) -> None:
        self._check()
        self._entries[key] = (value, time.monotonic() + ttl_seconds)

    async def delete(self, *keys: str) -> None:
        self._check()
        for key in keys:
            self._entries.pop(key, None)

    async def delete_pattern(self, pattern: str) -> None:
        self._check()
        for key in fnmatch.filter(list(self._entries), pattern):
            del self._entries[key]

    async def increment(self, key: str, ttl_seconds: int) -> int:
        self._check()
        count, expires_at = self._counters.get(key, (0, 0.0))
        if self._expired(expires_at):
            count, expires_at = 0, time.monotonic() + ttl_seconds
        count += 1
        self._counters[key] = (count, expires_at)
        return count

    async def counter(self, key: str) -> int:
        self._check()
        count, expires_at = self._counters.get(key, (0, 0.0))
        return 0 if self._expired(expires_at) else count

    async def ping(self) -> bool:
        return self.available

    def keys(self) -> list[str]:
        """Return live keys (test helper)."""
        return [k for k, (_, exp) in self._entries.items() if not self._expired(exp)]
