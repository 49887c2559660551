"""Read-through cache for comment reads.

The cache is advisory: every failure (backend down, timeout, undecodable
entry) is logged and degrades to a miss or a no-op. Callers can never
observe a cache outage as anything other than a slower response.
"""

from abc import ABC, abstractmethod
from typing import Awaitable, Callable, TypeVar

import logfire
from pydantic import TypeAdapter, ValidationError

from board.domain.error import CacheFailureError
from board.domain.value import CommentId

from .base import Service

T = TypeVar("T")

ALL_COMMENTS_KEY = "comments:all"
COMMENT_KEY_PATTERN = "comments:*"

# Bumped by every invalidation; outside the comments: namespace
GENERATION_KEY = "cache:generation"
GENERATION_TTL_SECONDS = 24 * 3600


def comment_key(comment_id: CommentId) -> str:
    """Cache key for a single comment (with its replies)."""
    return f"comments:{comment_id}"


class CacheBackend(ABC):
    """Key/value store with expiry used by the cache service.

    Implementations raise ``CacheFailureError`` for any backend failure.
    """

    @abstractmethod
    async def get(self, key: str) -> str | None:
        """Return the stored value, or None if absent or expired."""
        pass

    @abstractmethod
    async def set(self, key: str, value: str, ttl_seconds: int) -> None:
        """Store a value that expires after ``ttl_seconds``."""
        pass

    @abstractmethod
    async def delete(self, *keys: str) -> None:
        """Remove the given keys if present."""
        pass

    @abstractmethod
    async def delete_pattern(self, pattern: str) -> None:
        """Remove every key matching a glob pattern."""
        pass

    @abstractmethod
    async def increment(self, key: str, ttl_seconds: int) -> int:
        """Increment a counter, starting its expiry window on first use.

        Returns:
            The counter value after incrementing
        """
        pass

    @abstractmethod
    async def counter(self, key: str) -> int:
        """Return the current value of a counter (0 if absent or expired)."""
        pass

    @abstractmethod
    async def ping(self) -> bool:
        """Check that the backend is reachable."""
        pass


class CacheService(Service):
    """Domain service coordinating cached reads with mutations."""

    def __init__(
        self, backend: CacheBackend, ttl_seconds: int = 3600, key_prefix: str = ""
    ) -> None:
        """Initialize cache service.

        Args:
            backend: Cache backend
            ttl_seconds: Time-to-live for populated entries
            key_prefix: Namespace prepended to every key
        """
        self.backend = backend
        self.ttl_seconds = ttl_seconds
        self.key_prefix = key_prefix

    def _key(self, key: str) -> str:
        return f"{self.key_prefix}{key}"

    async def read_through(
        self,
        key: str,
        compute: Callable[[], Awaitable[T]],
        adapter: TypeAdapter[T],
    ) -> T:
        """Return the cached value for ``key``, computing it on a miss.

        Exceptions raised by ``compute`` propagate and nothing is cached.
        If an invalidation lands while ``compute`` runs, the result is
        returned but not stored, since it may predate the mutation.

        Args:
            key: Logical cache key
            compute: Coroutine factory producing the authoritative value
            adapter: Pydantic adapter used to (de)serialize the value

        Returns:
            The cached or freshly computed value
        """
        with logfire.span("cache_service.read_through", key=key):
            cached = await self._get(key)
            if cached is not None:
                try:
                    value = adapter.validate_json(cached)
                    logfire.debug("Cache hit", key=key)
                    return value
                except ValidationError as e:
                    logfire.warn("Discarding undecodable cache entry", key=key, error=str(e))
                    await self.invalidate(key)

            logfire.debug("Cache miss", key=key)
            generation = await self._generation()
            value = await compute()

            if generation is None or await self._generation() != generation:
                logfire.info("Skipping cache fill after concurrent invalidation", key=key)
                return value

            await self._set(key, adapter.dump_json(value).decode())

            # An invalidation between the check and the write must still win
            if await self._generation() != generation:
                logfire.info("Dropping cache fill raced by invalidation", key=key)
                await self._delete(key)
            return value

    async def invalidate(self, *keys: str) -> None:
        """Remove cached entries immediately.

        Keys containing glob characters are treated as patterns. The
        generation is bumped before deleting so in-flight fills notice.

        Args:
            keys: Exact keys or glob patterns
        """
        exact = [self._key(k) for k in keys if not _is_pattern(k)]
        patterns = [self._key(k) for k in keys if _is_pattern(k)]
        try:
            await self.backend.increment(
                self._key(GENERATION_KEY), GENERATION_TTL_SECONDS
            )
            if exact:
                await self.backend.delete(*exact)
            for pattern in patterns:
                await self.backend.delete_pattern(pattern)
            logfire.debug("Cache invalidated", keys=list(keys))
        except CacheFailureError as e:
            logfire.warn("Cache invalidation skipped", keys=list(keys), error=str(e))

    async def increment(self, key: str, ttl_seconds: int) -> int | None:
        """Increment a windowed counter.

        Returns:
            The new counter value, or None if the cache is unavailable
        """
        try:
            return await self.backend.increment(self._key(key), ttl_seconds)
        except CacheFailureError as e:
            logfire.warn("Cache counter unavailable", key=key, error=str(e))
            return None

    async def is_available(self) -> bool:
        """Report whether the backend currently answers."""
        try:
            return await self.backend.ping()
        except CacheFailureError:
            return False

    async def _get(self, key: str) -> str | None:
        try:
            return await self.backend.get(self._key(key))
        except CacheFailureError as e:
            logfire.warn("Cache read failed, treating as miss", key=key, error=str(e))
            return None

    async def _generation(self) -> int | None:
        try:
            return await self.backend.counter(self._key(GENERATION_KEY))
        except CacheFailureError as e:
            logfire.warn("Cache generation unavailable", error=str(e))
            return None

    async def _delete(self, key: str) -> None:
        try:
            await self.backend.delete(self._key(key))
        except CacheFailureError as e:
            logfire.warn("Cache delete skipped", key=key, error=str(e))

    async def _set(self, key: str, value: str) -> None:
        try:
            await self.backend.set(self._key(key), value, self.ttl_seconds)
        except CacheFailureError as e:
            logfire.warn("Cache write skipped", key=key, error=str(e))


def _is_pattern(key: str) -> bool:
    return any(ch in key for ch in "*?[")
