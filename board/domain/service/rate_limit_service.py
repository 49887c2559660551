"""Fixed-window rate limiting for comment mutations."""

import logfire

from board.config import RateLimitSettings
from board.domain.error import RateLimitExceededError

from .base import Service
from .cache_service import CacheService


class RateLimitService(Service):
    """Counts mutations per client in the cache backend.

    Counters live outside the ``comments:`` namespace so comment
    invalidation never resets them. When the cache is unavailable every
    request is allowed.
    """

    def __init__(self, cache_service: CacheService, settings: RateLimitSettings) -> None:
        self.cache_service = cache_service
        self.settings = settings

    async def hit(self, client_key: str) -> None:
        """Count one request for ``client_key``.

        Raises:
            RateLimitExceededError: If the client is over its budget
        """
        if not self.settings.enabled:
            return

        count = await self.cache_service.increment(
            f"ratelimit:{client_key}", self.settings.window_seconds
        )
        if count is not None and count > self.settings.max_requests:
            logfire.warn(
                "Rate limit exceeded",
                client=client_key,
                count=count,
                limit=self.settings.max_requests,
            )
            raise RateLimitExceededError(self.settings.window_seconds)
