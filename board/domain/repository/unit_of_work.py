"""Transaction boundary interface."""

from abc import ABC, abstractmethod
from contextlib import asynccontextmanager
from typing import AsyncIterator


class UnitOfWork(ABC):
    """Commits or rolls back the request's durable changes.

    Services commit before invalidating cached reads, so a cache miss
    that follows the invalidation can only ever load committed state.
    """

    @abstractmethod
    async def commit(self) -> None:
        """Make all pending changes durable.

        Raises:
            StorageFailureError: If the store is unavailable or times out
        """
        pass

    @abstractmethod
    async def rollback(self) -> None:
        """Discard all pending changes."""
        pass

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[None]:
        """Commit when the block succeeds, roll back when it raises."""
        try:
            yield
            await self.commit()
        except Exception:
            await self.rollback()
            raise
