"""Shared in-memory storage for the in-memory repositories."""

from contextlib import asynccontextmanager
from dataclasses import dataclass, field, replace
from typing import AsyncIterator

from board.domain.model import Comment, User, Vote
from board.domain.repository import UnitOfWork
from board.domain.value import CommentId, UserId


@dataclass
class InMemoryDatabase:
    """Tables and id sequences shared by all in-memory repositories.

    One instance lives for the whole container so data survives across
    requests. Writes apply immediately; ``InMemoryUnitOfWork`` restores a
    snapshot when a transaction fails.
    """

    users: dict[UserId, User] = field(default_factory=dict)
    comments: dict[CommentId, Comment] = field(default_factory=dict)
    votes: dict[tuple[UserId, CommentId], Vote] = field(default_factory=dict)
    sequences: dict[str, int] = field(default_factory=dict)

    def next_id(self, table: str) -> int:
        value = self.sequences.get(table, 0) + 1
        self.sequences[table] = value
        return value

    def snapshot(self) -> "InMemoryDatabase":
        """Copy the tables; stored models are immutable so rows are shared."""
        return replace(
            self,
            users=dict(self.users),
            comments=dict(self.comments),
            votes=dict(self.votes),
            sequences=dict(self.sequences),
        )

    def restore(self, snapshot: "InMemoryDatabase") -> None:
        self.users = snapshot.users
        self.comments = snapshot.comments
        self.votes = snapshot.votes
        self.sequences = snapshot.sequences


class InMemoryUnitOfWork(UnitOfWork):
    """Unit of work over an ``InMemoryDatabase``.

    A failed transaction puts every table back the way it was when the
    transaction began. Commits and rollbacks are counted for tests.
    """

    def __init__(self, database: InMemoryDatabase | None = None) -> None:
        self.db = database or InMemoryDatabase()
        self.commits = 0
        self.rollbacks = 0
        self._snapshot: InMemoryDatabase | None = None

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[None]:
        self._snapshot = self.db.snapshot()
        try:
            async with super().transaction():
                yield
        finally:
            self._snapshot = None

    async def commit(self) -> None:
        self.commits += 1

    async def rollback(self) -> None:
        self.rollbacks += 1
        if self._snapshot is not None:
            self.db.restore(self._snapshot)
