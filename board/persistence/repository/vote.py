"""PostgreSQL implementation of Vote repository."""

from datetime import datetime
from typing import Optional

from sqlalchemy import and_, select, update
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from board.domain.error import NotFoundError
from board.domain.model import Vote
from board.domain.repository import VoteRepository
from board.domain.value import CommentId, UserId, VoteDirection
from board.persistence.database import is_foreign_key_violation, storage_operation
from board.persistence.mappers import row_to_vote, vote_to_dict
from board.persistence.tables import votes_table


class PostgresVoteRepository(VoteRepository):
    """PostgreSQL implementation of VoteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    @storage_operation
    async def find(self, user_id: UserId, comment_id: CommentId) -> Optional[Vote]:
        """Find a user's vote on a comment."""
        stmt = select(votes_table).where(
            and_(
                votes_table.c.user_id == user_id,
                votes_table.c.comment_id == comment_id,
            )
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_vote(row._asdict()) if row else None

    @storage_operation
    async def add(self, vote: Vote) -> bool:
        """Insert a vote, doing nothing if the pair already has one.

        Raises:
            NotFoundError: If the comment was deleted concurrently
        """
        stmt = (
            insert(votes_table)
            .values(**vote_to_dict(vote))
            .on_conflict_do_nothing(index_elements=["user_id", "comment_id"])
        )
        try:
            result = await self.session.execute(stmt)
        except IntegrityError as e:
            if is_foreign_key_violation(e):
                raise NotFoundError("Comment", str(vote.comment_id)) from e
            raise
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    @storage_operation
    async def change_direction(
        self,
        user_id: UserId,
        comment_id: CommentId,
        expected: VoteDirection,
        direction: VoteDirection,
    ) -> bool:
        """Flip a vote only if it still has the expected direction."""
        stmt = (
            update(votes_table)
            .where(
                and_(
                    votes_table.c.user_id == user_id,
                    votes_table.c.comment_id == comment_id,
                    votes_table.c.direction == expected.value,
                )
            )
            .values(direction=direction.value, updated_at=datetime.now())
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]
