"""PostgreSQL implementation of Comment repository."""

from datetime import datetime
from typing import List, Optional, Sequence

from sqlalchemy import delete, insert, or_, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from board.domain.error import NotFoundError
from board.domain.model import Comment, NewComment
from board.domain.repository import CommentRepository
from board.domain.value import CommentId
from board.persistence.database import is_foreign_key_violation, storage_operation
from board.persistence.mappers import new_comment_to_dict, row_to_comment
from board.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    @storage_operation
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    @storage_operation
    async def find_top_level(self) -> List[Comment]:
        """Find all top-level comments in insertion order."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.parent_id.is_(None))
            .order_by(comments_table.c.id.asc())
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    @storage_operation
    async def find_replies(self, parent_ids: Sequence[CommentId]) -> List[Comment]:
        """Find replies of several parents (batch query)."""
        if not parent_ids:
            return []

        stmt = (
            select(comments_table)
            .where(comments_table.c.parent_id.in_(parent_ids))
            .order_by(comments_table.c.id.asc())
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    @storage_operation
    async def create(self, new_comment: NewComment) -> Comment:
        """Insert a comment; the database assigns id and timestamps.

        Raises:
            NotFoundError: If the parent was deleted concurrently
        """
        now = datetime.now()
        stmt = (
            insert(comments_table)
            .values(**new_comment_to_dict(new_comment), created_at=now, updated_at=now)
            .returning(comments_table)
        )
        try:
            result = await self.session.execute(stmt)
        except IntegrityError as e:
            if new_comment.parent_id is not None and is_foreign_key_violation(e):
                raise NotFoundError("Comment", str(new_comment.parent_id)) from e
            raise
        row = result.one()
        await self.session.flush()
        return row_to_comment(row._asdict())

    @storage_operation
    async def update_content(
        self, comment_id: CommentId, content: str
    ) -> Optional[Comment]:
        """Replace the content of a comment."""
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id)
            .values(content=content, updated_at=datetime.now())
            .returning(comments_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        if row is None:
            return None

        await self.session.flush()
        return row_to_comment(row._asdict())

    @storage_operation
    async def adjust_score(
        self, comment_id: CommentId, delta: int
    ) -> Optional[Comment]:
        """Atomically add delta to the score."""
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id)
            .values(score=comments_table.c.score + delta)
            .returning(comments_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        if row is None:
            return None

        await self.session.flush()
        return row_to_comment(row._asdict())

    @storage_operation
    async def delete_thread(self, comment_id: CommentId) -> List[CommentId]:
        """Delete a comment and its replies in one statement.

        Votes go with them through ``ON DELETE CASCADE``.
        """
        stmt = (
            delete(comments_table)
            .where(
                or_(
                    comments_table.c.id == comment_id,
                    comments_table.c.parent_id == comment_id,
                )
            )
            .returning(comments_table.c.id)
        )
        result = await self.session.execute(stmt)
        deleted = [CommentId(row.id) for row in result.fetchall()]
        await self.session.flush()
        return deleted
