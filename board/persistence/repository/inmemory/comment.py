"""In-memory comment repository for testing."""

from datetime import datetime
from typing import Optional, Sequence

from board.domain.error import NotFoundError
from board.domain.model.comment import Comment, NewComment
from board.domain.repository.comment import CommentRepository
from board.domain.value import CommentId

from .database import InMemoryDatabase


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self, database: InMemoryDatabase | None = None) -> None:
        self.db = database or InMemoryDatabase()

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self.db.comments.get(comment_id)

    async def find_top_level(self) -> list[Comment]:
        """Find top-level comments ordered by ID."""
        return sorted(
            (c for c in self.db.comments.values() if c.parent_id is None),
            key=lambda c: c.id,
        )

    async def find_replies(self, parent_ids: Sequence[CommentId]) -> list[Comment]:
        """Find replies of the given parents ordered by ID."""
        wanted = set(parent_ids)
        return sorted(
            (c for c in self.db.comments.values() if c.parent_id in wanted),
            key=lambda c: c.id,
        )

    async def create(self, new_comment: NewComment) -> Comment:
        """Store a comment under the next ID; the parent must exist."""
        if (
            new_comment.parent_id is not None
            and new_comment.parent_id not in self.db.comments
        ):
            raise NotFoundError("Comment", str(new_comment.parent_id))
        now = datetime.now()
        comment = Comment(
            id=CommentId(self.db.next_id("comments")),
            **new_comment.model_dump(),
            score=0,
            created_at=now,
            updated_at=now,
        )
        self.db.comments[comment.id] = comment
        return comment

    async def update_content(
        self, comment_id: CommentId, content: str
    ) -> Optional[Comment]:
        """Replace content and bump updated_at."""
        comment = self.db.comments.get(comment_id)
        if comment is None:
            return None
        updated = comment.model_copy(
            update={"content": content, "updated_at": datetime.now()}
        )
        self.db.comments[comment_id] = updated
        return updated

    async def adjust_score(
        self, comment_id: CommentId, delta: int
    ) -> Optional[Comment]:
        """Add delta to the stored score."""
        comment = self.db.comments.get(comment_id)
        if comment is None:
            return None
        updated = comment.model_copy(update={"score": comment.score + delta})
        self.db.comments[comment_id] = updated
        return updated

    async def delete_thread(self, comment_id: CommentId) -> list[CommentId]:
        """Delete the comment, its replies and their votes in one batch."""
        doomed = [
            c.id
            for c in self.db.comments.values()
            if c.id == comment_id or c.parent_id == comment_id
        ]
        doomed_set = set(doomed)
        for cid in doomed:
            del self.db.comments[cid]
        for key in [k for k in self.db.votes if k[1] in doomed_set]:
            del self.db.votes[key]
        return sorted(doomed)
