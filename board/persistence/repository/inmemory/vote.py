"""In-memory vote repository for testing."""

from datetime import datetime
from typing import Optional

from board.domain.error import NotFoundError
from board.domain.model.vote import Vote
from board.domain.repository.vote import VoteRepository
from board.domain.value import CommentId, UserId, VoteDirection

from .database import InMemoryDatabase


class InMemoryVoteRepository(VoteRepository):
    """In-memory implementation of VoteRepository for testing."""

    def __init__(self, database: InMemoryDatabase | None = None) -> None:
        self.db = database or InMemoryDatabase()

    async def find(self, user_id: UserId, comment_id: CommentId) -> Optional[Vote]:
        """Find a user's vote on a comment."""
        return self.db.votes.get((user_id, comment_id))

    async def add(self, vote: Vote) -> bool:
        """Insert unless the pair already voted; the comment must exist."""
        if vote.comment_id not in self.db.comments:
            raise NotFoundError("Comment", str(vote.comment_id))
        key = (vote.user_id, vote.comment_id)
        if key in self.db.votes:
            return False
        self.db.votes[key] = vote
        return True

    async def change_direction(
        self,
        user_id: UserId,
        comment_id: CommentId,
        expected: VoteDirection,
        direction: VoteDirection,
    ) -> bool:
        """Flip the vote if it still has the expected direction."""
        vote = self.db.votes.get((user_id, comment_id))
        if vote is None or vote.direction is not expected:
            return False
        self.db.votes[(user_id, comment_id)] = vote.model_copy(
            update={"direction": direction, "updated_at": datetime.now()}
        )
        return True

    def count_for_comment(self, comment_id: CommentId) -> int:
        """Count votes on a comment (test helper)."""
        return sum(1 for (_, cid) in self.db.votes if cid == comment_id)
