"""Vote repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from board.domain.model.vote import Vote
from board.domain.value import CommentId, UserId, VoteDirection


class VoteRepository(ABC):
    """Repository for Vote entity.

    The (user_id, comment_id) pair is unique in storage; implementations
    must enforce it atomically rather than relying on a prior lookup.
    """

    @abstractmethod
    async def find(self, user_id: UserId, comment_id: CommentId) -> Optional[Vote]:
        """Find a user's vote on a comment.

        Args:
            user_id: The voter's ID
            comment_id: The comment's ID

        Returns:
            The vote if found, None otherwise
        """
        pass

    @abstractmethod
    async def add(self, vote: Vote) -> bool:
        """Insert a vote unless one already exists for the pair.

        Args:
            vote: The vote to insert

        Returns:
            True if inserted, False if a vote for (user, comment) already
            existed (a concurrent request won the unique constraint)
        """
        pass

    @abstractmethod
    async def change_direction(
        self,
        user_id: UserId,
        comment_id: CommentId,
        expected: VoteDirection,
        direction: VoteDirection,
    ) -> bool:
        """Flip a vote's direction in place (compare-and-swap).

        Args:
            user_id: The voter's ID
            comment_id: The comment's ID
            expected: Direction the vote must currently have
            direction: New direction

        Returns:
            True if the vote was flipped, False if no vote with the
            expected direction exists
        """
        pass
