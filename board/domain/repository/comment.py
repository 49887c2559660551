"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from board.domain.model.comment import Comment, NewComment
from board.domain.value import CommentId


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the persistence layer. Comments returned by
    the repository never have ``replies`` attached; the service assembles
    threads.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_top_level(self) -> List[Comment]:
        """Find all comments without a parent, in insertion order.

        Returns:
            Top-level comments ordered by ascending ID
        """
        pass

    @abstractmethod
    async def find_replies(self, parent_ids: Sequence[CommentId]) -> List[Comment]:
        """Find the replies of several parents (batch query).

        Args:
            parent_ids: Parent comment IDs

        Returns:
            Replies of any of the parents, ordered by ascending ID
        """
        pass

    @abstractmethod
    async def create(self, new_comment: NewComment) -> Comment:
        """Persist a new comment and assign it the next identifier.

        Args:
            new_comment: Comment data

        Returns:
            The stored comment with ID, score 0 and timestamps set
        """
        pass

    @abstractmethod
    async def update_content(
        self, comment_id: CommentId, content: str
    ) -> Optional[Comment]:
        """Replace a comment's content and bump ``updated_at``.

        Args:
            comment_id: Comment ID
            content: New sanitized content

        Returns:
            The updated comment, or None if it no longer exists
        """
        pass

    @abstractmethod
    async def adjust_score(
        self, comment_id: CommentId, delta: int
    ) -> Optional[Comment]:
        """Atomically add ``delta`` to a comment's score.

        Must be a storage-side increment, never a read-modify-write of a
        previously loaded score.

        Args:
            comment_id: Comment ID
            delta: Signed score change

        Returns:
            The comment with its new score, or None if it no longer exists
        """
        pass

    @abstractmethod
    async def delete_thread(self, comment_id: CommentId) -> List[CommentId]:
        """Delete a comment together with its replies and all their votes.

        Runs as one storage operation so no reply or vote is left behind.

        Args:
            comment_id: Comment ID

        Returns:
            IDs of every deleted comment (empty if nothing matched)
        """
        pass
