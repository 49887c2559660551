"""Vote domain service."""

from datetime import datetime

import logfire

from board.domain.error import DuplicateVoteError
from board.domain.model.comment import Comment
from board.domain.model.vote import Vote
from board.domain.repository import UnitOfWork, VoteRepository
from board.domain.value import CommentId, UserId, VoteDirection

from .base import Service
from .comment_service import CommentService


class VoteService(Service):
    """Domain service for the vote ledger.

    A user holds at most one vote per comment. The first vote moves the
    score by one; flipping an existing vote moves it by two. Re-asserting
    the current direction is rejected and leaves everything untouched.
    """

    def __init__(
        self,
        vote_repository: VoteRepository,
        comment_service: CommentService,
        unit_of_work: UnitOfWork,
    ) -> None:
        """Initialize vote service.

        Args:
            vote_repository: Vote repository
            comment_service: Comment domain service
            unit_of_work: Transaction boundary for the current request
        """
        self.vote_repository = vote_repository
        self.comment_service = comment_service
        self.unit_of_work = unit_of_work

    async def apply_vote(
        self, comment_id: CommentId, voter_id: UserId, direction: VoteDirection
    ) -> Comment:
        """Record a vote and update the comment's score.

        Args:
            comment_id: Comment being voted on
            voter_id: Authenticated voter
            direction: Vote direction

        Returns:
            The comment with its new score (replies attached)

        Raises:
            NotFoundError: If the comment does not exist or vanished mid-vote
            DuplicateVoteError: If the voter already holds this direction
        """
        with logfire.span(
            "vote_service.apply_vote",
            comment_id=comment_id,
            voter_id=voter_id,
            direction=direction.value,
        ):
            comment = await self.comment_service.require_comment(comment_id)

            async with self.unit_of_work.transaction():
                delta = await self._record_vote(comment_id, voter_id, direction)

                # Storage-side increment; the loaded score is never written back
                updated = await self.comment_service.adjust_score(comment_id, delta)
                view = await self.comment_service.with_replies(updated)

            await self.comment_service.invalidate_thread(comment)

            logfire.info(
                "Vote applied",
                comment_id=comment_id,
                voter_id=voter_id,
                direction=direction.value,
                delta=delta,
                score=updated.score,
            )
            return view

    async def _record_vote(
        self, comment_id: CommentId, voter_id: UserId, direction: VoteDirection
    ) -> int:
        """Insert or flip the voter's vote and return the score delta."""
        existing = await self.vote_repository.find(voter_id, comment_id)

        if existing is None:
            now = datetime.now()
            inserted = await self.vote_repository.add(
                Vote(
                    user_id=voter_id,
                    comment_id=comment_id,
                    direction=direction,
                    created_at=now,
                    updated_at=now,
                )
            )
            if inserted:
                return direction.weight

            # Lost the unique-constraint race: continue against the winner
            logfire.info(
                "Concurrent first vote detected",
                comment_id=comment_id,
                voter_id=voter_id,
            )
            existing = await self.vote_repository.find(voter_id, comment_id)
            if existing is None:
                raise DuplicateVoteError(str(comment_id), direction.value)

        if existing.direction is direction:
            logfire.warn(
                "Duplicate vote attempt",
                comment_id=comment_id,
                voter_id=voter_id,
                direction=direction.value,
            )
            raise DuplicateVoteError(str(comment_id), direction.value)

        flipped = await self.vote_repository.change_direction(
            voter_id, comment_id, expected=existing.direction, direction=direction
        )
        if not flipped:
            logfire.warn(
                "Vote already flipped by a concurrent request",
                comment_id=comment_id,
                voter_id=voter_id,
                direction=direction.value,
            )
            raise DuplicateVoteError(str(comment_id), direction.value)

        return 2 * direction.weight
