"""Apply vote use case."""

from pydantic import BaseModel

from board.application.usecase.base import BaseUseCase
from board.application.usecase.comment import CommentResponse
from board.domain.service import VoteService
from board.domain.value import CommentId, UserId, VoteDirection


class ApplyVoteRequest(BaseModel):
    """Apply vote request."""

    comment_id: int
    user_id: int
    direction: VoteDirection


class ApplyVoteUseCase(BaseUseCase):
    """Use case for voting a comment up or down."""

    def __init__(self, vote_service: VoteService) -> None:
        """Initialize apply vote use case.

        Args:
            vote_service: Vote domain service
        """
        self.vote_service = vote_service

    async def execute(self, request: ApplyVoteRequest) -> CommentResponse:
        """Record the vote and return the comment with its new score.

        Raises:
            NotFoundError: If the comment does not exist
            DuplicateVoteError: If the user already voted this direction
        """
        comment = await self.vote_service.apply_vote(
            CommentId(request.comment_id), UserId(request.user_id), request.direction
        )
        return CommentResponse.from_comment(comment)
