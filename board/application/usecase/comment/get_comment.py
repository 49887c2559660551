"""Get comment use case."""

from pydantic import BaseModel

from board.domain.service import CommentService
from board.domain.value import CommentId

from .response import CommentResponse


class GetCommentRequest(BaseModel):
    comment_id: int


class GetCommentUseCase:
    """Use case for reading one comment with its replies."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: GetCommentRequest) -> CommentResponse:
        comment = await self.comment_service.get_comment(CommentId(request.comment_id))
        return CommentResponse.from_comment(comment)
