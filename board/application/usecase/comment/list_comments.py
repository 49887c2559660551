"""List comments use case."""

from board.domain.service import CommentService

from .response import CommentResponse


class ListCommentsUseCase:
    """Use case for reading every thread, oldest first."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self) -> list[CommentResponse]:
        comments = await self.comment_service.list_top_level()
        return [CommentResponse.from_comment(comment) for comment in comments]
