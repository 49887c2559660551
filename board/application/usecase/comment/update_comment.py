"""Update comment use case."""

from pydantic import BaseModel

from board.application.usecase.base import BaseUseCase
from board.domain.service import CommentService
from board.domain.value import CommentId, UserId
from board.util.sanitize import HtmlSanitizer

from .response import CommentResponse


class UpdateCommentRequest(BaseModel):
    """Update comment request."""

    comment_id: int
    user_id: int  # Current user ID (must be author)
    content: str


class UpdateCommentUseCase(BaseUseCase):
    """Use case for editing a comment's content."""

    def __init__(
        self, comment_service: CommentService, sanitizer: HtmlSanitizer
    ) -> None:
        """Initialize update comment use case.

        Args:
            comment_service: Comment domain service
            sanitizer: Content sanitizer
        """
        self.comment_service = comment_service
        self.sanitizer = sanitizer

    async def execute(self, request: UpdateCommentRequest) -> CommentResponse:
        """Execute update comment flow.

        Raises:
            NotFoundError: If the comment does not exist
            ForbiddenError: If the user is not the author
            ValidationError: If sanitized content is out of bounds
        """
        comment = await self.comment_service.update_comment(
            CommentId(request.comment_id),
            UserId(request.user_id),
            self.sanitizer.sanitize(request.content),
        )
        return CommentResponse.from_comment(comment)
