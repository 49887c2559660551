"""Create comment use case."""

from pydantic import BaseModel

from board.application.usecase.base import BaseUseCase
from board.domain.service import CommentService
from board.domain.value import CommentId, UserIdentity
from board.util.sanitize import HtmlSanitizer

from .response import CommentResponse


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    author: UserIdentity
    content: str
    parent_id: int | None = None
    replying_to: str | None = None


class CreateCommentUseCase(BaseUseCase):
    """Use case for posting a top-level comment or a reply."""

    def __init__(
        self, comment_service: CommentService, sanitizer: HtmlSanitizer
    ) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
            sanitizer: Content sanitizer
        """
        self.comment_service = comment_service
        self.sanitizer = sanitizer

    async def execute(self, request: CreateCommentRequest) -> CommentResponse:
        """Sanitize the content and create the comment.

        Raises:
            ValidationError: If sanitized content is out of bounds
            NotFoundError: If the parent is missing or is a reply
        """
        comment = await self.comment_service.create_comment(
            author=request.author,
            content=self.sanitizer.sanitize(request.content),
            parent_id=(
                CommentId(request.parent_id) if request.parent_id is not None else None
            ),
            replying_to=request.replying_to,
        )
        return CommentResponse.from_comment(comment)
