"""Comment representation returned by comment and vote use cases."""

from datetime import datetime

from pydantic import BaseModel

from board.domain.model import Comment


class CommentResponse(BaseModel):
    """A comment as exposed over the API, replies nested one level."""

    id: int
    content: str
    author_id: int
    author_username: str
    parent_id: int | None
    replying_to: str | None
    score: int
    created_at: datetime
    updated_at: datetime
    replies: list["CommentResponse"] = []

    @classmethod
    def from_comment(cls, comment: Comment) -> "CommentResponse":
        return cls(
            id=comment.id,
            content=comment.content,
            author_id=comment.author_id,
            author_username=comment.author_username,
            parent_id=comment.parent_id,
            replying_to=comment.replying_to,
            score=comment.score,
            created_at=comment.created_at,
            updated_at=comment.updated_at,
            replies=[cls.from_comment(reply) for reply in comment.replies],
        )
