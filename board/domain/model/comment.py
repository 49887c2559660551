"""Comment entity.

Comments form a two-level tree: top-level comments and their replies.
A reply always hangs off a top-level comment; replies to replies are
attached to the same top-level comment and only carry a ``replying_to``
label for display.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from board.domain.common import DomainModel
from board.domain.value import CommentId, UserId

CONTENT_MIN_LENGTH = 1
CONTENT_MAX_LENGTH = 1000
REPLYING_TO_MAX_LENGTH = 50


class NewComment(DomainModel):
    """Comment data before the store assigns it an identifier."""

    author_id: UserId
    author_username: str
    content: str = Field(min_length=CONTENT_MIN_LENGTH, max_length=CONTENT_MAX_LENGTH)
    parent_id: Optional[CommentId] = None
    replying_to: Optional[str] = Field(default=None, max_length=REPLYING_TO_MAX_LENGTH)


class Comment(DomainModel):
    """Comment entity.

    Threading is managed through ``parent_id`` (None for top-level). Read
    views of a top-level comment carry its ``replies`` in insertion order;
    replies themselves never have replies.

    ``score`` is the signed sum of vote weights and is only ever changed
    through atomic increments in the vote ledger.
    """

    id: CommentId
    author_id: UserId
    author_username: str
    content: str = Field(min_length=CONTENT_MIN_LENGTH, max_length=CONTENT_MAX_LENGTH)
    parent_id: Optional[CommentId] = None
    replying_to: Optional[str] = None
    score: int = 0
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
    replies: list["Comment"] = Field(default_factory=list)

    @property
    def is_top_level(self) -> bool:
        """Whether this comment starts a thread."""
        return self.parent_id is None
