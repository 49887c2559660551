"""Vote entity.

Each user holds at most one vote per comment, for the lifetime of that
comment. A vote can be flipped between up and down but never withdrawn.
"""

from datetime import datetime

from pydantic import Field

from board.domain.common import DomainModel
from board.domain.value import CommentId, UserId, VoteDirection


class Vote(DomainModel):
    """Vote entity.

    Business rules:
    - Identity is the (user_id, comment_id) pair (enforced by the storage
      primary key)
    - Direction flips happen in place; no second row is ever created
    - Votes disappear only when their comment is deleted
    """

    user_id: UserId
    comment_id: CommentId
    direction: VoteDirection
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
