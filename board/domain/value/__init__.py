"""Domain value objects for the comment board."""

from board.domain.value.identifiers import CommentId, UserId
from board.domain.value.types import (
    Email,
    UserIdentity,
    Username,
    VoteDirection,
)

__all__ = [
    # Identifiers
    "UserId",
    "CommentId",
    # Types
    "Email",
    "UserIdentity",
    "Username",
    "VoteDirection",
]
