"""Domain model entities for the comment board."""

from board.domain.model.comment import Comment, NewComment
from board.domain.model.user import NewUser, User
from board.domain.model.vote import Vote

__all__ = [
    "User",
    "NewUser",
    "Comment",
    "NewComment",
    "Vote",
]
