"""Repository interfaces for the comment board domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from board.domain.repository.comment import CommentRepository
from board.domain.repository.unit_of_work import UnitOfWork
from board.domain.repository.user import UserRepository
from board.domain.repository.vote import VoteRepository

__all__ = [
    "UserRepository",
    "CommentRepository",
    "VoteRepository",
    "UnitOfWork",
]
