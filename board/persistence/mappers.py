"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict

from board.domain.model import Comment, NewComment, NewUser, User, Vote
from board.domain.value import (
    CommentId,
    Email,
    UserId,
    Username,
    VoteDirection,
)


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(row["id"]),
        username=Username(row["username"]),
        email=Email(row["email"]),
        password_hash=row["password_hash"],
        created_at=row["created_at"],
    )


def new_user_to_dict(new_user: NewUser) -> Dict[str, Any]:
    """Convert registration data to an insertable dict."""
    return {
        "username": new_user.username.root,
        "email": new_user.email.root,
        "password_hash": new_user.password_hash,
    }


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model (without replies)
    """
    return Comment(
        id=CommentId(row["id"]),
        author_id=UserId(row["author_id"]),
        author_username=row["author_username"],
        content=row["content"],
        parent_id=(
            CommentId(row["parent_id"]) if row["parent_id"] is not None else None
        ),
        replying_to=row.get("replying_to"),
        score=row["score"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def new_comment_to_dict(new_comment: NewComment) -> Dict[str, Any]:
    """Convert comment data to an insertable dict."""
    return new_comment.model_dump()


def row_to_vote(row: Dict[str, Any]) -> Vote:
    """Convert database row to Vote domain model.

    Args:
        row: Database row as dict

    Returns:
        Vote domain model
    """
    return Vote(
        user_id=UserId(row["user_id"]),
        comment_id=CommentId(row["comment_id"]),
        direction=VoteDirection(row["direction"]),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def vote_to_dict(vote: Vote) -> Dict[str, Any]:
    """Convert Vote domain model to database dict."""
    data = vote.model_dump()
    data["direction"] = vote.direction.value
    return data
