"""Responses shared by the authentication use cases."""

from datetime import datetime

from pydantic import BaseModel

from board.domain.model import User


class UserResponse(BaseModel):
    """Public view of a user (never includes the password hash)."""

    id: int
    username: str
    email: str
    created_at: datetime

    @classmethod
    def from_user(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id,
            username=user.username.root,
            email=user.email.root,
            created_at=user.created_at,
        )


class AuthResponse(BaseModel):
    """Access token plus the authenticated user."""

    token: str
    user: UserResponse
