"""Domain services."""

from .auth_service import AuthService
from .base import Service
from .cache_service import CacheBackend, CacheService
from .comment_service import CommentService
from .jwt_service import JWTService
from .rate_limit_service import RateLimitService
from .user_service import UserService
from .vote_service import VoteService

__all__ = [
    "AuthService",
    "CacheBackend",
    "CacheService",
    "CommentService",
    "JWTService",
    "RateLimitService",
    "Service",
    "UserService",
    "VoteService",
]
