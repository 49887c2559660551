"""Domain layer DI providers."""

from dishka import Scope, provide

from board.config import AuthSettings, CacheSettings, RateLimitSettings
from board.domain.repository import (
    CommentRepository,
    UnitOfWork,
    UserRepository,
    VoteRepository,
)
from board.domain.service import (
    AuthService,
    CacheBackend,
    CacheService,
    CommentService,
    JWTService,
    RateLimitService,
    UserService,
    VoteService,
)
from board.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    def get_cache_service(
        self, backend: CacheBackend, cache_settings: CacheSettings
    ) -> CacheService:
        """Provide the read-through cache shared by all requests."""
        return CacheService(
            backend=backend,
            ttl_seconds=cache_settings.ttl_seconds,
            key_prefix=cache_settings.key_prefix,
        )

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_user_service(
        self, user_repository: UserRepository, unit_of_work: UnitOfWork
    ) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository, unit_of_work=unit_of_work)

    @provide
    def get_auth_service(
        self, user_service: UserService, jwt_service: JWTService
    ) -> AuthService:
        """Provide authentication domain service."""
        return AuthService(user_service=user_service, jwt_service=jwt_service)

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        unit_of_work: UnitOfWork,
        cache_service: CacheService,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository,
            unit_of_work=unit_of_work,
            cache_service=cache_service,
        )

    @provide
    def get_vote_service(
        self,
        vote_repository: VoteRepository,
        comment_service: CommentService,
        unit_of_work: UnitOfWork,
    ) -> VoteService:
        """Provide vote domain service."""
        return VoteService(
            vote_repository=vote_repository,
            comment_service=comment_service,
            unit_of_work=unit_of_work,
        )

    @provide
    def get_rate_limit_service(
        self, cache_service: CacheService, settings: RateLimitSettings
    ) -> RateLimitService:
        """Provide rate limiting service."""
        return RateLimitService(cache_service=cache_service, settings=settings)
