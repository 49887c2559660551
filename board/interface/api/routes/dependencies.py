"""Request dependencies shared by route modules.

These run as FastAPI dependencies, ahead of body validation, so an
unauthenticated request is rejected with 401 whatever its body. Services
come from the request's dishka container.
"""

from typing import Annotated

from dishka import AsyncContainer
from fastapi import Depends, Header, Request

from board.application.usecase.auth import GetCurrentUserUseCase
from board.domain.service import RateLimitService
from board.domain.value import UserIdentity


def client_key(request: Request) -> str:
    """Identify the calling client for rate limiting."""
    return request.client.host if request.client else "unknown"


def _container(request: Request) -> AsyncContainer:
    return request.state.dishka_container


async def current_user(
    request: Request,
    authorization: Annotated[str | None, Header()] = None,
) -> UserIdentity:
    """Resolve the bearer token or raise ``UnauthenticatedError``."""
    get_current_user = await _container(request).get(GetCurrentUserUseCase)
    return await get_current_user.execute(authorization)


async def mutating_user(
    request: Request,
    user: Annotated[UserIdentity, Depends(current_user)],
) -> UserIdentity:
    """Authenticate, then count the request against the client's budget."""
    rate_limiter = await _container(request).get(RateLimitService)
    await rate_limiter.hit(client_key(request))
    return user


CurrentUser = Annotated[UserIdentity, Depends(current_user)]
MutatingUser = Annotated[UserIdentity, Depends(mutating_user)]
