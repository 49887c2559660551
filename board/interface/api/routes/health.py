"""Health check routes."""

from datetime import datetime

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from pydantic import BaseModel

from board.config import Settings
from board.domain.service import CacheService

router = APIRouter(tags=["health"], route_class=DishkaRoute)


class HealthResponse(BaseModel):
    """Health check response."""

    message: str
    status: str
    timestamp: datetime
    git_sha: str
    cache_available: bool


@router.get("/health", response_model=HealthResponse)
async def health_check(
    settings: FromDishka[Settings], cache_service: FromDishka[CacheService]
) -> HealthResponse:
    """Report that the API is running.

    The cache is advisory, so an unreachable cache is reported but still
    yields 200.
    """
    return HealthResponse(
        message="API is running",
        status="healthy",
        timestamp=datetime.now(),
        git_sha=settings.git_sha,
        cache_available=await cache_service.is_available(),
    )
