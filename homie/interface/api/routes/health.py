"""Health check routes."""

from datetime import datetime, timezone

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from pydantic import BaseModel

from homie.config import Settings


router = APIRouter(tags=["health"], route_class=DishkaRoute)


class HealthResponse(BaseModel):
    status: str
    timestamp: datetime
    version: str
    git_sha: str
    environment: str
    configured: dict[str, bool]


@router.get("/health", response_model=HealthResponse)
async def health_check(settings: FromDishka[Settings]) -> HealthResponse:
    """Report liveness and which upstream credentials are present.

    Never calls an upstream, so it stays green when API keys are unset;
    ``configured`` shows which features will fail with a configuration error.
    """
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(timezone.utc),
        version="0.1.0",
        git_sha=settings.git_sha,
        environment=settings.environment,
        configured=settings.integrations,
    )
