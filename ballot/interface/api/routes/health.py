"""Liveness probe."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from pydantic import BaseModel

from ballot.config import Settings
from ballot.util.observability import SERVICE_VERSION

router = APIRouter(tags=["health"], route_class=DishkaRoute)


class HealthResponse(BaseModel):
    status: str
    version: str
    environment: str
    git_sha: str


@router.get("/health", response_model=HealthResponse)
async def health_check(settings: FromDishka[Settings]) -> HealthResponse:
    """Report that the process is up and which build it runs.

    Does not touch the database, so it stays green during DB outages.
    """
    return HealthResponse(
        status="healthy",
        version=SERVICE_VERSION,
        environment=settings.environment,
        git_sha=settings.git_sha,
    )
