"""Liveness endpoint for load balancers and uptime checks."""

from datetime import datetime

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from pydantic import BaseModel

from folio.config import Settings
from folio.domain.model import utcnow
from folio.util.observability import SERVICE_VERSION

router = APIRouter(tags=["health"], route_class=DishkaRoute)


class HealthResponse(BaseModel):
    status: str
    timestamp: datetime
    version: str
    git_sha: str


@router.get("/health", response_model=HealthResponse)
async def health_check(settings: FromDishka[Settings]) -> HealthResponse:
    """Report that the process is serving; never touches either content store."""
    return HealthResponse(
        status="healthy",
        timestamp=utcnow(),
        version=SERVICE_VERSION,
        git_sha=settings.git_sha,
    )
