"""Health check endpoints."""

from fastapi import APIRouter, status
from pydantic import BaseModel
from sqlalchemy import text

from tube_companion.adapters.youtube import get_youtube_adapter
from tube_companion.api.deps import SessionDep
from tube_companion.config import settings
from tube_companion.domain.errors import ConfigurationError
from tube_companion.logging import get_logger

router = APIRouter(tags=["Health"])
logger = get_logger(__name__)


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str
    components: dict[str, bool] | None = None


class ReadinessResponse(BaseModel):
    """Readiness check response."""

    ready: bool
    database: bool
    youtube_configured: bool
    youtube_reachable: bool


@router.get(
    "/health",
    response_model=HealthResponse,
    status_code=status.HTTP_200_OK,
    summary="Health check",
    description="Basic health check endpoint that verifies the API is running.",
)
async def health_check() -> HealthResponse:
    """Basic health check - is the API up?

    Reports whether the proxy talks to the real Data API and holds a key.
    """
    from tube_companion import __version__

    return HealthResponse(
        status="healthy",
        version=__version__,
        components={
            "youtube_live": settings.youtube_provider == "youtube",
            "youtube_api_key": bool(settings.youtube_api_key),
        },
    )


@router.get(
    "/health/ready",
    response_model=ReadinessResponse,
    summary="Readiness check",
    description="Verifies the database and the YouTube Data API.",
)
async def readiness_check(session: SessionDep) -> ReadinessResponse:
    """Readiness check including dependencies."""
    database_ok = False
    try:
        session.execute(text("SELECT 1"))
        database_ok = True
    except Exception as e:
        logger.error("database_health_check_failed", error=str(e))

    youtube_configured = False
    youtube_reachable = False
    try:
        adapter = get_youtube_adapter()
    except ConfigurationError as e:
        logger.warning("youtube_not_configured", error=e.message)
    else:
        youtube_configured = True
        try:
            youtube_reachable = await adapter.health_check()
        finally:
            await adapter.close()

    return ReadinessResponse(
        ready=database_ok and youtube_reachable,
        database=database_ok,
        youtube_configured=youtube_configured,
        youtube_reachable=youtube_reachable,
    )


@router.get(
    "/health/live",
    status_code=status.HTTP_200_OK,
    summary="Liveness probe",
    description="Simple liveness probe for Kubernetes.",
)
async def liveness_check() -> dict[str, str]:
    """Kubernetes liveness probe - is the process alive?"""
    return {"status": "alive"}
