"""Health check endpoint."""
from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from lifttrax.config.settings import Settings, get_settings

router = APIRouter(prefix="/health", tags=["health"])


class HealthCheckResponse(BaseModel):
    """Service health."""

    status: str = Field(..., description="Overall service status")
    app: str = Field(..., description="Configured application name")
    timestamp: str = Field(..., description="ISO 8601 timestamp of check")


@router.get("", response_model=HealthCheckResponse)
async def health_check(settings: Settings = Depends(get_settings)):
    """Liveness check; does not touch the exercise catalog."""
    return HealthCheckResponse(
        status="healthy",
        app=settings.app_name,
        timestamp=datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
    )
