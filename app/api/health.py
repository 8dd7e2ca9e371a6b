"""Health check endpoints."""
from datetime import datetime, timezone
from fastapi import APIRouter
from fastapi.responses import JSONResponse

from app.core.config import settings
from app.models.responses import HealthData, DependencyStatus

router = APIRouter(tags=["health"])

service_start_time = datetime.now()

@router.get("/")
async def root():
    """Root endpoint."""
    return {"message": "Video Idea Evaluator is running"}

@router.get("/health")
async def health_check():
    """
    Health check endpoint with collaborator configuration status
    """
    uptime = int((datetime.now() - service_start_time).total_seconds())

    dependencies = DependencyStatus(
        youtube="configured" if settings.youtube_api_key else "not_configured",
        openai="configured" if settings.openai_api_key else "not_configured"
    )

    health_data = HealthData(
        status="healthy" if settings.youtube_api_key else "degraded",
        timestamp=datetime.now(timezone.utc).isoformat(),
        version=settings.api_version,
        uptime_seconds=uptime,
        dependencies=dependencies
    )

    return JSONResponse(
        status_code=200,
        content=health_data.model_dump()
    )
