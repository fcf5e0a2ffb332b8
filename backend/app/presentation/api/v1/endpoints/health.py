"""Health check endpoint — reports the version and whether the client store answers."""

from fastapi import APIRouter, Depends

from app.application.interfaces import ClientRecordRepository
from app.config import get_settings
from app.infrastructure.dependencies import get_client_record_repository

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check(
    repository: ClientRecordRepository = Depends(get_client_record_repository),
) -> dict:
    """Returns the application health status once the client store is reachable."""
    settings = get_settings()
    await repository.wait_ready()
    return {
        "status": "healthy",
        "version": settings.app_version,
        "environment": settings.app_env,
        "database": "ready",
    }
