"""Health Probe — liveness endpoint for container orchestration.

Invariants:
    - GET /api/v1/health/ always returns 200 if the process is up
    - Reports catalog size and live session count (no IO involved)
"""

from fastapi import APIRouter, Depends, status

from microwave.api.dependencies import ServiceContainer, get_container

router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check(container: ServiceContainer = Depends(get_container)):
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": "microwave-api",
        "version": "1.0.0",
        "programs": len(container.catalog.list_all()),
        "sessions": len(container.sessions.list_sessions()),
    }
