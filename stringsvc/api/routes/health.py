"""Health Probe — liveness endpoint for container orchestration.

Invariants:
    - GET /health/ always returns 200 if process is up
    - Reports the identity of the Settings the app was built with
"""

from fastapi import APIRouter, status

from stringsvc.config import Settings


def create_router(settings: Settings) -> APIRouter:
    router = APIRouter(prefix="/health", tags=["health"])

    @router.get("/", status_code=status.HTTP_200_OK)
    async def health_check():
        """Basic liveness probe. Returns 200 if the process is up."""
        return {
            "status": "healthy",
            "service": settings.service_name,
            "version": settings.service_version,
        }

    return router
