"""Health check endpoints for debugging and monitoring."""

from fastapi import APIRouter

from src.api.core.dependencies import AsyncSessionDep
from src.modules.health.service import HealthService, OverallHealthStatus

router = APIRouter(prefix="/health", tags=["health"])


@router.get("/")
async def health_check(db: AsyncSessionDep) -> OverallHealthStatus:
    """Health check for the services the API depends on."""
    health_service = HealthService(db)
    return await health_service.run_all_checks()


@router.get("/liveness")
async def liveness_check():
    """Simple liveness check - indicates if service is running."""
    return {"status": "alive", "service": "volunteer-hub-api"}
