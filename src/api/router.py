from fastapi import APIRouter

from src.api.health.router import router as health_router
from src.api.organization.router import router as organization_router
from src.api.volunteer.router import router as volunteer_router

# Main API router
api_router = APIRouter()
api_router.include_router(health_router)
api_router.include_router(organization_router)
api_router.include_router(volunteer_router)
