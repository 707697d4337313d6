"""Organization domain router."""

from fastapi import APIRouter, BackgroundTasks, Request

from src.api.core.dependencies import OrganizationRequestServiceDep
from src.api.organization.schemas import (
    OrganizationSignupRequest,
    OrganizationSignupResponse,
)
from src.modules.organization.notifications import notify_admins_in_background

router = APIRouter(
    prefix="/organization",
    tags=["organization"],
)


@router.post("/request", response_model=OrganizationSignupResponse)
async def request_organization_account(
    request: Request,
    background_tasks: BackgroundTasks,
    signup: OrganizationSignupRequest,
    service: OrganizationRequestServiceDep,
) -> OrganizationSignupResponse:
    """Submit an organization signup for administrator approval (public)."""
    organization_request = await service.submit_request(
        name=signup.name,
        email=signup.email,
        url=signup.url,
        location_name=signup.location_name,
        phone_number=signup.phone_number,
        latitude=signup.latitude,
        longitude=signup.longitude,
    )

    background_tasks.add_task(
        notify_admins_in_background,
        request.app.state.session_factory,
        organization_request.id,
    )
    return OrganizationSignupResponse()
