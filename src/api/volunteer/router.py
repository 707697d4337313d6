"""Volunteer domain router for the signed-in volunteer."""

from fastapi import APIRouter

from src.api.core.dependencies import (
    CurrentVolunteerAuthDep,
    VolunteerProfileServiceDep,
)
from src.api.volunteer.schemas import (
    VolunteerProfileResponse,
    VolunteerProfileUpdateRequest,
)

router = APIRouter(prefix="/volunteer", tags=["volunteer"])


@router.get("/profile", response_model=VolunteerProfileResponse)
async def get_volunteer_profile(
    current_volunteer: CurrentVolunteerAuthDep,
    service: VolunteerProfileServiceDep,
) -> VolunteerProfileResponse:
    """Get the current volunteer's profile and the fields this deployment lacks."""
    profile = await service.get_profile(current_volunteer.volunteer.id)
    return VolunteerProfileResponse.from_profile(profile)


@router.put("/profile", response_model=VolunteerProfileResponse)
async def update_volunteer_profile(
    profile_data: VolunteerProfileUpdateRequest,
    current_volunteer: CurrentVolunteerAuthDep,
    service: VolunteerProfileServiceDep,
) -> VolunteerProfileResponse:
    """Replace description, skills, CV and privacy for the current volunteer."""
    profile = await service.update_profile(
        volunteer_id=current_volunteer.volunteer.id,
        description=profile_data.description,
        skills=profile_data.skills,
        cv=profile_data.cv,
        privacy=profile_data.privacy,
    )
    return VolunteerProfileResponse.from_profile(profile)
