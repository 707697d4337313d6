from typing import Annotated, AsyncGenerator

from fastapi import Depends, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from src.api.core.exceptions.base import VolunteerHubException
from src.api.core.messages import MessageCode
from src.core.context import AuthenticatedVolunteerContext
from src.database.models.volunteers import VolunteerAccount
from src.modules.organization.requests import OrganizationRequestService
from src.modules.volunteer.profile import VolunteerProfileService


async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """Get database session from app state."""
    session_factory = request.app.state.session_factory
    async with session_factory() as session:
        yield session


async def get_organization_request_service(
    db: Annotated[AsyncSession, Depends(get_db_session)],
) -> OrganizationRequestService:
    """Get organization request service with database session."""
    return OrganizationRequestService(db)


async def get_volunteer_profile_service(
    db: Annotated[AsyncSession, Depends(get_db_session)],
) -> VolunteerProfileService:
    """Get volunteer profile service with database session."""
    return VolunteerProfileService(db)


async def get_current_volunteer_authenticated(
    request: Request,
    db: Annotated[AsyncSession, Depends(get_db_session)],
) -> AuthenticatedVolunteerContext:
    """Dependency to get the current authenticated volunteer.

    Assumes auth middleware has set request.state.volunteer_id and request.state.auth_error.
    """
    auth_error = getattr(request.state, "auth_error", None)
    if auth_error is not None:
        raise auth_error

    volunteer_id = getattr(request.state, "volunteer_id", None)
    if volunteer_id is None:
        raise VolunteerHubException(
            MessageCode.AUTH_REQUIRED,
            status.HTTP_401_UNAUTHORIZED,
            {"description": "Provide a volunteer bearer token"},
        )

    volunteer = await db.get(VolunteerAccount, volunteer_id)
    if volunteer is None:
        raise VolunteerHubException(
            MessageCode.VOLUNTEER_NOT_FOUND,
            status.HTTP_404_NOT_FOUND,
            {"volunteer_id": volunteer_id},
        )

    return AuthenticatedVolunteerContext(volunteer=volunteer)


AsyncSessionDep = Annotated[AsyncSession, Depends(get_db_session)]
OrganizationRequestServiceDep = Annotated[
    OrganizationRequestService, Depends(get_organization_request_service)
]
VolunteerProfileServiceDep = Annotated[
    VolunteerProfileService, Depends(get_volunteer_profile_service)
]

CurrentVolunteerAuthDep = Annotated[
    AuthenticatedVolunteerContext, Depends(get_current_volunteer_authenticated)
]
