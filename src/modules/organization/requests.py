"""Organization signup admission check."""

from decimal import Decimal

from fastapi import status
from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError

from src.api.core.exceptions.base import VolunteerHubException
from src.api.core.messages import MessageCode
from src.core.base import BaseService
from src.database.models import OrganizationAccount, OrganizationRequest


def normalize_email(email: str) -> str:
    """Canonical form used for every lookup and write of an organization email."""
    return email.strip().lower()


class OrganizationRequestService(BaseService):
    async def get_account_by_email(self, email: str) -> OrganizationAccount | None:
        # Accounts are written by the approval workflow, so compare case-insensitively
        stmt = select(OrganizationAccount).where(
            func.lower(OrganizationAccount.email) == normalize_email(email)
        )
        result = await self.db.execute(stmt)
        return result.scalars().first()

    async def get_pending_request_by_email(
        self, email: str
    ) -> OrganizationRequest | None:
        stmt = select(OrganizationRequest).where(
            OrganizationRequest.email == normalize_email(email)
        )
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def ensure_email_available(self, email: str) -> None:
        """Raise the matching conflict if ``email`` is already an account or a pending request."""
        if await self.get_account_by_email(email):
            raise VolunteerHubException(
                MessageCode.ORGANIZATION_ACCOUNT_EXISTS,
                status.HTTP_400_BAD_REQUEST,
                {"email": email},
            )

        if await self.get_pending_request_by_email(email):
            raise VolunteerHubException(
                MessageCode.ORGANIZATION_REQUEST_PENDING,
                status.HTTP_400_BAD_REQUEST,
                {"email": email},
            )

    async def submit_request(
        self,
        name: str,
        email: str,
        url: str,
        location_name: str,
        phone_number: str | None = None,
        latitude: Decimal | float | None = None,
        longitude: Decimal | float | None = None,
    ) -> OrganizationRequest:
        """Admit a new organization signup and store it as a pending request.

        The pre-checks give the user a precise message; the unique constraints
        on ``organization_request`` are what actually prevent duplicates when
        two identical signups race past them. Administrators are notified by
        the caller once the response is on its way.
        """
        email = normalize_email(email)
        await self.ensure_email_available(email)

        organization_request = OrganizationRequest(
            name=name,
            email=email,
            phone_number=phone_number,
            url=url,
            location_name=location_name,
            latitude=latitude,
            longitude=longitude,
        )
        self.db.add(organization_request)
        try:
            await self.commit()
        except IntegrityError as e:
            self.logger.warning(
                "Organization request insert rejected by constraint",
                email=email,
                url=url,
                error=str(e.orig),
            )
            await self.ensure_email_available(email)
            raise VolunteerHubException(
                MessageCode.ORGANIZATION_REQUEST_FAILED,
                status.HTTP_500_INTERNAL_SERVER_ERROR,
                {"description": "Organization request could not be stored"},
            ) from e

        await self.db.refresh(organization_request)
        self.logger.info(
            "Organization request created",
            organization_request_id=organization_request.id,
            email=email,
        )
        return organization_request
