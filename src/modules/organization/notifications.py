import asyncio

import resend
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from src.api.core.constants import SHOULD_SEND_ORGANIZATION_REQUEST_EMAIL
from src.core.base import BaseService
from src.database.models import AdminAccount, OrganizationRequest
from src.emails import get_admin_url, render_email
from src.utils.logger import get_logger
from src.utils.settings.app import AppSettings
from src.utils.settings.email import EmailSettings

logger = get_logger(__name__)


class OrganizationRequestNotifier(BaseService):
    """Emails administrators when an organization asks to join.

    Errors propagate to the caller, which decides whether they matter.
    """

    async def get_admin_recipients(self) -> list[str]:
        result = await self.db.execute(
            select(AdminAccount.email).order_by(AdminAccount.id)
        )
        recipients: list[str] = []
        for email in [*AppSettings().ADMIN_EMAILS, *result.scalars().all()]:
            normalized = email.strip().lower()
            if normalized and normalized not in recipients:
                recipients.append(normalized)
        return recipients

    async def notify_admins(self, organization_request: OrganizationRequest) -> str | None:
        """Send the new-request email. Returns the provider message id, if sent."""
        if not SHOULD_SEND_ORGANIZATION_REQUEST_EMAIL:
            self.logger.debug("Organization request email disabled by flag")
            return None

        email_settings = EmailSettings()
        if not email_settings.RESEND_API_KEY:
            self.logger.warning(
                "RESEND_API_KEY not configured, skipping organization request email",
                organization_request_id=organization_request.id,
            )
            return None

        recipients = await self.get_admin_recipients()
        if not recipients:
            self.logger.warning(
                "No administrator recipients configured",
                organization_request_id=organization_request.id,
            )
            return None

        email_data = render_email(
            template_name="organization_request",
            locale=email_settings.EMAIL_LOCALE,
            context={
                "organization_name": organization_request.name,
                "organization_email": organization_request.email,
                "phone_number": organization_request.phone_number,
                "url": organization_request.url,
                "location_name": organization_request.location_name,
                "latitude": organization_request.latitude,
                "longitude": organization_request.longitude,
                "admin_url": get_admin_url(email_settings.APP_BASE_URL),
            },
        )

        resend.api_key = email_settings.RESEND_API_KEY
        from_address = f"{email_settings.EMAIL_FROM_NAME} <{email_settings.EMAIL_FROM_ADDRESS}@{email_settings.EMAIL_FROM_DOMAIN}>"

        # resend is a blocking client
        response = await asyncio.to_thread(
            resend.Emails.send,
            {
                "from": from_address,
                "to": recipients,
                "subject": email_data["subject"],
                "html": email_data["html"],
                "reply_to": email_data["reply_to"],
                "tags": [{"name": "category", "value": "organization_request"}],
            },
        )

        self.logger.info(
            "Organization request email sent",
            email_id=response["id"],
            organization_request_id=organization_request.id,
            recipients=len(recipients),
        )
        return response["id"]


async def notify_admins_in_background(
    session_factory: async_sessionmaker[AsyncSession],
    organization_request_id: int,
) -> None:
    """Background task sending the new-request email after the response.

    Runs on its own session since the request's session is closed by then.
    Failures are logged and never reach the client.
    """
    async with session_factory() as db:
        try:
            organization_request = await db.get(
                OrganizationRequest, organization_request_id
            )
            if organization_request is None:
                logger.warning(
                    "Organization request vanished before notification",
                    organization_request_id=organization_request_id,
                )
                return
            await OrganizationRequestNotifier(db).notify_admins(organization_request)
        except Exception as e:
            logger.warning(
                "Failed to send organization request email to admin",
                organization_request_id=organization_request_id,
                error=str(e),
            )
