"""Volunteer profile reads and updates."""

from dataclasses import dataclass, field

from fastapi import status
from sqlalchemy import inspect, select
from sqlalchemy.orm import selectinload

from src.api.core.constants import OPTIONAL_PROFILE_TABLES
from src.api.core.exceptions.base import VolunteerHubException
from src.api.core.messages import MessageCode
from src.core.base import BaseService
from src.database.models import (
    ProfilePrivacy,
    VolunteerAccount,
    VolunteerCV,
    VolunteerSkill,
)


def clean_skills(skills: list[str]) -> list[str]:
    """Trim labels and drop empty ones. Order and duplicates are kept."""
    return [skill.strip() for skill in skills if skill and skill.strip()]


@dataclass
class VolunteerProfile:
    volunteer: VolunteerAccount
    skills: list[str]
    cv: str | None
    privacy: str | None
    unavailable_fields: list[str] = field(default_factory=list)


class VolunteerProfileService(BaseService):
    async def get_unavailable_fields(self) -> list[str]:
        """Profile fields whose backing table is missing from the live schema."""
        connection = await self.db.connection()
        existing = await connection.run_sync(
            lambda sync_conn: {
                table
                for table in OPTIONAL_PROFILE_TABLES.values()
                if inspect(sync_conn).has_table(table)
            }
        )
        return [
            profile_field
            for profile_field, table in OPTIONAL_PROFILE_TABLES.items()
            if table not in existing
        ]

    async def get_volunteer(self, volunteer_id: int) -> VolunteerAccount:
        stmt = (
            select(VolunteerAccount)
            .where(VolunteerAccount.id == volunteer_id)
            .options(selectinload(VolunteerAccount.skills))
            .execution_options(populate_existing=True)
        )
        result = await self.db.execute(stmt)
        volunteer = result.scalar_one_or_none()
        if volunteer is None:
            raise VolunteerHubException(
                MessageCode.VOLUNTEER_NOT_FOUND,
                status.HTTP_404_NOT_FOUND,
                {"volunteer_id": volunteer_id},
            )
        return volunteer

    async def get_profile(self, volunteer_id: int) -> VolunteerProfile:
        volunteer = await self.get_volunteer(volunteer_id)
        unavailable_fields = await self.get_unavailable_fields()

        cv = None
        if "cv" not in unavailable_fields:
            cv_row = await self.db.get(VolunteerCV, volunteer.id)
            cv = cv_row.url if cv_row else None

        return VolunteerProfile(
            volunteer=volunteer,
            skills=[skill.name for skill in volunteer.skills],
            cv=cv,
            privacy=volunteer.privacy,
            unavailable_fields=unavailable_fields,
        )

    async def update_profile(
        self,
        volunteer_id: int,
        description: str,
        skills: list[str],
        cv: str | None,
        privacy: ProfilePrivacy,
    ) -> VolunteerProfile:
        """Replace the editable profile fields.

        A ``cv`` value is ignored when the deployment does not support CVs.
        """
        volunteer = await self.get_volunteer(volunteer_id)
        unavailable_fields = await self.get_unavailable_fields()

        volunteer.description = description
        volunteer.privacy = ProfilePrivacy(privacy).value
        volunteer.skills = [
            VolunteerSkill(name=name, position=position)
            for position, name in enumerate(clean_skills(skills))
        ]

        if "cv" not in unavailable_fields:
            await self._set_cv(volunteer.id, cv)
        elif cv:
            self.logger.info(
                "Ignoring CV update, field unavailable", volunteer_id=volunteer.id
            )

        await self.commit()
        self.logger.info(
            "Volunteer profile updated",
            volunteer_id=volunteer.id,
            skills=len(volunteer.skills),
            privacy=volunteer.privacy,
        )
        return await self.get_profile(volunteer.id)

    async def _set_cv(self, volunteer_id: int, cv: str | None) -> None:
        cv_row = await self.db.get(VolunteerCV, volunteer_id)
        cv = cv.strip() if cv else None
        if cv:
            if cv_row is None:
                self.db.add(VolunteerCV(volunteer_id=volunteer_id, url=cv))
            else:
                cv_row.url = cv
        elif cv_row is not None:
            await self.db.delete(cv_row)
