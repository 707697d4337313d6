"""Volunteer profile API schemas."""

from typing import Annotated

from pydantic import BaseModel, Field, StringConstraints

from src.api.core.constants import (
    CV_MAX_LENGTH,
    DESCRIPTION_MAX_LENGTH,
    SKILL_MAX_LENGTH,
)
from src.database.models.volunteers import ProfilePrivacy
from src.modules.volunteer.profile import VolunteerProfile


class VolunteerModel(BaseModel):
    id: int
    first_name: str
    last_name: str
    email: str
    date_of_birth: str | None = None
    gender: str
    description: str | None = None

    class Config:
        from_attributes = True


class VolunteerProfileResponse(BaseModel):
    volunteer: VolunteerModel
    skills: list[str]
    cv: str | None = None
    privacy: str | None = None
    unavailable_fields: list[str] = Field(
        default_factory=list, alias="unavailableFields"
    )

    class Config:
        populate_by_name = True

    @classmethod
    def from_profile(cls, profile: VolunteerProfile) -> "VolunteerProfileResponse":
        return cls(
            volunteer=VolunteerModel.model_validate(profile.volunteer),
            skills=profile.skills,
            cv=profile.cv,
            privacy=profile.privacy,
            unavailable_fields=profile.unavailable_fields,
        )


SkillLabel = Annotated[str, StringConstraints(max_length=SKILL_MAX_LENGTH)]


class VolunteerProfileUpdateRequest(BaseModel):
    description: str = Field("", max_length=DESCRIPTION_MAX_LENGTH)
    skills: list[SkillLabel] = Field(default_factory=list)
    cv: str | None = Field(None, max_length=CV_MAX_LENGTH)
    privacy: ProfilePrivacy = ProfilePrivacy.PUBLIC
