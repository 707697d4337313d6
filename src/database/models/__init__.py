"""Database models for the Volunteer Hub API."""

from .admins import AdminAccount
from .base import Base
from .organizations import OrganizationAccount, OrganizationRequest
from .volunteers import (
    Gender,
    ProfilePrivacy,
    VolunteerAccount,
    VolunteerCV,
    VolunteerSkill,
)

# Export all models and enums
__all__ = [
    # Base
    "Base",
    # Enums
    "Gender",
    "ProfilePrivacy",
    # Models
    "AdminAccount",
    "OrganizationAccount",
    "OrganizationRequest",
    "VolunteerAccount",
    "VolunteerSkill",
    "VolunteerCV",
]
