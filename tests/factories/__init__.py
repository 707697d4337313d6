"""Test factories for Volunteer Hub API models."""

from .base import AsyncSQLAlchemyModelFactory
from .admins import AdminAccountFactory
from .organizations import OrganizationAccountFactory, OrganizationRequestFactory
from .volunteers import VolunteerCVFactory, VolunteerFactory

__all__ = [
    "AsyncSQLAlchemyModelFactory",
    "AdminAccountFactory",
    "OrganizationAccountFactory",
    "OrganizationRequestFactory",
    "VolunteerCVFactory",
    "VolunteerFactory",
]
