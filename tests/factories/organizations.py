"""Factories for organization account and request models."""

import factory
from src.database.models import OrganizationAccount, OrganizationRequest
from .base import AsyncSQLAlchemyModelFactory


class OrganizationAccountFactory(AsyncSQLAlchemyModelFactory[OrganizationAccount]):
    """Factory for creating approved OrganizationAccount instances."""

    class Meta:
        model = OrganizationAccount

    name = factory.Faker("company")
    email = factory.Sequence(lambda n: f"contact{n}@organization.org")
    phone_number = factory.Sequence(lambda n: f"+1555000{n:04d}")
    url = factory.Sequence(lambda n: f"https://organization{n}.org/")
    password = factory.Sequence(lambda n: f"hashed-password-{n}")
    location_name = factory.Faker("city")
    latitude = None
    longitude = None


class OrganizationRequestFactory(AsyncSQLAlchemyModelFactory[OrganizationRequest]):
    """Factory for creating pending OrganizationRequest instances."""

    class Meta:
        model = OrganizationRequest

    name = factory.Faker("company")
    email = factory.Sequence(lambda n: f"signup{n}@request.org")
    phone_number = None
    url = factory.Sequence(lambda n: f"https://request{n}.org/")
    location_name = factory.Faker("city")
    latitude = None
    longitude = None
