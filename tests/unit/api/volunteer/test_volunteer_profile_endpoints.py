"""Volunteer profile endpoint tests."""

import pytest
from fastapi import status
from httpx import AsyncClient
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

from src.api.core.messages import MessageCode
from src.database.models import VolunteerAccount, VolunteerCV, VolunteerSkill
from tests.utils.assertions import (
    assert_authentication_error,
    assert_error_response,
    assert_validation_error,
)


async def drop_cv_table(async_engine: AsyncEngine) -> None:
    async with async_engine.begin() as connection:
        await connection.run_sync(VolunteerCV.__table__.drop)


@pytest.mark.asyncio
async def test_get_profile(
    app, volunteer_client: AsyncClient, test_volunteer: VolunteerAccount
):
    response = await volunteer_client.get("/volunteer/profile")

    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["volunteer"] == {
        "id": test_volunteer.id,
        "first_name": "Ada",
        "last_name": "Lovelace",
        "email": test_volunteer.email,
        "date_of_birth": "1990-03-04",
        "gender": "female",
        "description": "Weekend tutor.",
    }
    assert data["skills"] == ["Teaching", "First Aid"]
    assert data["cv"] is None
    assert data["privacy"] == "public"
    assert data["unavailableFields"] == []


@pytest.mark.asyncio
async def test_get_profile_includes_cv(
    app,
    volunteer_client: AsyncClient,
    db_session: AsyncSession,
    test_volunteer: VolunteerAccount,
    volunteer_cv_factory,
):
    await volunteer_cv_factory.create_async(
        db_session, volunteer_id=test_volunteer.id, url="https://cv.example.com/ada.pdf"
    )
    await db_session.commit()

    response = await volunteer_client.get("/volunteer/profile")

    assert response.status_code == status.HTTP_200_OK
    assert response.json()["cv"] == "https://cv.example.com/ada.pdf"


@pytest.mark.asyncio
async def test_get_profile_reports_missing_cv_table(
    app,
    volunteer_client: AsyncClient,
    async_engine: AsyncEngine,
    test_volunteer: VolunteerAccount,
):
    await drop_cv_table(async_engine)

    response = await volunteer_client.get("/volunteer/profile")

    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["unavailableFields"] == ["cv"]
    assert data["cv"] is None
    assert data["skills"] == ["Teaching", "First Aid"]


@pytest.mark.asyncio
async def test_update_profile(
    app,
    volunteer_client: AsyncClient,
    db_session: AsyncSession,
    test_volunteer: VolunteerAccount,
):
    response = await volunteer_client.put(
        "/volunteer/profile",
        json={
            "description": "Evening shifts only.",
            "skills": [" Cooking ", "", "Driving", "Cooking"],
            "cv": "https://cv.example.com/ada.pdf",
            "privacy": "private",
        },
    )

    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["volunteer"]["description"] == "Evening shifts only."
    assert data["skills"] == ["Cooking", "Driving", "Cooking"]
    assert data["cv"] == "https://cv.example.com/ada.pdf"
    assert data["privacy"] == "private"
    assert data["unavailableFields"] == []

    result = await db_session.execute(
        select(VolunteerSkill.name)
        .where(VolunteerSkill.volunteer_id == test_volunteer.id)
        .order_by(VolunteerSkill.position)
    )
    assert result.scalars().all() == ["Cooking", "Driving", "Cooking"]


@pytest.mark.asyncio
async def test_update_profile_clears_cv(
    app,
    volunteer_client: AsyncClient,
    db_session: AsyncSession,
    test_volunteer: VolunteerAccount,
    volunteer_cv_factory,
):
    await volunteer_cv_factory.create_async(db_session, volunteer_id=test_volunteer.id)
    await db_session.commit()

    response = await volunteer_client.put(
        "/volunteer/profile",
        json={"description": "", "skills": [], "cv": None, "privacy": "public"},
    )

    assert response.status_code == status.HTTP_200_OK
    assert response.json()["cv"] is None
    assert response.json()["skills"] == []

    result = await db_session.execute(
        select(VolunteerCV).where(VolunteerCV.volunteer_id == test_volunteer.id)
    )
    assert result.scalar_one_or_none() is None


@pytest.mark.asyncio
async def test_update_profile_without_cv_table(
    app,
    volunteer_client: AsyncClient,
    async_engine: AsyncEngine,
    test_volunteer: VolunteerAccount,
):
    """Other fields still save when the CV field is unavailable."""
    await drop_cv_table(async_engine)

    response = await volunteer_client.put(
        "/volunteer/profile",
        json={
            "description": "Still editable.",
            "skills": ["Logistics"],
            "cv": "https://cv.example.com/ignored.pdf",
            "privacy": "private",
        },
    )

    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["volunteer"]["description"] == "Still editable."
    assert data["skills"] == ["Logistics"]
    assert data["cv"] is None
    assert data["privacy"] == "private"
    assert data["unavailableFields"] == ["cv"]


@pytest.mark.asyncio
async def test_update_profile_rejects_long_description(
    app, volunteer_client: AsyncClient, test_volunteer: VolunteerAccount
):
    response = await volunteer_client.put(
        "/volunteer/profile",
        json={"description": "x" * 301, "skills": [], "cv": None, "privacy": "public"},
    )

    assert_validation_error(response, ["description"])


@pytest.mark.asyncio
async def test_update_profile_rejects_unknown_privacy(
    app, volunteer_client: AsyncClient, test_volunteer: VolunteerAccount
):
    response = await volunteer_client.put(
        "/volunteer/profile",
        json={"description": "", "skills": [], "cv": None, "privacy": "friends"},
    )

    assert_validation_error(response, ["privacy"])


@pytest.mark.asyncio
async def test_profile_requires_token(app, public_client: AsyncClient):
    response = await public_client.get("/volunteer/profile")

    assert_authentication_error(response)


@pytest.mark.asyncio
async def test_profile_rejects_invalid_token(app, public_client: AsyncClient):
    response = await public_client.get(
        "/volunteer/profile", headers={"Authorization": "Bearer garbage"}
    )

    assert_authentication_error(response, MessageCode.INVALID_TOKEN)


@pytest.mark.asyncio
async def test_profile_rejects_malformed_header(app, public_client: AsyncClient):
    response = await public_client.get(
        "/volunteer/profile", headers={"Authorization": "Token abc"}
    )

    assert_authentication_error(response, MessageCode.INVALID_TOKEN)


@pytest.mark.asyncio
async def test_profile_rejects_non_volunteer_token(
    app, public_client: AsyncClient, test_volunteer: VolunteerAccount, jwt_token_factory
):
    token = jwt_token_factory(test_volunteer.id, role="admin")

    response = await public_client.get(
        "/volunteer/profile", headers={"Authorization": f"Bearer {token}"}
    )

    assert_authentication_error(response, MessageCode.INVALID_TOKEN)


@pytest.mark.asyncio
async def test_profile_unknown_volunteer(
    app, public_client: AsyncClient, jwt_token_factory
):
    token = jwt_token_factory(424242)

    response = await public_client.get(
        "/volunteer/profile", headers={"Authorization": f"Bearer {token}"}
    )

    assert_error_response(
        response, MessageCode.VOLUNTEER_NOT_FOUND, status.HTTP_404_NOT_FOUND
    )
