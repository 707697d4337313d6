"""Global test configuration and fixtures for Volunteer Hub API."""

import os

# Settings are read at call time, so these must be set before the app is used
os.environ.setdefault("JWT_SECRET", "test-jwt-secret-key-for-testing-only")
os.environ.setdefault("ENVIRONMENT", "TEST")
os.environ["RESEND_API_KEY"] = ""

from collections.abc import AsyncGenerator
from datetime import datetime, timedelta, timezone
from typing import Callable
from urllib.parse import urlparse

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy_utils import create_database, database_exists, drop_database

from asgi_lifespan import LifespanManager
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from jose import jwt

from src.database.models import Base, VolunteerAccount, VolunteerSkill
from src.api.core.constants import JWT_ALGORITHM
from src.utils.settings.auth import AuthSettings

from tests.factories import (
    AdminAccountFactory,
    OrganizationAccountFactory,
    OrganizationRequestFactory,
    VolunteerCVFactory,
    VolunteerFactory,
)

TEST_BASE_URL = "http://test-volunteer-hub-api"


@pytest.fixture
def organization_account_factory():
    return OrganizationAccountFactory


@pytest.fixture
def organization_request_factory():
    return OrganizationRequestFactory


@pytest.fixture
def volunteer_factory():
    return VolunteerFactory


@pytest.fixture
def volunteer_cv_factory():
    return VolunteerCVFactory


@pytest.fixture
def admin_factory():
    return AdminAccountFactory


@pytest.fixture(scope="session")
def worker_id(request):
    """Get pytest-xdist worker ID or 'main' for single process."""
    if hasattr(request.config, "workerinput"):
        return request.config.workerinput["workerid"]
    return "main"


@pytest.fixture(scope="session")
def test_database_uri(worker_id, tmp_path_factory):
    """Create a test database per worker.

    Uses Postgres when ``TEST_DATABASE_URL`` is set, otherwise a SQLite file.
    """
    base_database_url = os.getenv("TEST_DATABASE_URL")
    if not base_database_url:
        database_path = tmp_path_factory.mktemp("db") / f"volunteer_hub_{worker_id}.db"
        yield f"sqlite+aiosqlite:///{database_path}"
        return

    parsed = urlparse(base_database_url)
    test_database_name = f"test_volunteer_hub_{worker_id}"
    test_database = parsed._replace(path=f"/{test_database_name}")

    sync_dsn = test_database._replace(scheme="postgresql+psycopg2").geturl()
    async_dsn = test_database._replace(scheme="postgresql+asyncpg").geturl()

    if database_exists(sync_dsn):
        drop_database(sync_dsn)
    create_database(sync_dsn)

    yield async_dsn

    if database_exists(sync_dsn):
        drop_database(sync_dsn)


@pytest_asyncio.fixture
async def async_engine(test_database_uri) -> AsyncGenerator[AsyncEngine, None]:
    """Async engine with a fresh schema for every test."""
    engine = create_async_engine(test_database_uri, echo=False)
    async with engine.begin() as connection:
        await connection.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as connection:
        await connection.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
def session_factory(async_engine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(bind=async_engine, expire_on_commit=False)


@pytest_asyncio.fixture
async def db_session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    """Session for arranging and inspecting data. Commit before calling the API."""
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def app(session_factory) -> AsyncGenerator[FastAPI, None]:
    """Create FastAPI application with lifespan manager for testing."""
    from src.main import app

    app.state.session_factory = session_factory
    async with LifespanManager(app):
        yield app


# Test Data Fixtures
@pytest_asyncio.fixture
async def test_volunteer(
    db_session: AsyncSession, volunteer_factory
) -> VolunteerAccount:
    """Create a volunteer with two skills."""
    volunteer = await volunteer_factory.create_async(
        db_session,
        first_name="Ada",
        last_name="Lovelace",
        description="Weekend tutor.",
        skills=[
            VolunteerSkill(name="Teaching", position=0),
            VolunteerSkill(name="First Aid", position=1),
        ],
        commit=True,
    )
    return volunteer


# JWT Token Fixtures
@pytest.fixture()
def jwt_token_factory() -> Callable[..., str]:
    """Factory for creating volunteer JWT tokens."""
    auth_settings = AuthSettings()

    def create_token(
        volunteer_id: int | str,
        role: str = "volunteer",
        expires_in: timedelta = timedelta(hours=1),
    ) -> str:
        payload = {
            "sub": str(volunteer_id),
            "aud": auth_settings.JWT_AUDIENCE,
            "role": role,
            "exp": datetime.now(timezone.utc) + expires_in,
        }
        return jwt.encode(payload, auth_settings.JWT_SECRET, algorithm=JWT_ALGORITHM)

    return create_token


@pytest.fixture
def volunteer_token(
    test_volunteer: VolunteerAccount, jwt_token_factory: Callable[..., str]
) -> str:
    return jwt_token_factory(test_volunteer.id)


# HTTP Client Fixtures
@pytest_asyncio.fixture
async def public_client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """Create HTTP client for testing public endpoints."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url=TEST_BASE_URL,
    ) as ac:
        yield ac


@pytest_asyncio.fixture
async def volunteer_client(
    app: FastAPI, volunteer_token: str
) -> AsyncGenerator[AsyncClient, None]:
    """Create HTTP client with the test volunteer's bearer token."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url=TEST_BASE_URL,
        headers={"Authorization": f"Bearer {volunteer_token}"},
    ) as ac:
        yield ac
