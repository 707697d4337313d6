"""Volunteer bearer tokens.

Tokens are minted by the login service; this API only verifies them. The
subject claim carries the ``volunteer_account.id``.
"""

from datetime import datetime, timedelta, timezone
from typing import Any

from fastapi import status
from jose import JWTError, jwt

from src.api.core.constants import JWT_ALGORITHM
from src.api.core.exceptions.base import VolunteerHubException
from src.api.core.messages import MessageCode
from src.utils.logger import get_logger
from src.utils.settings.auth import AuthSettings

logger = get_logger(__name__)


def create_volunteer_token(
    volunteer_id: int,
    expires_in: timedelta = timedelta(hours=1),
    extra: dict[str, Any] | None = None,
) -> str:
    settings = AuthSettings()
    payload: dict[str, Any] = {
        "sub": str(volunteer_id),
        "aud": settings.JWT_AUDIENCE,
        "role": "volunteer",
        "exp": datetime.now(timezone.utc) + expires_in,
    }
    if extra:
        payload.update(extra)
    return jwt.encode(payload, settings.JWT_SECRET, algorithm=JWT_ALGORITHM)


def decode_volunteer_token(token: str) -> int:
    """Return the volunteer id carried by ``token``."""
    settings = AuthSettings()
    try:
        payload = jwt.decode(
            token,
            settings.JWT_SECRET,
            algorithms=[JWT_ALGORITHM],
            audience=settings.JWT_AUDIENCE,
        )
    except JWTError as e:
        logger.info(f"JWT decoding failed: {e}")
        raise VolunteerHubException(
            MessageCode.INVALID_TOKEN,
            status.HTTP_401_UNAUTHORIZED,
            {"description": "Invalid or expired authentication token"},
        )

    if payload.get("role") != "volunteer":
        raise VolunteerHubException(
            MessageCode.INVALID_TOKEN,
            status.HTTP_401_UNAUTHORIZED,
            {"description": "Token is not a volunteer token"},
        )

    subject = payload.get("sub", "")
    if not str(subject).isdigit():
        raise VolunteerHubException(
            MessageCode.INVALID_TOKEN,
            status.HTTP_401_UNAUTHORIZED,
            {"description": "Token subject is not a volunteer id"},
        )
    return int(subject)
