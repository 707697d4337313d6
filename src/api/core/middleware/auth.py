from fastapi import Request

from src.api.core.constants import SKIP_AUTH_PATHS
from src.api.core.exceptions.base import VolunteerHubException
from src.api.core.messages import MessageCode
from src.modules.auth.tokens import decode_volunteer_token
from src.utils.logger import get_logger
from src.utils.path_helpers import path_matches

logger = get_logger(__name__)


async def auth_middleware(request: Request, call_next):
    """Resolve the volunteer bearer token into ``request.state``.

    The middleware never rejects a request itself. Routes that need a
    volunteer depend on ``CurrentVolunteerAuthDep``, which raises the recorded
    ``auth_error`` (or ``AUTH_REQUIRED``) so the global exception handlers
    render the response.
    """
    request.state.volunteer_id = None
    request.state.auth_error = None

    if path_matches(request.url.path, SKIP_AUTH_PATHS):
        return await call_next(request)

    authorization = request.headers.get("Authorization", "")
    if authorization:
        auth_parts = authorization.split(" ")
        if len(auth_parts) != 2 or auth_parts[0].lower() != "bearer":
            logger.debug(
                "Invalid authorization header format",
                auth_parts_count=len(auth_parts),
            )
            request.state.auth_error = VolunteerHubException(
                MessageCode.INVALID_TOKEN,
                401,
                {"description": "Authorization header must be 'Bearer <token>'"},
            )
        else:
            try:
                request.state.volunteer_id = decode_volunteer_token(auth_parts[1])
            except VolunteerHubException as e:
                request.state.auth_error = e

    return await call_next(request)
