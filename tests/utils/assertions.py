"""Test utilities for asserting API responses and message codes."""

from typing import Any
from httpx import Response
from src.api.core.messages import MessageCode
from src.api.core.exceptions.base import VolunteerHubException


def assert_error_response(
    response: Response,
    expected_message_code: MessageCode,
    expected_status: int,
    expected_message: str | None = None,
) -> dict[str, Any]:
    """Assert that response is an error with expected message code.

    Args:
        response: HTTP response to check
        expected_message_code: Expected error message code
        expected_status: Expected HTTP status code
        expected_message: Optional expected error message

    Returns:
        Response data for further assertions
    """
    assert response.status_code == expected_status, (
        f"Expected status {expected_status}, got {response.status_code}. "
        f"Response: {response.text}"
    )

    json_data = response.json()

    assert json_data.get("message_code") == expected_message_code.value, (
        f"Expected message_code {expected_message_code.value}, "
        f"got {json_data.get('message_code')}"
    )

    if expected_message:
        assert json_data.get("message") == expected_message, (
            f"Expected message '{expected_message}', "
            f"got '{json_data.get('message')}'"
        )

    return json_data


def assert_validation_error(
    response: Response, fields: list[str] | None = None
) -> dict[str, Any]:
    """Assert that response is a request validation error.

    Args:
        response: HTTP response to check
        fields: Optional body field names expected among the errors

    Returns:
        Response data for further assertions
    """
    json_data = assert_error_response(response, MessageCode.INVALID_INPUT, 400)

    if fields:
        validation_errors = json_data.get("details", {}).get("validation_errors", [])
        error_fields = {
            err["loc"][-1] for err in validation_errors if err.get("loc")
        }
        for field in fields:
            assert field in error_fields, (
                f"Expected validation error for field '{field}', got {error_fields}"
            )

    return json_data


def assert_authentication_error(
    response: Response, message_code: MessageCode = MessageCode.AUTH_REQUIRED
) -> dict[str, Any]:
    """Assert that response is an authentication error."""
    return assert_error_response(response, message_code, 401)


def assert_volunteer_hub_exception(
    exception: VolunteerHubException,
    expected_message_code: MessageCode,
    expected_status: int | None = None,
) -> None:
    """Assert that a VolunteerHubException has expected properties.

    Args:
        exception: The exception to check
        expected_message_code: Expected message code
        expected_status: Optional expected HTTP status code
    """
    assert exception.message_code == expected_message_code, (
        f"Expected message_code {expected_message_code}, "
        f"got {exception.message_code}"
    )

    if expected_status:
        assert exception.status_code == expected_status, (
            f"Expected status_code {expected_status}, " f"got {exception.status_code}"
        )
