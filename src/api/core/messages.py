"""Centralized message codes and default messages for API responses."""

from enum import Enum


class MessageCode(str, Enum):
    """Centralized message codes for API responses."""

    # Authentication & Authorization
    AUTH_REQUIRED = "AUTH_REQUIRED"
    INVALID_TOKEN = "INVALID_TOKEN"

    # Organization signup
    ORGANIZATION_ACCOUNT_EXISTS = "ORGANIZATION_ACCOUNT_EXISTS"
    ORGANIZATION_REQUEST_PENDING = "ORGANIZATION_REQUEST_PENDING"
    ORGANIZATION_REQUEST_FAILED = "ORGANIZATION_REQUEST_FAILED"

    # Volunteer profile
    VOLUNTEER_NOT_FOUND = "VOLUNTEER_NOT_FOUND"

    # Validation errors
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_INPUT = "INVALID_INPUT"

    # Generic errors
    INTERNAL_ERROR = "INTERNAL_ERROR"
    BAD_REQUEST = "BAD_REQUEST"
    NOT_FOUND = "NOT_FOUND"


# Default messages for each message code
DEFAULT_MESSAGES = {
    # Authentication & Authorization
    MessageCode.AUTH_REQUIRED: "Authentication required",
    MessageCode.INVALID_TOKEN: "Invalid authentication token",
    # Organization signup
    MessageCode.ORGANIZATION_ACCOUNT_EXISTS: "An organization with this email account already exists",
    MessageCode.ORGANIZATION_REQUEST_PENDING: "A request with this email is already pending",
    MessageCode.ORGANIZATION_REQUEST_FAILED: "Failed to create organization request",
    # Volunteer profile
    MessageCode.VOLUNTEER_NOT_FOUND: "Volunteer not found",
    # Validation errors
    MessageCode.VALIDATION_ERROR: "Validation failed",
    MessageCode.INVALID_INPUT: "Invalid input provided",
    # Generic errors
    MessageCode.INTERNAL_ERROR: "Internal server error",
    MessageCode.BAD_REQUEST: "Bad request",
    MessageCode.NOT_FOUND: "Resource not found",
}


def get_default_message(message_code: MessageCode) -> str:
    """Get default message for a message code."""
    return DEFAULT_MESSAGES.get(message_code, "Operation completed")
