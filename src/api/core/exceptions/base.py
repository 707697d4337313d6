"""Global exception handlers for the FastAPI application.

Every error leaves the API in the same envelope:
``{"message_code": ..., "message": ..., "details": {...}}``.
"""

import traceback

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from ..messages import MessageCode, get_default_message
from src.utils.logger import get_logger

logger = get_logger(__name__)


class VolunteerHubException(Exception):
    """Base exception for the Volunteer Hub API with unified message codes."""

    def __init__(
        self,
        message_code: MessageCode,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: dict | None = None,
        headers: dict | None = None,
    ):
        self.message_code = message_code
        self.status_code = status_code
        self.message: str = get_default_message(message_code)
        self.details = details or {}
        self.headers = headers or {}
        super().__init__(self.message)

    def to_response_dict(self) -> dict:
        """Convert exception to API response format."""
        return {
            "message_code": self.message_code,
            "message": self.message,
            "details": self.details,
        }


def error_response(
    status_code: int,
    message_code: MessageCode,
    message: str | None = None,
    details: dict | None = None,
    headers: dict | None = None,
) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "message_code": message_code,
            "message": message or get_default_message(message_code),
            "details": details or {},
        },
        headers=headers,
    )


def _serializable_errors(exc: RequestValidationError | ValidationError) -> list[dict]:
    errors = []
    for error in exc.errors():
        error_dict = dict(error)
        if hasattr(error_dict.get("input"), "isoformat"):
            error_dict["input"] = error_dict["input"].isoformat()
        # ctx may carry the raw exception object
        if "ctx" in error_dict:
            error_dict["ctx"] = {k: str(v) for k, v in error_dict["ctx"].items()}
        errors.append(error_dict)
    return errors


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with the FastAPI app."""

    @app.exception_handler(VolunteerHubException)
    async def volunteer_hub_exception_handler(
        request: Request, exc: VolunteerHubException
    ) -> JSONResponse:
        log = logger.warning if exc.status_code < 500 else logger.error
        log(
            f"Volunteer Hub exception: {exc.message_code.value}",
            path=request.url.path,
            method=request.method,
            details=exc.details,
        )
        return JSONResponse(
            status_code=exc.status_code,
            content=exc.to_response_dict(),
            headers=exc.headers,
        )

    # Also receives fastapi.HTTPException, which subclasses Starlette's
    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        logger.warning(
            f"HTTP exception {exc.status_code}: {exc.detail}",
            path=request.url.path,
            method=request.method,
        )
        message_code = {
            status.HTTP_404_NOT_FOUND: MessageCode.NOT_FOUND,
            status.HTTP_400_BAD_REQUEST: MessageCode.BAD_REQUEST,
        }.get(exc.status_code, MessageCode.INTERNAL_ERROR)
        return error_response(
            exc.status_code,
            message_code,
            str(exc.detail),
            {"description": "HTTP exception occurred"},
            getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_exception_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Malformed request bodies are client errors."""
        logger.warning(
            "Request validation failed", path=request.url.path, method=request.method
        )
        return error_response(
            status.HTTP_400_BAD_REQUEST,
            MessageCode.INVALID_INPUT,
            details={
                "description": "Request validation failed",
                "validation_errors": _serializable_errors(exc),
            },
        )

    @app.exception_handler(ValidationError)
    async def pydantic_validation_exception_handler(
        request: Request, exc: ValidationError
    ) -> JSONResponse:
        """Validation failures raised while building responses."""
        logger.error(
            "Pydantic validation error occurred",
            path=request.url.path,
            method=request.method,
        )
        return error_response(
            status.HTTP_422_UNPROCESSABLE_ENTITY,
            MessageCode.VALIDATION_ERROR,
            details={"validation_errors": _serializable_errors(exc)},
        )

    @app.exception_handler(SQLAlchemyError)
    async def sqlalchemy_exception_handler(
        request: Request, exc: SQLAlchemyError
    ) -> JSONResponse:
        logger.error(
            f"Database error: {exc}",
            path=request.url.path,
            method=request.method,
            exception_type=type(exc).__name__,
        )
        if isinstance(exc, IntegrityError):
            return error_response(
                status.HTTP_409_CONFLICT,
                MessageCode.BAD_REQUEST,
                "Data integrity constraint violated",
                {"database_error": "Constraint violation"},
            )
        return error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            MessageCode.INTERNAL_ERROR,
            "Database error occurred",
            {"database_error": "Internal database error"},
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(
        request: Request, exc: Exception
    ) -> JSONResponse:
        logger.error(
            f"Unhandled exception: {exc}",
            path=request.url.path,
            method=request.method,
            exception_type=type(exc).__name__,
            traceback=traceback.format_exc(),
        )
        return error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            MessageCode.INTERNAL_ERROR,
            "Internal server error",
            {"error_type": type(exc).__name__},
        )
