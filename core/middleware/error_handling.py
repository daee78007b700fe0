"""
Error handling middleware with security-compliant error sanitization.
Prevents sensitive data leakage while returning the job board's flat
``{"error": ..., "code": ...}`` error bodies.
"""

import logging
import traceback
from typing import Any, Callable
from fastapi import Request, Response, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from sqlalchemy.exc import SQLAlchemyError, OperationalError
import re

from core.exceptions import JobBoardError

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "An unexpected error occurred"

# Patterns for sensitive data that should never be logged
SENSITIVE_PATTERNS = [
    re.compile(r'password["\s:=]+[^"\s,}]+', re.IGNORECASE),
    re.compile(r'token["\s:=]+[^"\s,}]+', re.IGNORECASE),
    re.compile(r'api[_-]?key["\s:=]+[^"\s,}]+', re.IGNORECASE),
    re.compile(r'secret["\s:=]+[^"\s,}]+', re.IGNORECASE),
    re.compile(r'\bBearer\s+[A-Za-z0-9._\-]+', re.IGNORECASE),
    re.compile(r'authorization["\s:]+[^"\s,}]+', re.IGNORECASE),
    re.compile(r'\b\d{3}-\d{2}-\d{4}\b'),  # SSN
    re.compile(r'\b\d{16}\b'),  # Credit card
]


def sanitize_error_message(message: Any) -> str:
    """
    Remove sensitive information from error messages.

    Args:
        message: Original error message

    Returns:
        Sanitized error message
    """
    sanitized = str(message)
    for pattern in SENSITIVE_PATTERNS:
        sanitized = pattern.sub('[REDACTED]', sanitized)
    return sanitized


def get_safe_error_details(exc: Exception, include_details: bool = False) -> dict[str, Any]:
    """
    Extract safe error details without exposing sensitive information.

    Args:
        exc: The exception to extract details from
        include_details: Whether to include the stack trace (only in dev)

    Returns:
        Dictionary with safe error details
    """
    details = {
        "type": type(exc).__name__,
        "message": sanitize_error_message(str(exc)),
    }
    if include_details:
        details["traceback"] = traceback.format_exc()
    return details


def format_validation_errors(exc: RequestValidationError) -> list[dict[str, Any]]:
    """Flatten pydantic validation errors to field/message/type triples."""
    return [
        {
            "field": ".".join(str(loc) for loc in error["loc"]),
            "message": sanitize_error_message(error["msg"]),
            "type": error["type"],
        }
        for error in exc.errors()
    ]


def domain_error_response(exc: JobBoardError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": sanitize_error_message(exc.message), "code": exc.code},
    )


class ErrorHandlingMiddleware:
    """
    Outermost error handling middleware.

    Catches anything that escaped the FastAPI exception handlers (errors
    raised inside other middleware, for instance), logs it sanitized and
    answers with a JSON error body instead of a bare 500.
    """

    def __init__(self, app: Callable, debug: bool = False):
        """
        Initialize error handling middleware.

        Args:
            app: The ASGI application
            debug: Whether to include detailed error information
        """
        self.app = app
        self.debug = debug

    async def __call__(self, scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        try:
            await self.app(scope, receive, send)
        except Exception as exc:
            response = self._handle_exception(exc, scope)
            await response(scope, receive, send)

    def _handle_exception(self, exc: Exception, scope: dict) -> Response:
        """
        Map an exception to a JSON error response.

        Args:
            exc: The exception to handle
            scope: ASGI scope for context

        Returns:
            JSONResponse with error details
        """
        request_path = scope.get("path", "unknown")
        request_method = scope.get("method", "unknown")

        if isinstance(exc, JobBoardError):
            logger.warning(
                f"Domain error: {request_method} {request_path} - {exc.code}: {exc.message}"
            )
            return domain_error_response(exc)

        status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
        error_code = "INTERNAL_SERVER_ERROR"
        message = GENERIC_ERROR_MESSAGE
        details = None

        if isinstance(exc, StarletteHTTPException):
            status_code = exc.status_code
            error_code = "HTTP_EXCEPTION"
            message = sanitize_error_message(exc.detail)
            logger.warning(
                f"HTTP exception: {request_method} {request_path} - "
                f"Status: {status_code}, Message: {message}"
            )

        elif isinstance(exc, RequestValidationError):
            status_code = status.HTTP_400_BAD_REQUEST
            error_code = "VALIDATION_ERROR"
            message = "Request validation failed"
            details = format_validation_errors(exc)
            logger.warning(
                f"Validation error: {request_method} {request_path} - Errors: {details}"
            )

        elif isinstance(exc, OperationalError):
            status_code = status.HTTP_503_SERVICE_UNAVAILABLE
            error_code = "DATABASE_ERROR"
            message = "Database service temporarily unavailable"
            logger.error(
                f"Database operational error: {request_method} {request_path}",
                exc_info=True,
            )

        elif isinstance(exc, SQLAlchemyError):
            error_code = "DATABASE_ERROR"
            message = "A database error occurred"
            if self.debug:
                details = get_safe_error_details(exc, include_details=True)
            logger.error(
                f"SQLAlchemy error: {request_method} {request_path}",
                exc_info=not self.debug,
            )

        elif isinstance(exc, TimeoutError):
            status_code = status.HTTP_504_GATEWAY_TIMEOUT
            error_code = "TIMEOUT"
            message = "The request timed out"
            logger.error(f"Timeout error: {request_method} {request_path}")

        else:
            if self.debug:
                details = get_safe_error_details(exc, include_details=True)
            logger.error(
                f"Unhandled exception: {request_method} {request_path} - "
                f"{type(exc).__name__}: {sanitize_error_message(str(exc))}",
                exc_info=True,
            )

        content: dict[str, Any] = {"error": message, "code": error_code}
        if details is not None:
            content["details"] = details

        headers = dict(scope.get("headers") or [])
        request_id = headers.get(b"x-request-id")
        if request_id:
            content["request_id"] = request_id.decode()

        return JSONResponse(status_code=status_code, content=content)


def setup_error_handlers(app):
    """
    Set up exception handlers for FastAPI application.

    Args:
        app: FastAPI application instance
    """

    @app.exception_handler(JobBoardError)
    async def job_board_error_handler(request: Request, exc: JobBoardError):
        """Handle domain errors with their own status code and code."""
        if exc.status_code >= 500:
            logger.error(
                f"{exc.code}: {request.method} {request.url.path} - "
                f"{sanitize_error_message(exc.message)}"
            )
        else:
            logger.info(f"{exc.code}: {request.method} {request.url.path}")
        return domain_error_response(exc)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        """Handle HTTP exceptions."""
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": sanitize_error_message(exc.detail), "code": "HTTP_EXCEPTION"},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        """Handle validation errors as bad input."""
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={
                "error": "Invalid request",
                "code": "VALIDATION_ERROR",
                "details": format_validation_errors(exc),
            },
        )

    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception):
        """Handle all other exceptions."""
        logger.error(
            f"Unhandled exception: {request.method} {request.url.path} - "
            f"{type(exc).__name__}: {sanitize_error_message(str(exc))}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": GENERIC_ERROR_MESSAGE},
        )
