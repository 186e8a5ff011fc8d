"""Exception handlers and custom exceptions for the Pets API.

This module defines custom exception classes and global exception handlers
for consistent error responses across the API.
"""

import logging
from typing import Any, Dict, Optional, Union

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import OperationalError, SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from pets_api.core.config import Settings

logger = logging.getLogger(__name__)


class PetsAPIException(Exception):
    """Base exception class for the Pets API."""

    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        error_code: str = "INTERNAL_ERROR",
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.status_code = status_code
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)


class ResourceNotFoundError(PetsAPIException):
    """Exception raised when a resource is not found."""

    def __init__(
        self,
        resource: str,
        resource_id: Union[str, int],
        details: Optional[Dict[str, Any]] = None,
    ):
        message = f"{resource} with ID '{resource_id}' not found"
        default_details = {"resource": resource, "resource_id": str(resource_id)}
        if details:
            default_details.update(details)
        super().__init__(
            message=message,
            status_code=status.HTTP_404_NOT_FOUND,
            error_code="RESOURCE_NOT_FOUND",
            details=default_details,
        )


class BadRequestError(PetsAPIException):
    """Exception raised for invalid request content."""

    def __init__(
        self,
        message: str = "Request validation failed",
        field_errors: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            message=message,
            status_code=status.HTTP_400_BAD_REQUEST,
            error_code="VALIDATION_ERROR",
            details={"field_errors": field_errors or {}},
        )


class StoreFailureError(PetsAPIException):
    """Exception raised when the data store cannot complete an operation."""

    def __init__(self, message: str = "Data store operation failed"):
        super().__init__(
            message=message,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            error_code="STORE_FAILURE",
        )


def create_error_response(
    status_code: int,
    message: str,
    error_code: str = "ERROR",
    details: Optional[Dict[str, Any]] = None,
    request_id: Optional[str] = None,
) -> Dict[str, Any]:
    """Create standardized error response format.

    Args:
        status_code: HTTP status code
        message: Error message
        error_code: Application-specific error code
        details: Additional error details
        request_id: Request ID for tracing

    Returns:
        Dict: Standardized error response
    """
    response = {
        "error": {"code": error_code, "message": message, "status_code": status_code},
        "success": False,
    }

    if details:
        response["error"]["details"] = details

    if request_id:
        response["request_id"] = request_id

    return response


async def pets_api_exception_handler(
    request: Request, exc: PetsAPIException
) -> JSONResponse:
    """Handle custom Pets API exceptions."""
    request_id = getattr(request.state, "request_id", None)

    log = logger.error if exc.status_code >= 500 else logger.info
    log(
        f"PetsAPIException: {exc.error_code} - {exc.message}",
        extra={
            "request_id": request_id,
            "status_code": exc.status_code,
            "error_code": exc.error_code,
            "path": str(request.url),
            "method": request.method,
        },
    )

    return JSONResponse(
        status_code=exc.status_code,
        content=create_error_response(
            status_code=exc.status_code,
            message=exc.message,
            error_code=exc.error_code,
            details=exc.details,
            request_id=request_id,
        ),
    )


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Handle FastAPI and Starlette HTTP exceptions."""
    request_id = getattr(request.state, "request_id", None)

    error_code_mapping = {
        400: "BAD_REQUEST",
        404: "NOT_FOUND",
        405: "METHOD_NOT_ALLOWED",
        409: "CONFLICT",
        500: "INTERNAL_SERVER_ERROR",
        503: "SERVICE_UNAVAILABLE",
    }

    error_code = error_code_mapping.get(exc.status_code, "HTTP_ERROR")

    logger.info(
        f"HTTPException: {error_code} - {exc.detail}",
        extra={
            "request_id": request_id,
            "status_code": exc.status_code,
            "error_code": error_code,
            "path": str(request.url),
            "method": request.method,
        },
    )

    return JSONResponse(
        status_code=exc.status_code,
        content=create_error_response(
            status_code=exc.status_code,
            message=str(exc.detail),
            error_code=error_code,
            request_id=request_id,
        ),
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Handle request validation errors as 400 Bad Request."""
    request_id = getattr(request.state, "request_id", None)

    field_errors = {}
    for error in exc.errors():
        field_path = ".".join(str(loc) for loc in error["loc"])
        field_errors[field_path] = {
            "message": error["msg"],
            "type": error["type"],
        }

    logger.info(
        "ValidationError: Request validation failed",
        extra={
            "request_id": request_id,
            "field_errors": field_errors,
            "path": str(request.url),
            "method": request.method,
        },
    )

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=create_error_response(
            status_code=status.HTTP_400_BAD_REQUEST,
            message="Request validation failed",
            error_code="VALIDATION_ERROR",
            details={"field_errors": field_errors},
            request_id=request_id,
        ),
    )


async def database_exception_handler(
    request: Request, exc: SQLAlchemyError
) -> JSONResponse:
    """Handle database exceptions that escaped the store."""
    request_id = getattr(request.state, "request_id", None)

    if isinstance(exc, OperationalError):
        error_code = "DATABASE_OPERATIONAL_ERROR"
        message = "Database operation failed"
        status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    else:
        error_code = "DATABASE_ERROR"
        message = "Database error occurred"
        status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    logger.error(
        f"DatabaseError: {error_code} - {str(exc)}",
        extra={
            "request_id": request_id,
            "error_code": error_code,
            "exception_type": type(exc).__name__,
            "path": str(request.url),
            "method": request.method,
        },
    )

    return JSONResponse(
        status_code=status_code,
        content=create_error_response(
            status_code=status_code,
            message=message,
            error_code=error_code,
            request_id=request_id,
        ),
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected exceptions."""
    request_id = getattr(request.state, "request_id", None)

    logger.error(
        f"UnhandledException: {type(exc).__name__} - {str(exc)}",
        extra={
            "request_id": request_id,
            "exception_type": type(exc).__name__,
            "path": str(request.url),
            "method": request.method,
        },
        exc_info=True,
    )

    # Don't expose internal error details in production
    if request.app.state.settings.is_production:
        message = "Internal server error"
    else:
        message = f"{type(exc).__name__}: {str(exc)}"

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=create_error_response(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            message=message,
            error_code="INTERNAL_SERVER_ERROR",
            request_id=request_id,
        ),
    )


def setup_exception_handlers(app: FastAPI, settings: Settings) -> None:
    """Setup all exception handlers for the FastAPI application.

    Args:
        app: FastAPI application instance
        settings: Settings consulted by the handlers at request time
    """
    app.state.settings = settings

    app.add_exception_handler(PetsAPIException, pets_api_exception_handler)

    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)

    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    app.add_exception_handler(SQLAlchemyError, database_exception_handler)

    app.add_exception_handler(Exception, generic_exception_handler)
