"""Centralized exception handlers for FastAPI application."""

import logging
from dataclasses import dataclass
from typing import Any, Callable

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.exceptions import (
    DatabaseConnectionError,
    InvalidFilterError,
    LocalStoreError,
    ModelError,
    RecordNotFoundError,
    StoreNotInitializedError,
)

logger = logging.getLogger(__name__)

STORAGE_UNAVAILABLE_MESSAGE = "Storage is unavailable. Please try again later."


@dataclass(frozen=True, slots=True)
class ExceptionConfig:
    """Configuration for exception handler behavior."""

    status_code: int
    error_name: str
    log_level: str = "warning"
    include_detail: bool = True


# Exception type to configuration mapping
EXCEPTION_CONFIGS: dict[type[Exception], ExceptionConfig] = {
    RecordNotFoundError: ExceptionConfig(
        status_code=status.HTTP_404_NOT_FOUND,
        error_name="Not Found",
    ),
    InvalidFilterError: ExceptionConfig(
        status_code=status.HTTP_400_BAD_REQUEST,
        error_name="Bad Request",
    ),
    DatabaseConnectionError: ExceptionConfig(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        error_name="Service Unavailable",
        log_level="error",
        include_detail=False,
    ),
    LocalStoreError: ExceptionConfig(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        error_name="Service Unavailable",
        log_level="error",
        include_detail=False,
    ),
    StoreNotInitializedError: ExceptionConfig(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        error_name="Service Unavailable",
        log_level="error",
        include_detail=False,
    ),
    ModelError: ExceptionConfig(
        status_code=status.HTTP_400_BAD_REQUEST,
        error_name="Bad Request",
        log_level="error",
    ),
}


def _log_exception(exc: Exception, config: ExceptionConfig) -> None:
    """Log exception with appropriate level."""
    log_func: Callable[..., None] = getattr(logger, config.log_level)
    log_func(f"{type(exc).__name__}: {exc}")


def _build_response_content(exc: Exception, config: ExceptionConfig) -> dict[str, Any]:
    """Build response content based on exception type."""
    content: dict[str, Any] = {"error": config.error_name}

    if config.status_code == status.HTTP_503_SERVICE_UNAVAILABLE:
        content["message"] = STORAGE_UNAVAILABLE_MESSAGE
    elif config.include_detail:
        content["message"] = str(exc)

    if isinstance(exc, RecordNotFoundError):
        content["model"] = exc.model_name
        content["record_id"] = exc.record_id

    return content


def _create_handler(
    config: ExceptionConfig,
) -> Callable[[Request, Exception], JSONResponse]:
    """Create exception handler function for given config."""

    async def handler(request: Request, exc: Exception) -> JSONResponse:
        _log_exception(exc, config)
        content = _build_response_content(exc, config)
        return JSONResponse(status_code=config.status_code, content=content)

    return handler


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Handle request validation errors."""
    logger.warning(f"Validation error: {exc}")
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "error": "Validation Error",
            "message": "Invalid request data",
            "details": jsonable_errors(exc),
        },
    )


def jsonable_errors(exc: RequestValidationError) -> list[dict[str, Any]]:
    """Strip non-serializable context from validation errors."""
    return [
        {key: value for key, value in error.items() if key in ("loc", "msg", "type")}
        for error in exc.errors()
    ]


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle all unhandled exceptions."""
    logger.exception(f"Unhandled exception: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": "Internal Server Error",
            "message": "An unexpected error occurred. Please try again later.",
        },
    )


async def not_found_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Handle 404 Not Found for unknown routes."""
    logger.warning(f"404 Not Found: {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={
            "error": "Not Found",
            "message": f"The requested resource was not found: {request.url.path}",
        },
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI application.

    Args:
        app: FastAPI application instance.
    """
    # Register configured exception handlers
    for exc_type, config in EXCEPTION_CONFIGS.items():
        app.add_exception_handler(exc_type, _create_handler(config))

    # Register special handlers
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(404, not_found_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)
