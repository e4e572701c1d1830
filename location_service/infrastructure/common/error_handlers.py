"""
Centralized error handlers for FastAPI.

Maps domain and use case errors to HTTP responses with the HTTPError body.
No stack traces or internal details are exposed to clients.
"""

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette import status
from starlette.exceptions import HTTPException as StarletteHTTPException

from location_service.application.common.exceptions import UseCaseError
from location_service.domain.common.exceptions import (
    DomainError,
    EntityAlreadyExistsError,
    EntityNotFoundError,
    ValidationError,
)
from location_service.domain.identity.exceptions import InvalidCredentialsError, MissingUserError
from location_service.infrastructure.common.schemas import HTTPError

logger = structlog.get_logger(__name__)


def _error_response(
    status_code: int, message: str, headers: dict[str, str] | None = None
) -> JSONResponse:
    """Build a consistent JSON error response."""
    body = HTTPError(code=status_code, message=message)
    return JSONResponse(status_code=status_code, content=body.model_dump(), headers=headers)


def register_error_handlers(app: FastAPI) -> None:
    """Register all error handlers on the FastAPI application."""

    @app.exception_handler(EntityNotFoundError)
    async def handle_not_found(_request: Request, exc: EntityNotFoundError) -> JSONResponse:
        return _error_response(status.HTTP_404_NOT_FOUND, f"{exc.entity_type} not found")

    @app.exception_handler(EntityAlreadyExistsError)
    async def handle_already_exists(
        _request: Request, exc: EntityAlreadyExistsError
    ) -> JSONResponse:
        return _error_response(status.HTTP_409_CONFLICT, f"{exc.entity_type} already exists")

    @app.exception_handler(ValidationError)
    async def handle_validation(_request: Request, exc: ValidationError) -> JSONResponse:
        logger.info("invalid_request", error=exc.message, field=exc.field)
        return _error_response(status.HTTP_400_BAD_REQUEST, exc.message)

    @app.exception_handler(InvalidCredentialsError)
    @app.exception_handler(MissingUserError)
    async def handle_unauthenticated(_request: Request, exc: DomainError) -> JSONResponse:
        logger.warning("unauthenticated_request", error=exc.message)
        return _error_response(
            status.HTTP_401_UNAUTHORIZED,
            "Invalid authentication token",
            headers={"WWW-Authenticate": "Bearer"},
        )

    @app.exception_handler(DomainError)
    async def handle_domain(_request: Request, exc: DomainError) -> JSONResponse:
        """Catch-all for domain errors without a dedicated handler."""
        logger.warning("unhandled_domain_error", error=exc.message)
        return _error_response(status.HTTP_400_BAD_REQUEST, exc.message)

    @app.exception_handler(UseCaseError)
    async def handle_use_case(_request: Request, exc: UseCaseError) -> JSONResponse:
        if exc.timed_out:
            logger.error("operation_timed_out", operation=exc.operation, error=str(exc))
            return _error_response(status.HTTP_504_GATEWAY_TIMEOUT, "Request timed out")
        if exc.conflict:
            logger.warning("storage_conflict", operation=exc.operation, error=str(exc))
            return _error_response(
                status.HTTP_409_CONFLICT, "Request conflicts with the stored data"
            )
        logger.error("operation_failed", operation=exc.operation, error=str(exc), exc_info=exc)
        return _error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "An unexpected error occurred. Please try again later.",
        )

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(
        _request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        logger.info("invalid_request", errors=exc.errors())
        return _error_response(status.HTTP_400_BAD_REQUEST, "Invalid request")

    @app.exception_handler(StarletteHTTPException)
    async def handle_http(_request: Request, exc: StarletteHTTPException) -> JSONResponse:
        return _error_response(exc.status_code, str(exc.detail), headers=exc.headers)
