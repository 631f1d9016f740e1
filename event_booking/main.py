"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from event_booking.api.v1.router import api_router
from event_booking.core.config import settings
from event_booking.core.exceptions import AuthenticationException, ConfigurationError, ValidationException
from event_booking.core.logging import configure_logging
from event_booking.schemas.common import ApiResponse

logger = logging.getLogger(__name__)


def error_response(status_code: int, message: str, headers: Optional[dict] = None) -> JSONResponse:
    """Render an error as the standard {data: null, message, timestamp} envelope."""
    body = ApiResponse(data=None, message=message).model_dump(mode="json")
    return JSONResponse(status_code=status_code, content=jsonable_encoder(body), headers=headers)


async def validation_exception_handler(request: Request, exc: ValidationException) -> JSONResponse:
    return error_response(status.HTTP_400_BAD_REQUEST, exc.message)


async def request_validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed input is a user-correctable 400, reported by its first failing field."""
    errors = exc.errors()
    if not errors:
        return error_response(status.HTTP_400_BAD_REQUEST, "Invalid request")
    first = errors[0]
    field = ".".join(str(part) for part in first.get("loc", ())[1:]) or "request"
    return error_response(status.HTTP_400_BAD_REQUEST, f"{field}: {first.get('msg')}")


async def authentication_exception_handler(request: Request, exc: AuthenticationException) -> JSONResponse:
    return error_response(status.HTTP_401_UNAUTHORIZED, exc.message, headers={"WWW-Authenticate": "Bearer"})


async def configuration_error_handler(request: Request, exc: ConfigurationError) -> JSONResponse:
    """Configuration and integrity errors never leak their detail to the caller."""
    logger.error("Unrecoverable error on %s %s: %s", request.method, request.url.path, exc.message)
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")


def create_app() -> FastAPI:
    configure_logging()

    application = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        description="Event ticketing backend: registration, login and token issuance.",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json")

    application.add_exception_handler(ValidationException, validation_exception_handler)
    application.add_exception_handler(RequestValidationError, request_validation_exception_handler)
    application.add_exception_handler(AuthenticationException, authentication_exception_handler)
    application.add_exception_handler(ConfigurationError, configuration_error_handler)
    application.add_exception_handler(Exception, unhandled_exception_handler)

    # Include API router
    application.include_router(api_router, prefix="/api")

    @application.get("/")
    async def root():
        """Root endpoint - health check."""
        return {
            "message": "Event Booking API",
            "version": settings.VERSION,
            "status": "healthy"
        }

    @application.get("/health")
    async def health_check():
        """Health check endpoint for monitoring."""
        return {
            "status": "healthy",
            "service": "event-booking-api",
            "version": settings.VERSION
        }

    return application


app = create_app()
