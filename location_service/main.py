"""
Application entry point.

Creates the FastAPI application and wires together the routers, error
handlers, middleware and the database. No business logic belongs here.
"""

import time
from collections.abc import AsyncIterator, Awaitable, Callable
from contextlib import asynccontextmanager

import structlog
import uvicorn
from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware

from location_service.config import Settings, configure_logging, get_settings
from location_service.core import Container
from location_service.database import Database
from location_service.infrastructure.common.error_handlers import register_error_handlers
from location_service.infrastructure.common.routers import health
from location_service.infrastructure.locations.routers import categories, locations

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan: release database connections on shutdown."""
    settings: Settings = app.state.settings
    logger.info(
        "application_startup",
        project=settings.PROJECT_NAME,
        version=settings.VERSION,
        environment=settings.ENVIRONMENT,
    )
    yield
    app.state.database.dispose()
    logger.info("application_shutdown")


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Settings to use, defaults to the environment settings

    Returns:
        A fully configured FastAPI application instance
    """
    settings = settings or get_settings()
    configure_logging(settings.ENVIRONMENT)

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.database = Database(settings)
    app.state.container = Container()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(
        request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        start = time.perf_counter()
        response = await call_next(request)
        logger.info(
            "http_request",
            method=request.method,
            path=request.url.path,
            status=response.status_code,
            latency_ms=round((time.perf_counter() - start) * 1000, 2),
        )
        return response

    register_error_handlers(app)

    app.include_router(health.router)
    app.include_router(categories.router, prefix=settings.API_V1_PREFIX)
    app.include_router(locations.router, prefix=settings.API_V1_PREFIX)

    return app


def run() -> None:
    """Serve the application with uvicorn."""
    uvicorn.run("location_service.main:create_app", factory=True, host="0.0.0.0", port=8080)
