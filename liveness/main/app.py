"""
Main Application - Main Layer

Entry point for the FastAPI application: initializes logging, settings and
the container, then mounts the health check router.
"""

from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI

from liveness.main.config import get_settings
from liveness.main.container import app_lifespan, init_container
from liveness.presentation.controllers import healthcheck_router
from liveness.shared import configure_logging, get_logger, update_logging_from_settings

# Bootstrap logging before settings are loaded
configure_logging()

settings = get_settings()

update_logging_from_settings(settings)

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan bound to the container's resource lifecycle."""
    app.state.started_at = datetime.now(timezone.utc)
    logger.info("Application starting up")

    async with app_lifespan() as container:
        app.state.container = container
        yield

    logger.info("Application shutting down")


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        FastAPI: The configured FastAPI application
    """
    settings = get_settings()

    init_container(settings)

    app = FastAPI(
        title=settings.server.title,
        description=settings.server.description,
        version=settings.server.version,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    app.include_router(healthcheck_router)

    return app


app = create_app()
