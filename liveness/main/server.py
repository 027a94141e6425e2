"""
Server Entry Point - Main Layer

Runs the FastAPI application under uvicorn on ``WEB_SERVER_PORT``.
"""

import uvicorn

from liveness.main.config import get_settings
from liveness.shared import get_logger

logger = get_logger(__name__)


def main() -> None:
    """Start the HTTP server."""
    settings = get_settings()

    logger.info(
        "Starting health check server",
        host=settings.server.host,
        port=settings.server.port,
        targets=settings.health.targets,
    )

    uvicorn.run(
        "liveness.main.app:app",
        host=settings.server.host,
        port=settings.server.port,
        reload=settings.server.reload,
        log_config=None,
    )
