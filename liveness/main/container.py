"""
Dependency container injection module - Main Layer

Wires settings, probes, the orchestrator and the use cases together and
manages the lifetime of the probes' client handles.
"""

from contextlib import asynccontextmanager

from dependency_injector import containers, providers

from liveness.application.use_cases.healthcheck_use_cases import RunHealthcheckUseCase
from liveness.domain.services.orchestrator import HealthOrchestrator
from liveness.infrastructure.probes.registry import (
    build_probes,
    create_default_registry,
)
from liveness.shared import get_logger

from .config import AppSettings

logger = get_logger(__name__)


class AppContainer(containers.DeclarativeContainer):
    """Composition Root using dependency-injector."""

    wiring_config = containers.WiringConfiguration(packages=["..presentation"])

    # Settings
    config = providers.Configuration()

    # Infrastructure
    probe_registry = providers.Singleton(
        create_default_registry,
        mongo_host=config.mongo.host,
        mongo_timeout=config.mongo.timeout,
        redis_url=config.redis.host,
        redis_timeout=config.redis.timeout,
    )

    # Probes live as long as the process; they own their client handles
    probes = providers.Singleton(
        build_probes,
        registry=probe_registry,
        targets=config.health.targets,
    )

    # Domain
    orchestrator = providers.Singleton(
        HealthOrchestrator,
        probes=probes,
        delay=config.health.wait,
        parallel_strategy=config.health.parallel_strategy,
    )

    # Application (use cases)
    run_healthcheck_use_case = providers.Factory(
        RunHealthcheckUseCase,
        orchestrator=orchestrator,
    )


# -------------------------
# Global Container Instance
# -------------------------
_app_container: AppContainer | None = None


def init_container(settings: AppSettings) -> AppContainer:
    """Initialize global container with application settings."""

    global _app_container

    container = AppContainer()
    container.config.from_pydantic(settings)
    _app_container = container
    return container


def get_container() -> AppContainer:
    """Get the initialized global container."""

    if _app_container is None:
        raise RuntimeError("Container has not been initialized yet")

    return _app_container


@asynccontextmanager
async def app_lifespan():
    """
    Startup and shutdown of the probes.

    Probes are built eagerly so that a misconfigured target list fails at
    startup instead of on the first request, and their client handles are
    closed on shutdown.
    """
    container = get_container()
    probes = container.probes()
    logger.info(
        "container.probes.initialized",
        targets=[probe.name for probe in probes],
    )

    try:
        yield container
    finally:
        for probe in probes:
            close = getattr(probe, "close", None)
            if close is None:
                continue
            try:
                close()
            except Exception as exc:
                logger.warning(
                    "container.probe.close_failed", probe=probe.name, error=str(exc)
                )
        logger.info("container.resources.shutdown")
