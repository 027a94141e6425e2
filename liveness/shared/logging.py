"""
Logging Configuration - Shared Layer

Structured logging for the service: structlog processors rendered through
the standard library handlers, so that driver and server loggers
(pymongo, redis, uvicorn) end up in the same stream and format.
"""

import logging
import os
import sys
from typing import Any, Dict, List, Optional

import structlog
from structlog.types import Processor

from liveness.shared.consts import EnumEnvironment

# Third-party loggers that are far too chatty at DEBUG/INFO for a health probe
_NOISY_LOGGERS = ("pymongo", "pymongo.serverSelection", "pymongo.topology")


def _get_log_config_from_env() -> Dict[str, Optional[str]]:
    """
    Read bootstrap logging configuration from environment variables.

    Used before the settings system has been loaded.
    """
    return {
        "level": os.environ.get("LOG_LEVEL", "INFO"),
        "file_path": os.environ.get("LOG_FILE_PATH"),
        "environment": os.environ.get("ENVIRONMENT"),
    }


def _select_renderer(environment: str) -> Processor:
    if environment.lower() == EnumEnvironment.PRODUCTION.value:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=False)


def configure_logging(
    level: Optional[str] = None,
    file_path: Optional[str] = None,
    environment: Optional[str] = None,
) -> None:
    """
    Configure structlog on top of Python's standard logging.

    Call it once at startup, before settings are loaded, and again through
    update_logging_from_settings() when they are.

    Args:
        level: Optional override for the log level.
        file_path: Optional log file, in addition to stdout.
        environment: Deployment environment; production renders JSON.
    """
    env_config = _get_log_config_from_env()

    log_level = (level or env_config["level"] or "INFO").upper()
    log_file = file_path or env_config["file_path"]
    env_value = environment or env_config["environment"] or "development"

    numeric_level = getattr(logging, log_level, logging.INFO)

    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    timestamper = structlog.processors.TimeStamper(fmt="iso", utc=True)

    formatter = structlog.stdlib.ProcessorFormatter(
        processor=_select_renderer(env_value),
        foreign_pre_chain=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            timestamper,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
        ],
    )
    for handler in handlers:
        handler.setFormatter(formatter)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            timestamper,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    root_logger.handlers = handlers
    root_logger.setLevel(numeric_level)

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(numeric_level, logging.WARNING))

    logging.getLogger(__name__).debug(
        "Logging configured with level %s (environment=%s)", log_level, env_value
    )


def update_logging_from_settings(settings: Any) -> None:
    """
    Reconfigure logging from the loaded application settings.

    Args:
        settings: The AppSettings instance (or anything shaped like it).
    """
    try:
        log_level = getattr(settings.logging.level, "value", settings.logging.level)
        environment = getattr(settings.environment, "value", settings.environment)

        configure_logging(
            level=log_level,
            file_path=settings.logging.file_path,
            environment=environment,
        )
    except AttributeError as exc:
        logging.getLogger(__name__).error(
            "Failed to update logging from settings: %s", exc
        )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger configured for the project."""
    return structlog.get_logger(name)
