"""
Shared module - Cross-cutting concerns / Shared Layer

This module provides utilities, constants and enums used across
multiple layers of the service.

Its primary responsibilities include:
- Defining cross-layer constants (environment names, log levels, bodies)
- Structured logging setup
- Wall-clock timing of operations surfaced to callers

It must not depend on Infrastructure or Frameworks.
"""

from .consts import EnumEnvironment, EnumLogLevel
from .logging import configure_logging, get_logger, update_logging_from_settings
from .timing import Stopwatch

__all__ = [
    "EnumEnvironment",
    "EnumLogLevel",
    "Stopwatch",
    "configure_logging",
    "get_logger",
    "update_logging_from_settings",
]
