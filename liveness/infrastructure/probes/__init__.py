"""Dependency probes package."""

from .base import BaseProbe
from .mongo_probe import MongoProbe
from .redis_probe import RedisProbe
from .registry import ProbeRegistry, build_probes, create_default_registry

__all__ = [
    "BaseProbe",
    "MongoProbe",
    "RedisProbe",
    "ProbeRegistry",
    "build_probes",
    "create_default_registry",
]
