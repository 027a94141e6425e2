"""
Probe Registry - Infrastructure Layer

Maps target names (as configured in ``HEALTH_TARGETS``) to probe
factories and builds the ordered probe list the orchestrator runs.
"""

from __future__ import annotations

from typing import Callable, Dict, List, Sequence, Tuple, Union

from liveness.domain.entities.errors import DuplicateProbeError, UnknownProbeError
from liveness.domain.ports.probe import IProbe
from liveness.infrastructure.probes.mongo_probe import MongoProbe
from liveness.infrastructure.probes.redis_probe import RedisProbe

ProbeFactory = Callable[[], IProbe]


class ProbeRegistry:
    """Registry of probe factories keyed by target name."""

    def __init__(self) -> None:
        self._factories: Dict[str, ProbeFactory] = {}

    def register(self, name: str, factory: ProbeFactory) -> None:
        key = name.strip().lower()
        if key in self._factories:
            raise DuplicateProbeError(key)
        self._factories[key] = factory

    def names(self) -> Tuple[str, ...]:
        return tuple(self._factories)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.strip().lower() in self._factories

    def build(self, targets: Union[str, Sequence[str]]) -> List[IProbe]:
        """Instantiate one probe per target, preserving the given order."""
        probes: List[IProbe] = []
        seen = set()

        for name in parse_targets(targets):
            if name not in self._factories:
                raise UnknownProbeError(name, self._factories)
            if name in seen:
                raise DuplicateProbeError(name)
            seen.add(name)
            probes.append(self._factories[name]())

        return probes


def parse_targets(targets: Union[str, Sequence[str]]) -> List[str]:
    """Normalise ``"mongo, redis"`` or ``["mongo", "redis"]`` to names."""
    items = targets.split(",") if isinstance(targets, str) else list(targets)
    return [item.strip().lower() for item in items if item and item.strip()]


def create_default_registry(
    mongo_host: str,
    mongo_timeout: float,
    redis_url: str,
    redis_timeout: float,
) -> ProbeRegistry:
    """Registry with the document store and cache probes."""
    registry = ProbeRegistry()
    registry.register(
        MongoProbe.name, lambda: MongoProbe(host=mongo_host, timeout=mongo_timeout)
    )
    registry.register(
        RedisProbe.name, lambda: RedisProbe(url=redis_url, timeout=redis_timeout)
    )
    return registry


def build_probes(
    registry: ProbeRegistry, targets: Union[str, Sequence[str]]
) -> List[IProbe]:
    return registry.build(targets)
