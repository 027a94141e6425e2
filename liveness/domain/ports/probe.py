"""Domain port for dependency probes."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from liveness.domain.entities.verdict import Verdict


@runtime_checkable
class IProbe(Protocol):
    """A bounded-time check against one dependency."""

    @property
    def name(self) -> str:
        """Identifier reported as the verdict source."""
        ...

    @property
    def timeout(self) -> float:
        """Seconds the check may take before it is reported as a timeout."""
        ...

    async def check(self) -> Verdict:
        """Run the check once. Must return a Verdict and never raise."""
        ...
