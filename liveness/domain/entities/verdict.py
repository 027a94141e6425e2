"""
Verdict domain entities.

A Verdict is the immutable outcome of one probe check: healthy or not,
an optional diagnostic message and the identity of the probe that
produced it.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class VerdictState(str, Enum):
    """Rendered state of a verdict."""

    HEALTH = "health"
    UNHEALTH = "unhealth"


class FailureKind(str, Enum):
    """Why a probe reported its dependency as unhealthy."""

    TIMEOUT = "timeout"
    CONNECTION = "connection"
    PROTOCOL = "protocol"
    UNEXPECTED = "unexpected"


@dataclass(frozen=True, slots=True)
class Verdict:
    """Outcome of a single dependency check."""

    healthy: bool
    source: str
    message: Optional[str] = None
    kind: Optional[FailureKind] = None

    @classmethod
    def health(cls, source: str, message: Optional[str] = None) -> "Verdict":
        return cls(healthy=True, source=source, message=message)

    @classmethod
    def unhealth(
        cls,
        source: str,
        message: str,
        kind: FailureKind = FailureKind.UNEXPECTED,
    ) -> "Verdict":
        if not message:
            raise ValueError(f"Unhealthy verdict for '{source}' requires a message")
        return cls(healthy=False, source=source, message=message, kind=kind)

    @property
    def state(self) -> VerdictState:
        return VerdictState.HEALTH if self.healthy else VerdictState.UNHEALTH

    def render(self) -> str:
        """Text form used in endpoint bodies; depends on state, source and message only."""
        return f"{self.state.value}: service: {self.source} - msg: {self.message or ''}"

    def __str__(self) -> str:
        return self.render()
