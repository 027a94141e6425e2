"""DTOs for health check reports."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from liveness.domain.entities.run import RunOutcome
from liveness.domain.entities.verdict import Verdict
from liveness.shared.consts import HEALTHY_BODY
from liveness.shared.timing import format_elapsed


class VerdictDTO(BaseModel):
    """Failing verdict as it appears in an endpoint body."""

    source: str = Field(description="Probe that produced the verdict")
    message: Optional[str] = Field(default=None, description="Diagnostic message")
    rendering: str = Field(description="Text form used in endpoint bodies")

    @classmethod
    def from_domain(cls, verdict: Verdict) -> "VerdictDTO":
        return cls(
            source=verdict.source,
            message=verdict.message,
            rendering=verdict.render(),
        )


class HealthcheckReport(BaseModel):
    """Aggregate verdict of one run plus its wall-clock duration."""

    healthy: bool = Field(description="True when no probe failed")
    elapsed_ms: float = Field(ge=0, description="Duration of the run in milliseconds")
    failure: Optional[VerdictDTO] = Field(
        default=None, description="Representative failing verdict"
    )

    @classmethod
    def from_outcome(cls, outcome: RunOutcome, elapsed_ms: float) -> "HealthcheckReport":
        return cls(
            healthy=outcome.healthy,
            elapsed_ms=elapsed_ms,
            failure=VerdictDTO.from_domain(outcome.failure) if outcome.failure else None,
        )

    @classmethod
    def from_failure(cls, verdict: Verdict, elapsed_ms: float) -> "HealthcheckReport":
        """Report for a run that could not complete at all."""
        return cls(
            healthy=False,
            elapsed_ms=elapsed_ms,
            failure=VerdictDTO.from_domain(verdict),
        )

    def render_body(self) -> str:
        """``WORKING - <ms> ms`` or ``<failing verdict> - <ms> ms``."""
        head = HEALTHY_BODY if self.failure is None else self.failure.rendering
        return f"{head} - {format_elapsed(self.elapsed_ms)} ms"
