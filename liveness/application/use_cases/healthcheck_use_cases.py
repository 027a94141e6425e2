"""Use cases behind the health check endpoints."""

from typing import Optional

from liveness.application.dtos.healthcheck_dto import HealthcheckReport
from liveness.domain.entities.run import ParallelStrategy, RunMode
from liveness.domain.services.orchestrator import HealthOrchestrator
from liveness.shared.logging import get_logger
from liveness.shared.timing import Stopwatch

logger = get_logger(__name__)


class RunHealthcheckUseCase:
    """Run the orchestrator once and time it."""

    def __init__(self, orchestrator: HealthOrchestrator) -> None:
        self._orchestrator = orchestrator

    async def execute(
        self,
        mode: RunMode,
        strategy: Optional[ParallelStrategy] = None,
    ) -> HealthcheckReport:
        outcome, elapsed_ms = await Stopwatch.measure(
            self._orchestrator.run(mode, strategy)
        )

        report = HealthcheckReport.from_outcome(outcome, elapsed_ms)
        logger.debug(
            "healthcheck.executed",
            mode=outcome.mode.value,
            strategy=outcome.strategy.value if outcome.strategy else None,
            healthy=report.healthy,
            elapsed_ms=round(report.elapsed_ms, 3),
        )
        return report
