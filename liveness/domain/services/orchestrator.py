"""
Health Orchestrator - Domain Service

Runs a declared, ordered list of probes and aggregates their verdicts
into a single run outcome.

Serial mode checks probes one after the other and stops at the first
unhealthy verdict. Parallel mode starts one task per probe and either
returns on the first unhealthy verdict (race) or waits for all of them
(join-all) and reports the first failure in declared order.

Each probe bounds its own check with its timeout, so every wait in here
is bounded by the probe timeouts plus the configured inter-probe delay.
"""

from __future__ import annotations

import asyncio
import threading
from typing import Dict, List, Optional, Sequence, Set, Tuple

from liveness.domain.entities.run import ParallelStrategy, RunMode, RunOutcome
from liveness.domain.entities.verdict import FailureKind, Verdict
from liveness.domain.ports.probe import IProbe
from liveness.shared.logging import get_logger

logger = get_logger(__name__)

# Tasks a race stopped waiting for. They are not cancelled; holding a
# reference keeps them alive until they finish on their own.
_DETACHED_TASKS: Set["asyncio.Task[Verdict]"] = set()


class VerdictCollector:
    """Append-only, lock-protected collection of verdicts for one run."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._entries: List[Tuple[int, Verdict]] = []

    def append(self, position: int, verdict: Verdict) -> None:
        with self._lock:
            self._entries.append((position, verdict))

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def snapshot(self) -> Tuple[Verdict, ...]:
        """Collected verdicts in declared probe order."""
        with self._lock:
            entries = sorted(self._entries, key=lambda entry: entry[0])
        return tuple(verdict for _, verdict in entries)

    def first_failure(self) -> Optional[Verdict]:
        for verdict in self.snapshot():
            if not verdict.healthy:
                return verdict
        return None


class HealthOrchestrator:
    """Run probes serially or in parallel and aggregate their verdicts."""

    def __init__(
        self,
        probes: Sequence[IProbe],
        *,
        delay: float = 0.0,
        parallel_strategy: ParallelStrategy = ParallelStrategy.RACE,
    ) -> None:
        """
        Args:
            probes: Probes in declared order. The order decides which
                failure is reported when more than one probe fails.
            delay: Seconds to sleep after each check (throttling only).
            parallel_strategy: Default aggregation for parallel runs.
        """
        self._probes: Tuple[IProbe, ...] = tuple(probes)
        self._delay = max(0.0, float(delay))
        self._parallel_strategy = ParallelStrategy(parallel_strategy)

    @property
    def probes(self) -> Tuple[IProbe, ...]:
        return self._probes

    @property
    def delay(self) -> float:
        return self._delay

    @property
    def parallel_strategy(self) -> ParallelStrategy:
        return self._parallel_strategy

    async def run(
        self,
        mode: RunMode,
        strategy: Optional[ParallelStrategy] = None,
    ) -> RunOutcome:
        if RunMode(mode) is RunMode.SERIAL:
            return await self.run_serial()
        return await self.run_parallel(strategy)

    async def run_serial(self) -> RunOutcome:
        """Check probes in declared order, stopping at the first failure."""
        collector = VerdictCollector()

        for position, probe in enumerate(self._probes):
            verdict = await self._guarded_check(probe)
            collector.append(position, verdict)
            await self._throttle()
            if not verdict.healthy:
                return self._finish(RunMode.SERIAL, collector, verdict)

        return self._finish(RunMode.SERIAL, collector, None)

    async def run_parallel(
        self, strategy: Optional[ParallelStrategy] = None
    ) -> RunOutcome:
        """Check every probe concurrently and aggregate per ``strategy``."""
        strategy = ParallelStrategy(strategy or self._parallel_strategy)
        collector = VerdictCollector()

        if not self._probes:
            return self._finish(RunMode.PARALLEL, collector, None, strategy)

        tasks: Dict["asyncio.Task[Verdict]", int] = {
            asyncio.create_task(
                self._check_and_collect(position, probe, collector),
                name=f"probe:{probe.name}",
            ): position
            for position, probe in enumerate(self._probes)
        }

        if strategy is ParallelStrategy.RACE:
            failure = await self._race(tasks)
        else:
            await asyncio.wait(tasks)
            failure = collector.first_failure()

        return self._finish(RunMode.PARALLEL, collector, failure, strategy)

    async def _race(
        self, tasks: Dict["asyncio.Task[Verdict]", int]
    ) -> Optional[Verdict]:
        pending: Set["asyncio.Task[Verdict]"] = set(tasks)

        while pending:
            done, pending = await asyncio.wait(
                pending, return_when=asyncio.FIRST_COMPLETED
            )
            # Several tasks can finish in the same wake-up; rank by declared order
            failures = sorted(
                (task for task in done if not task.result().healthy),
                key=lambda task: tasks[task],
            )
            if failures:
                verdict = failures[0].result()
                self._detach(pending)
                logger.debug(
                    "orchestrator.race.first_failure",
                    source=verdict.source,
                    abandoned=len(pending),
                )
                return verdict

        return None

    async def _check_and_collect(
        self, position: int, probe: IProbe, collector: VerdictCollector
    ) -> Verdict:
        verdict = await self._guarded_check(probe)
        collector.append(position, verdict)
        await self._throttle()
        return verdict

    async def _guarded_check(self, probe: IProbe) -> Verdict:
        try:
            return await probe.check()
        except Exception as exc:
            # Probes are expected to turn every failure into a verdict
            logger.error(
                "orchestrator.probe.crashed",
                probe=probe.name,
                error=repr(exc),
                exc_info=exc,
            )
            return Verdict.unhealth(
                source=probe.name,
                message=str(exc) or type(exc).__name__,
                kind=FailureKind.UNEXPECTED,
            )

    async def _throttle(self) -> None:
        if self._delay:
            await asyncio.sleep(self._delay)

    @staticmethod
    def _detach(tasks: Set["asyncio.Task[Verdict]"]) -> None:
        for task in tasks:
            _DETACHED_TASKS.add(task)
            task.add_done_callback(_DETACHED_TASKS.discard)

    @staticmethod
    def _finish(
        mode: RunMode,
        collector: VerdictCollector,
        failure: Optional[Verdict],
        strategy: Optional[ParallelStrategy] = None,
    ) -> RunOutcome:
        outcome = RunOutcome(
            mode=mode,
            failure=failure,
            verdicts=collector.snapshot(),
            strategy=strategy,
        )
        logger.info(
            "orchestrator.run.completed",
            mode=mode.value,
            strategy=strategy.value if strategy else None,
            healthy=outcome.healthy,
            failure=failure.render() if failure else None,
            verdicts=[verdict.render() for verdict in outcome.verdicts],
        )
        return outcome
