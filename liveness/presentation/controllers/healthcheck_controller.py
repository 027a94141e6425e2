"""Health check endpoints returning a plain text verdict."""

from typing import Optional

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import PlainTextResponse

from liveness.application.dtos.healthcheck_dto import HealthcheckReport
from liveness.application.use_cases.healthcheck_use_cases import RunHealthcheckUseCase
from liveness.domain.entities.run import ParallelStrategy, RunMode
from liveness.domain.entities.verdict import FailureKind, Verdict
from liveness.shared import get_logger
from liveness.shared.timing import Stopwatch

logger = get_logger(__name__)

router = APIRouter(tags=["Healthcheck"])

GENERIC_SOURCE = "healthcheck"


async def _run(
    use_case: RunHealthcheckUseCase,
    mode: RunMode,
    strategy: Optional[ParallelStrategy] = None,
) -> HealthcheckReport:
    with Stopwatch() as stopwatch:
        try:
            return await use_case.execute(mode, strategy)
        except Exception as exc:
            logger.error(
                "healthcheck.failure", mode=mode.value, error=str(exc), exc_info=exc
            )
            failure = Verdict.unhealth(
                source=GENERIC_SOURCE,
                message=str(exc) or type(exc).__name__,
                kind=FailureKind.UNEXPECTED,
            )
    return HealthcheckReport.from_failure(failure, stopwatch.elapsed_ms)


def _respond(report: HealthcheckReport) -> PlainTextResponse:
    # Failures are reported in the body; the status stays 200 on both endpoints
    return PlainTextResponse(report.render_body(), status_code=status.HTTP_200_OK)


@router.get("/healthcheck", response_class=PlainTextResponse)
@inject
async def healthcheck(
    run_healthcheck_use_case: RunHealthcheckUseCase = Depends(
        Provide["run_healthcheck_use_case"]
    ),
) -> PlainTextResponse:
    """Check dependencies one by one, stopping at the first failure."""
    report = await _run(run_healthcheck_use_case, RunMode.SERIAL)
    return _respond(report)


@router.get("/parallel-healthcheck", response_class=PlainTextResponse)
@inject
async def parallel_healthcheck(
    strategy: Optional[ParallelStrategy] = Query(
        default=None,
        description="race returns on the first failure; join_all waits for every probe",
    ),
    run_healthcheck_use_case: RunHealthcheckUseCase = Depends(
        Provide["run_healthcheck_use_case"]
    ),
) -> PlainTextResponse:
    """Check every dependency concurrently."""
    report = await _run(run_healthcheck_use_case, RunMode.PARALLEL, strategy)
    return _respond(report)
