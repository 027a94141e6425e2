"""Orchestration run modes and outcomes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from liveness.domain.entities.verdict import Verdict


class RunMode(str, Enum):
    SERIAL = "serial"
    PARALLEL = "parallel"


class ParallelStrategy(str, Enum):
    """How a parallel run decides it is done."""

    RACE = "race"
    JOIN_ALL = "join_all"


@dataclass(frozen=True, slots=True)
class RunOutcome:
    """
    Result of one orchestration run.

    ``failure`` is None when every executed probe was healthy, otherwise
    the representative failing verdict. ``verdicts`` holds every verdict
    collected during the run in declared probe order; in serial mode and
    race mode it stops at what had completed when the run returned.
    """

    mode: RunMode
    failure: Optional[Verdict] = None
    verdicts: Tuple[Verdict, ...] = ()
    strategy: Optional[ParallelStrategy] = None

    @property
    def healthy(self) -> bool:
        return self.failure is None

    @property
    def failures(self) -> Tuple[Verdict, ...]:
        return tuple(verdict for verdict in self.verdicts if not verdict.healthy)
