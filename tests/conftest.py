from __future__ import annotations

import asyncio
import sys
from pathlib import Path
from typing import Callable, List, Optional

import pytest

from liveness.domain.entities.verdict import FailureKind, Verdict
from liveness.domain.services import orchestrator as orchestrator_module

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


class StubProbe:
    """In-memory probe with scripted latency and outcome."""

    def __init__(
        self,
        name: str,
        *,
        healthy: bool = True,
        message: Optional[str] = None,
        delay: float = 0.0,
        error: Optional[BaseException] = None,
        timeout: float = 1.0,
        journal: Optional[List[str]] = None,
    ) -> None:
        self.name = name
        self.timeout = timeout
        self.healthy = healthy
        self.message = message or f"{name} is down"
        self.delay = delay
        self.error = error
        self.calls = 0
        self.completed = 0
        self.closed = False
        self._journal = journal

    async def check(self) -> Verdict:
        self.calls += 1
        if self._journal is not None:
            self._journal.append(self.name)
        if self.delay:
            await asyncio.sleep(self.delay)
        self.completed += 1
        if self.error is not None:
            raise self.error
        if self.healthy:
            return Verdict.health(source=self.name)
        return Verdict.unhealth(
            source=self.name, message=self.message, kind=FailureKind.CONNECTION
        )

    def close(self) -> None:
        self.closed = True


@pytest.fixture()
def stub_probe() -> Callable[..., StubProbe]:
    return StubProbe


@pytest.fixture()
def cancel_detached_tasks():
    """Cancel probe tasks a race stopped waiting on once the test is done."""
    yield
    for task in list(orchestrator_module._DETACHED_TASKS):
        if not task.done() and not task.get_loop().is_closed():
            task.cancel()
