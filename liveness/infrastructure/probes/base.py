"""
Base Probe - Infrastructure Layer

Shared machinery for dependency probes: a hard deadline around the
dependency call, scoped acquisition and release of the connection handle,
and conversion of every failure into an unhealth Verdict.
"""

from __future__ import annotations

import asyncio
from abc import ABC, abstractmethod
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, ClassVar, Tuple, Type

from liveness.domain.entities.verdict import FailureKind, Verdict
from liveness.shared.logging import get_logger

logger = get_logger(__name__)

ExceptionTypes = Tuple[Type[BaseException], ...]


class BaseProbe(ABC):
    """
    Template for a single-dependency probe.

    Subclasses provide ``_acquire`` (the handle to check against, released
    on exit) and ``_perform`` (the check itself, e.g. a ping). Exceptions
    listed in ``connection_errors`` and ``protocol_errors`` are classified
    accordingly; anything else is reported as unexpected.
    """

    name: ClassVar[str] = "probe"
    display_name: ClassVar[str] = "Probe"

    connection_errors: ClassVar[ExceptionTypes] = (ConnectionError, OSError)
    protocol_errors: ClassVar[ExceptionTypes] = ()

    def __init__(self, timeout: float) -> None:
        if timeout <= 0:
            raise ValueError(f"{self.display_name} timeout must be positive, got {timeout}")
        self._timeout = float(timeout)

    @property
    def timeout(self) -> float:
        return self._timeout

    async def check(self) -> Verdict:
        """Check the dependency once within ``timeout`` seconds."""
        deadline = asyncio.timeout(self._timeout)
        try:
            async with deadline:
                await self._checked_call()
        except Exception as exc:
            # A TimeoutError raised by the driver itself is not our deadline
            if isinstance(exc, TimeoutError) and deadline.expired():
                logger.warning(
                    "probe.check.timeout", probe=self.name, timeout=self._timeout
                )
                return Verdict.unhealth(
                    source=self.name,
                    message=self.timeout_message(),
                    kind=FailureKind.TIMEOUT,
                )
            kind = self.classify(exc)
            logger.warning(
                "probe.check.failed",
                probe=self.name,
                kind=kind.value,
                error=repr(exc),
            )
            return Verdict.unhealth(
                source=self.name,
                message=self.failure_message(exc),
                kind=kind,
            )

        return Verdict.health(source=self.name)

    async def _checked_call(self) -> None:
        async with self._acquire() as handle:
            await self._perform(handle)

    def classify(self, exc: BaseException) -> FailureKind:
        # Order matters: driver connection errors often subclass their protocol base
        if isinstance(exc, (TimeoutError, *self.connection_errors)):
            return FailureKind.CONNECTION
        if isinstance(exc, self.protocol_errors):
            return FailureKind.PROTOCOL
        return FailureKind.UNEXPECTED

    def timeout_message(self) -> str:
        return f"{self.display_name} Timeout: execution expired after {self._timeout}s"

    @staticmethod
    def failure_message(exc: BaseException) -> str:
        return str(exc) or type(exc).__name__

    @asynccontextmanager
    async def _acquire(self) -> AsyncIterator[Any]:
        yield None

    @abstractmethod
    async def _perform(self, handle: Any) -> None:
        """Run the dependency call; raise on failure."""

    def close(self) -> None:
        """Release long-lived resources at shutdown."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, timeout={self._timeout})"
