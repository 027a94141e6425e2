"""Wall-clock duration measurement around an operation."""

from __future__ import annotations

from time import perf_counter
from types import TracebackType
from typing import Awaitable, Optional, Tuple, Type, TypeVar

T = TypeVar("T")


class Stopwatch:
    """
    Measure the elapsed wall-clock time of a block.

    The elapsed value is informational: it is reported to callers and
    never used to enforce timeouts.

        with Stopwatch() as stopwatch:
            outcome = await orchestrator.run(mode)
        stopwatch.elapsed_ms
    """

    def __init__(self) -> None:
        self._started: Optional[float] = None
        self._stopped: Optional[float] = None

    def __enter__(self) -> "Stopwatch":
        self._started = perf_counter()
        self._stopped = None
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        self._stopped = perf_counter()

    @property
    def running(self) -> bool:
        return self._started is not None and self._stopped is None

    @property
    def elapsed_ms(self) -> float:
        if self._started is None:
            return 0.0
        end = self._stopped if self._stopped is not None else perf_counter()
        return max(0.0, (end - self._started) * 1000)

    @classmethod
    async def measure(cls, operation: Awaitable[T]) -> Tuple[T, float]:
        """Await ``operation`` and return its result with the elapsed ms."""
        with cls() as stopwatch:
            result = await operation
        return result, stopwatch.elapsed_ms


def format_elapsed(elapsed_ms: float) -> str:
    return "%.3f" % elapsed_ms
