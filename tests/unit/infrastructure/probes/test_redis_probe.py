from __future__ import annotations

import asyncio
from typing import Any, List, Optional

import pytest
import redis.exceptions

from liveness.domain.entities.verdict import FailureKind
from liveness.infrastructure.probes.redis_probe import RedisProbe


class _FakeRedis:
    def __init__(
        self,
        url: str,
        error: Optional[BaseException] = None,
        pong: Any = True,
        delay: float = 0.0,
        close_error: Optional[BaseException] = None,
        **kwargs: Any,
    ) -> None:
        self.url = url
        self.kwargs = kwargs
        self._error = error
        self._pong = pong
        self._delay = delay
        self._close_error = close_error
        self.pings = 0
        self.closed = False

    async def ping(self) -> Any:
        self.pings += 1
        if self._delay:
            await asyncio.sleep(self._delay)
        if self._error is not None:
            raise self._error
        return self._pong

    async def aclose(self) -> None:
        self.closed = True
        if self._close_error is not None:
            raise self._close_error


class _Factory:
    def __init__(self, **options: Any) -> None:
        self.options = options
        self.created: List[_FakeRedis] = []

    def __call__(self, url: str, **kwargs: Any) -> _FakeRedis:
        client = _FakeRedis(url, **self.options, **kwargs)
        self.created.append(client)
        return client


def _probe(factory: _Factory, timeout: float = 3) -> RedisProbe:
    return RedisProbe(
        url="redis://redis:6379/15", timeout=timeout, client_factory=factory
    )


@pytest.mark.asyncio
async def test_check_success_closes_connection() -> None:
    factory = _Factory()

    verdict = await _probe(factory).check()

    assert verdict.healthy is True
    assert verdict.source == "redis"
    client = factory.created[0]
    assert client.url == "redis://redis:6379/15"
    assert client.kwargs == {"socket_connect_timeout": 3.0, "socket_timeout": 3.0}
    assert client.closed is True


@pytest.mark.asyncio
async def test_connection_per_check() -> None:
    factory = _Factory()
    probe = _probe(factory)

    await probe.check()
    await probe.check()

    assert len(factory.created) == 2
    assert all(client.closed for client in factory.created)


@pytest.mark.asyncio
async def test_cannot_connect_is_connection_error() -> None:
    factory = _Factory(
        error=redis.exceptions.ConnectionError("Error 111 connecting to redis:6379.")
    )

    verdict = await _probe(factory).check()

    assert verdict.healthy is False
    assert verdict.kind is FailureKind.CONNECTION
    assert verdict.message == "Error 111 connecting to redis:6379."
    assert factory.created[0].closed is True


@pytest.mark.asyncio
async def test_response_error_is_protocol_error() -> None:
    factory = _Factory(error=redis.exceptions.ResponseError("NOAUTH Authentication required."))

    verdict = await _probe(factory).check()

    assert verdict.kind is FailureKind.PROTOCOL
    assert "NOAUTH" in verdict.message


@pytest.mark.asyncio
async def test_unacknowledged_ping_is_protocol_error() -> None:
    verdict = await _probe(_Factory(pong=False)).check()

    assert verdict.kind is FailureKind.PROTOCOL


@pytest.mark.asyncio
async def test_hung_ping_times_out_and_still_closes() -> None:
    factory = _Factory(delay=10)

    verdict = await _probe(factory, timeout=0.1).check()

    assert verdict.kind is FailureKind.TIMEOUT
    assert verdict.message == "Redis Timeout: execution expired after 0.1s"
    assert factory.created[0].closed is True


@pytest.mark.asyncio
async def test_unrecognised_error_is_still_a_verdict() -> None:
    factory = _Factory(error=ValueError("bad url scheme"))

    verdict = await _probe(factory).check()

    assert verdict.healthy is False
    assert verdict.kind is FailureKind.UNEXPECTED
    assert verdict.message == "bad url scheme"
    assert factory.created[0].closed is True


@pytest.mark.asyncio
async def test_close_failure_does_not_change_verdict() -> None:
    factory = _Factory(close_error=RuntimeError("already closed"))

    verdict = await _probe(factory).check()

    assert verdict.healthy is True
