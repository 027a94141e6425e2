from __future__ import annotations

import time
from typing import Any, Callable, List, Optional

import pymongo.errors
import pytest

from liveness.domain.entities.verdict import FailureKind
from liveness.infrastructure.probes.mongo_probe import MongoProbe


class _FakeMongoClient:
    def __init__(self, host: str, **kwargs: Any) -> None:
        self.host = host
        self.kwargs = kwargs
        self.behaviour: Optional[Callable[[], Any]] = None
        self.calls = 0
        self.closed = False

    def list_database_names(self) -> List[str]:
        self.calls += 1
        if self.behaviour is not None:
            return self.behaviour()
        return ["admin", "local"]

    def close(self) -> None:
        self.closed = True


class _Factory:
    def __init__(self, behaviour: Optional[Callable[[], Any]] = None) -> None:
        self.behaviour = behaviour
        self.created: List[_FakeMongoClient] = []

    def __call__(self, host: str, **kwargs: Any) -> _FakeMongoClient:
        client = _FakeMongoClient(host, **kwargs)
        client.behaviour = self.behaviour
        self.created.append(client)
        return client


def _raise(exc: Exception) -> Callable[[], Any]:
    def _behaviour() -> Any:
        raise exc

    return _behaviour


@pytest.mark.asyncio
async def test_check_success() -> None:
    factory = _Factory()
    probe = MongoProbe(host="mongodb:27017", timeout=3, client_factory=factory)

    verdict = await probe.check()

    assert verdict.healthy is True
    assert verdict.source == "mongo"
    assert factory.created[0].host == "mongodb:27017"
    assert factory.created[0].calls == 1


@pytest.mark.asyncio
async def test_client_is_created_lazily_once() -> None:
    factory = _Factory()
    probe = MongoProbe(host="mongodb:27017", timeout=1.5, client_factory=factory)

    assert factory.created == []

    await probe.check()
    await probe.check()

    assert len(factory.created) == 1
    assert factory.created[0].calls == 2
    assert factory.created[0].kwargs["serverSelectionTimeoutMS"] == 1500
    assert factory.created[0].kwargs["connect"] is False


@pytest.mark.asyncio
async def test_server_selection_failure_is_connection_error() -> None:
    factory = _Factory(
        _raise(pymongo.errors.ServerSelectionTimeoutError("mongodb:27017: [Errno 111]"))
    )
    probe = MongoProbe(host="mongodb:27017", timeout=3, client_factory=factory)

    verdict = await probe.check()

    assert verdict.healthy is False
    assert verdict.kind is FailureKind.CONNECTION
    assert "Errno 111" in verdict.message


@pytest.mark.asyncio
async def test_operation_failure_is_protocol_error() -> None:
    factory = _Factory(_raise(pymongo.errors.OperationFailure("not authorized", 13)))
    probe = MongoProbe(host="mongodb:27017", timeout=3, client_factory=factory)

    verdict = await probe.check()

    assert verdict.kind is FailureKind.PROTOCOL
    assert "not authorized" in verdict.message


@pytest.mark.asyncio
async def test_unrecognised_error_is_still_a_verdict() -> None:
    factory = _Factory(_raise(ZeroDivisionError("division by zero")))
    probe = MongoProbe(host="mongodb:27017", timeout=3, client_factory=factory)

    verdict = await probe.check()

    assert verdict.healthy is False
    assert verdict.kind is FailureKind.UNEXPECTED
    assert verdict.message == "division by zero"


@pytest.mark.asyncio
async def test_hung_server_times_out() -> None:
    factory = _Factory(lambda: time.sleep(0.5))
    probe = MongoProbe(host="mongodb:27017", timeout=0.1, client_factory=factory)

    verdict = await probe.check()

    assert verdict.kind is FailureKind.TIMEOUT
    assert verdict.message == "Mongo Timeout: execution expired after 0.1s"


@pytest.mark.asyncio
async def test_close_releases_client() -> None:
    factory = _Factory()
    probe = MongoProbe(host="mongodb:27017", timeout=3, client_factory=factory)
    await probe.check()

    probe.close()
    probe.close()

    assert factory.created[0].closed is True
    await probe.check()
    assert len(factory.created) == 2
