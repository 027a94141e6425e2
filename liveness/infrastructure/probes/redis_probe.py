"""
Redis Probe - Infrastructure Layer

Checks the key-value cache with PING. Redis is checked with a
connection per check: the client is opened for the check and closed
afterwards whether the ping succeeded, failed or timed out.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Callable

import redis.asyncio as aioredis
import redis.exceptions

from liveness.infrastructure.probes.base import BaseProbe
from liveness.shared.logging import get_logger

logger = get_logger(__name__)

RedisClientFactory = Callable[..., aioredis.Redis]


class RedisProbe(BaseProbe):
    """Probe a Redis server with PING."""

    name = "redis"
    display_name = "Redis"

    connection_errors = (
        redis.exceptions.ConnectionError,
        redis.exceptions.TimeoutError,
        ConnectionError,
        OSError,
    )
    protocol_errors = (redis.exceptions.RedisError,)

    def __init__(
        self,
        url: str,
        timeout: float,
        client_factory: RedisClientFactory = aioredis.from_url,
    ) -> None:
        """
        Args:
            url: ``redis://`` URL, database index included.
            timeout: Seconds allowed for one check.
            client_factory: Builds the client from the URL; replaced in tests.
        """
        super().__init__(timeout)
        self._url = url
        self._client_factory = client_factory

    @asynccontextmanager
    async def _acquire(self) -> AsyncIterator[Any]:
        client = self._client_factory(
            self._url,
            socket_connect_timeout=self.timeout,
            socket_timeout=self.timeout,
        )
        try:
            yield client
        finally:
            try:
                await client.aclose()
            except Exception as exc:
                logger.warning("probe.release.failed", probe=self.name, error=repr(exc))

    async def _perform(self, handle: Any) -> None:
        pong = await handle.ping()
        if pong is False:
            raise redis.exceptions.ResponseError("PING was not acknowledged")
