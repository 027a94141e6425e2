"""
MongoDB Probe - Infrastructure Layer

Checks the document store by listing its databases over a lazily created,
pooled MongoClient that lives as long as the probe.
"""

from __future__ import annotations

import asyncio
import threading
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Callable, Optional

import pymongo.errors
from pymongo import MongoClient

from liveness.infrastructure.probes.base import BaseProbe
from liveness.shared.logging import get_logger

logger = get_logger(__name__)

MongoClientFactory = Callable[..., MongoClient]


class MongoProbe(BaseProbe):
    """Probe a MongoDB deployment with ``list_database_names``."""

    name = "mongo"
    display_name = "Mongo"

    connection_errors = (pymongo.errors.ConnectionFailure, ConnectionError, OSError)
    protocol_errors = (pymongo.errors.PyMongoError,)

    def __init__(
        self,
        host: str,
        timeout: float,
        client_factory: MongoClientFactory = MongoClient,
    ) -> None:
        """
        Args:
            host: ``host:port`` pair or a full ``mongodb://`` URI.
            timeout: Seconds allowed for one check.
            client_factory: Builds the client; replaced in tests.
        """
        super().__init__(timeout)
        self._host = host
        self._client_factory = client_factory
        self._client: Optional[MongoClient] = None
        self._client_lock = threading.Lock()

    @property
    def client(self) -> MongoClient:
        """The probe's client, created on first use."""
        with self._client_lock:
            if self._client is None:
                timeout_ms = int(self.timeout * 1000)
                self._client = self._client_factory(
                    self._host,
                    connect=False,
                    serverSelectionTimeoutMS=timeout_ms,
                    connectTimeoutMS=timeout_ms,
                    socketTimeoutMS=timeout_ms,
                )
            return self._client

    @asynccontextmanager
    async def _acquire(self) -> AsyncIterator[Any]:
        yield self.client

    async def _perform(self, handle: Any) -> None:
        # pymongo is blocking; on timeout the thread is abandoned, not killed
        await asyncio.to_thread(handle.list_database_names)

    def close(self) -> None:
        with self._client_lock:
            client, self._client = self._client, None
        if client is not None:
            logger.info("probe.mongo.close", host=self._host)
            client.close()
