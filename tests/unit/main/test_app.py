from __future__ import annotations

import pytest
from dependency_injector import providers

from liveness.main import app as module_app
from liveness.main.app import create_app
from liveness.main.container import get_container


@pytest.mark.asyncio
async def test_create_app_initializes_lifespan(stub_probe) -> None:
    app = create_app()
    probe = stub_probe("mongo")
    get_container().probes.override(providers.Object([probe]))

    assert app.title
    paths = app.openapi()["paths"]
    assert {"/healthcheck", "/parallel-healthcheck"} <= set(paths)

    async with app.router.lifespan_context(app):
        assert app.state.started_at is not None
        assert app.state.container is get_container()

    assert probe.closed is True
    assert isinstance(module_app.app, type(app))
