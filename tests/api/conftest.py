"""Route test fixtures — unauthenticated client and stub services for failure paths."""

import asyncio

import pytest
from httpx import ASGITransport, AsyncClient

from mazealarm.api.dependencies import (
    get_device_config_service, get_maze_device_status_service,
)
from mazealarm.main import app


class StubService:
    """Service double whose every operation runs `behavior`."""

    def __init__(self, behavior):
        self._behavior = behavior

    def __getattr__(self, name):
        async def operation(*args, **kwargs):
            return await self._behavior()
        return operation


async def _hang():
    await asyncio.sleep(60)


async def _explode():
    raise RuntimeError("connection reset by peer")


@pytest.fixture
async def anon_client():
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c


@pytest.fixture
def stub_services():
    """Swap both services for stubs; returns a setter taking 'hang' or 'explode'."""
    behaviors = {"hang": _hang, "explode": _explode}

    def install(kind: str):
        stub = StubService(behaviors[kind])
        app.dependency_overrides[get_device_config_service] = lambda: stub
        app.dependency_overrides[get_maze_device_status_service] = lambda: stub

    return install
