"""Root conftest — shared test configuration and real-stack fixtures.

Invariants:
    - Every test gets a fresh file-backed SQLite database under tmp_path
    - Route fixtures override service providers instead of running the lifespan
"""

import os

os.environ.setdefault("API_USERNAME", "admin")
os.environ.setdefault("API_PASSWORD", "password")
os.environ.setdefault("LOG_FORMAT", "text")

import pytest
from httpx import ASGITransport, AsyncClient

from mazealarm.api.dependencies import (
    get_device_config_service, get_maze_device_status_service,
)
from mazealarm.infrastructure.database import DatabaseSessionManager
from mazealarm.main import app
from mazealarm.services.factory import open_services

TEST_AUTH = ("admin", "password")


@pytest.fixture
async def db_manager(tmp_path):
    manager = DatabaseSessionManager(f"sqlite+aiosqlite:///{tmp_path / 'maze.db'}")
    yield manager
    await manager.close()


@pytest.fixture
async def services(db_manager):
    return await open_services(db_manager)


@pytest.fixture
async def client(services, db_manager):
    """FastAPI test client wired to the real services on the test database."""
    app.dependency_overrides[get_device_config_service] = (
        lambda: services.device_config
    )
    app.dependency_overrides[get_maze_device_status_service] = (
        lambda: services.maze_device_status
    )
    app.state.db_manager = db_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test", auth=TEST_AUTH,
    ) as c:
        yield c

    app.dependency_overrides.clear()
    del app.state.db_manager
