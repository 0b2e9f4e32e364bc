"""Application lifespan — builds the store on startup and releases it on shutdown."""

import pytest

from mazealarm.config import get_settings
from mazealarm.main import app, lifespan


@pytest.fixture
def sqlite_file(tmp_path, monkeypatch):
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{tmp_path / 'lifespan.db'}")
    get_settings.cache_clear()
    yield tmp_path / "lifespan.db"
    get_settings.cache_clear()
    for name in ("db_manager", "device_config_service", "maze_device_status_service"):
        if hasattr(app.state, name):
            delattr(app.state, name)


async def test_lifespan_opens_and_releases(sqlite_file):
    async with lifespan(app):
        manager = app.state.db_manager
        assert not manager.closed
        assert await manager.health_check()
        assert await app.state.device_config_service.read_many(0, 0) == []
        assert await app.state.maze_device_status_service.read_many(0, 0) == []
    assert manager.closed
    assert sqlite_file.exists()
