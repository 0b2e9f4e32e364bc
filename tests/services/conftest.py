"""Service test fixtures — in-memory fake repositories satisfying the core Protocols.

Invariants:
    - Fakes record every call so tests can assert storage was (not) touched
"""

import pytest

from mazealarm.services import DeviceConfigService, MazeDeviceStatusService


class FakeRepository:
    """Dict-backed repository shared by both resource fakes."""

    def __init__(self):
        self.rows = {}
        self.calls = []
        self._next_id = 1

    async def create(self, record):
        self.calls.append("create")
        record.id = self._next_id
        self._next_id += 1
        self.rows[record.id] = record.model_copy()

    async def read_one(self, record_id):
        self.calls.append("read_one")
        return self.rows.get(record_id)

    async def read_many(self, page, rows_per_page):
        self.calls.append("read_many")
        rows = list(self.rows.values())
        if page < 1:
            return rows
        offset = rows_per_page * (page - 1)
        return rows[offset:offset + rows_per_page]

    async def update(self, record):
        self.calls.append("update")
        if record.id not in self.rows:
            return 0
        self.rows[record.id] = record.model_copy()
        return 1

    async def delete(self, record_id):
        self.calls.append("delete")
        return 1 if self.rows.pop(record_id, None) is not None else 0


class FakeDeviceConfigRepository(FakeRepository):
    async def read_by_device_id(self, device_id):
        self.calls.append("read_by_device_id")
        return next(
            (c for c in self.rows.values() if c.device_id == device_id), None,
        )


class FakeMazeDeviceStatusRepository(FakeRepository):
    async def read_by_device_id(self, device_id):
        self.calls.append("read_by_device_id")
        return sorted(
            (s for s in self.rows.values() if s.device_id == device_id),
            key=lambda s: s.timestamp, reverse=True,
        )


@pytest.fixture
def config_repo():
    return FakeDeviceConfigRepository()


@pytest.fixture
def status_repo():
    return FakeMazeDeviceStatusRepository()


@pytest.fixture
def config_service(config_repo):
    return DeviceConfigService(config_repo)


@pytest.fixture
def status_service(status_repo):
    return MazeDeviceStatusService(status_repo)
