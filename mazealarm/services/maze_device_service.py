"""Maze Device Status Service — validates status reports, including the maze/sensor consistency rule."""

import logging
from datetime import datetime

from mazealarm.core.errors import MazeDeviceStatusError
from mazealarm.core.repository_protocols import MazeDeviceStatusRepository
from mazealarm.core.validate_device import (
    check_maze_device_status, join_violations,
)
from mazealarm.schemas.device import MazeDeviceStatus

logger = logging.getLogger(__name__)


class MazeDeviceStatusService:
    """Business logic for maze device status reports."""

    def __init__(self, repo: MazeDeviceStatusRepository):
        self._repo = repo

    def validate_status(
        self, status: MazeDeviceStatus, now: datetime | None = None,
    ) -> None:
        violations = check_maze_device_status(status, now)
        if violations:
            raise MazeDeviceStatusError(
                "Invalid maze device status: " + join_violations(violations), violations,
            )

    async def create(self, status: MazeDeviceStatus) -> None:
        self.validate_status(status)
        await self._repo.create(status)
        if status.maze_completed:
            logger.info(
                "Maze completed",
                extra={"device_id": status.device_id, "record_id": status.id},
            )

    async def read_one(self, record_id: int) -> MazeDeviceStatus | None:
        return await self._repo.read_one(record_id)

    async def read_by_device_id(self, device_id: str) -> list[MazeDeviceStatus]:
        if not device_id:
            raise MazeDeviceStatusError("device_id is required")
        return await self._repo.read_by_device_id(device_id)

    async def read_many(
        self, page: int, rows_per_page: int,
    ) -> list[MazeDeviceStatus]:
        return await self._repo.read_many(page, rows_per_page)

    async def update(self, status: MazeDeviceStatus) -> int:
        self.validate_status(status)
        return await self._repo.update(status)

    async def delete(self, record_id: int) -> int:
        return await self._repo.delete(record_id)
