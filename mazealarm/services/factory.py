"""Service Factory — opens the repositories on a database handle and wires the services.

Invariants:
    - Each repository is opened exactly once per database handle
    - A schema failure aborts the whole build (startup is fatal)
"""

from dataclasses import dataclass

from mazealarm.infrastructure.database import DatabaseSessionManager
from mazealarm.repositories import (
    SQLiteDeviceConfigRepository, SQLiteMazeDeviceStatusRepository,
)
from mazealarm.services.device_config_service import DeviceConfigService
from mazealarm.services.maze_device_service import MazeDeviceStatusService


@dataclass(frozen=True)
class Services:
    device_config: DeviceConfigService
    maze_device_status: MazeDeviceStatusService


async def open_services(db: DatabaseSessionManager) -> Services:
    config_repo = await SQLiteDeviceConfigRepository.open(db)
    status_repo = await SQLiteMazeDeviceStatusRepository.open(db)
    return Services(
        device_config=DeviceConfigService(config_repo),
        maze_device_status=MazeDeviceStatusService(status_repo),
    )
