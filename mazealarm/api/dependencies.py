"""Service Dependencies — FastAPI providers for the services built in the lifespan.

Invariants:
    - Services are constructed once per process and shared by all requests
    - Tests replace these providers through app.dependency_overrides
"""

from fastapi import Request

from mazealarm.services import DeviceConfigService, MazeDeviceStatusService


def get_device_config_service(request: Request) -> DeviceConfigService:
    return request.app.state.device_config_service


def get_maze_device_status_service(request: Request) -> MazeDeviceStatusService:
    return request.app.state.maze_device_status_service
