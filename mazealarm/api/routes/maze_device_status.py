"""Maze Device Status Routes — CRUD over /device/status.

Invariants:
    - GET with a non-empty device_id returns that device's history newest first;
      an unknown device is an empty list with 200, never 404
    - PUT requires a non-zero id; 0 rows affected is 404
"""

import logging

from fastapi import APIRouter, Depends, Query, status

from mazealarm.api.basic_auth import require_basic_auth
from mazealarm.api.dependencies import get_maze_device_status_service
from mazealarm.api.routes.route_helpers import (
    call_service, parse_int_or_zero, parse_record_id,
)
from mazealarm.core.errors import (
    ErrorContext, MissingIdentifierError, ResourceNotFoundError,
)
from mazealarm.schemas.device import MazeDeviceStatus
from mazealarm.services import MazeDeviceStatusService

logger = logging.getLogger(__name__)
router = APIRouter(
    prefix="/device/status", tags=["device-status"],
    dependencies=[Depends(require_basic_auth)],
)

RESOURCE = "maze_device_status"
RESOURCE_LABEL = "Maze device status"


@router.post(
    "", response_model=MazeDeviceStatus, status_code=status.HTTP_201_CREATED,
)
async def create_maze_device_status(
    device_status: MazeDeviceStatus,
    service: MazeDeviceStatusService = Depends(get_maze_device_status_service),
):
    """Record a status report sent by a device."""
    await call_service(
        service.create(device_status), "create maze device status", RESOURCE,
    )
    return device_status


@router.put("", response_model=MazeDeviceStatus)
async def update_maze_device_status(
    device_status: MazeDeviceStatus,
    service: MazeDeviceStatusService = Depends(get_maze_device_status_service),
):
    if device_status.id == 0:
        raise MissingIdentifierError()
    rows_affected = await call_service(
        service.update(device_status), "update maze device status", RESOURCE,
    )
    if rows_affected == 0:
        raise ResourceNotFoundError(
            RESOURCE_LABEL,
            ErrorContext(resource=RESOURCE, record_id=device_status.id),
        )
    return device_status


@router.get("", response_model=list[MazeDeviceStatus])
async def list_maze_device_statuses(
    page: str | None = Query(None),
    rows_per_page: str | None = Query(None),
    device_id: str | None = Query(None),
    service: MazeDeviceStatusService = Depends(get_maze_device_status_service),
):
    """List statuses page by page, or the full history of one device."""
    if device_id:
        return await call_service(
            service.read_by_device_id(device_id),
            "read maze device statuses by device_id", RESOURCE,
        )
    return await call_service(
        service.read_many(parse_int_or_zero(page), parse_int_or_zero(rows_per_page)),
        "read maze device statuses", RESOURCE,
    )


@router.get("/{record_id}", response_model=MazeDeviceStatus)
async def get_maze_device_status(
    record_id: str,
    service: MazeDeviceStatusService = Depends(get_maze_device_status_service),
):
    status_id = parse_record_id(record_id)
    device_status = await call_service(
        service.read_one(status_id), "read maze device status", RESOURCE,
    )
    if device_status is None:
        raise ResourceNotFoundError(
            RESOURCE_LABEL, ErrorContext(resource=RESOURCE, record_id=status_id),
        )
    return device_status


@router.delete("/{record_id}")
async def delete_maze_device_status(
    record_id: str,
    service: MazeDeviceStatusService = Depends(get_maze_device_status_service),
):
    status_id = parse_record_id(record_id)
    rows_affected = await call_service(
        service.delete(status_id), "delete maze device status", RESOURCE,
    )
    if rows_affected == 0:
        raise ResourceNotFoundError(
            RESOURCE_LABEL, ErrorContext(resource=RESOURCE, record_id=status_id),
        )
    return {"message": f"{RESOURCE_LABEL} deleted successfully."}
