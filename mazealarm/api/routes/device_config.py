"""Device Config Routes — CRUD over /device/config.

Invariants:
    - POST echoes the created config with its store-assigned id (201)
    - PUT requires a non-zero id and echoes the submitted config (200), 404 on 0 rows
    - GET with a non-empty device_id returns one object or 404, ignoring pagination
    - A UNIQUE violation on device_config.device_id during create is a 409
"""

import logging

from fastapi import APIRouter, Depends, Query, status

from mazealarm.api.basic_auth import require_basic_auth
from mazealarm.api.dependencies import get_device_config_service
from mazealarm.api.routes.route_helpers import (
    call_service, parse_int_or_zero, parse_record_id,
)
from mazealarm.core.errors import (
    DeviceConfigConflictError, ErrorContext, MissingIdentifierError,
    ResourceNotFoundError, UniqueConstraintError,
)
from mazealarm.schemas.device import DeviceConfig
from mazealarm.services import DeviceConfigService

logger = logging.getLogger(__name__)
router = APIRouter(
    prefix="/device/config", tags=["device-config"],
    dependencies=[Depends(require_basic_auth)],
)

RESOURCE = "device_config"
RESOURCE_LABEL = "Device config"


@router.post("", response_model=DeviceConfig, status_code=status.HTTP_201_CREATED)
async def create_device_config(
    config: DeviceConfig,
    service: DeviceConfigService = Depends(get_device_config_service),
):
    """Create a configuration for a device that has none yet."""
    try:
        await call_service(service.create(config), "create device config", RESOURCE)
    except UniqueConstraintError as e:
        if e.violates(RESOURCE, "device_id"):
            raise DeviceConfigConflictError(
                ErrorContext(resource=RESOURCE, device_id=config.device_id),
            ) from e
        raise
    return config


@router.put("", response_model=DeviceConfig)
async def update_device_config(
    config: DeviceConfig,
    service: DeviceConfigService = Depends(get_device_config_service),
):
    """Replace an existing configuration; the body must carry its id."""
    if config.id == 0:
        raise MissingIdentifierError()
    rows_affected = await call_service(
        service.update(config), "update device config", RESOURCE,
    )
    if rows_affected == 0:
        raise ResourceNotFoundError(
            RESOURCE_LABEL, ErrorContext(resource=RESOURCE, record_id=config.id),
        )
    return config


@router.get("")
async def list_device_configs(
    page: str | None = Query(None),
    rows_per_page: str | None = Query(None),
    device_id: str | None = Query(None),
    service: DeviceConfigService = Depends(get_device_config_service),
):
    """List configs page by page, or fetch the single config of one device."""
    if device_id:
        config = await call_service(
            service.read_by_device_id(device_id),
            "read device config by device_id", RESOURCE,
        )
        if config is None:
            raise ResourceNotFoundError(
                RESOURCE_LABEL, ErrorContext(resource=RESOURCE, device_id=device_id),
            )
        return config
    return await call_service(
        service.read_many(parse_int_or_zero(page), parse_int_or_zero(rows_per_page)),
        "read device configs", RESOURCE,
    )


@router.get("/{record_id}", response_model=DeviceConfig)
async def get_device_config(
    record_id: str,
    service: DeviceConfigService = Depends(get_device_config_service),
):
    """Fetch one config by id."""
    config_id = parse_record_id(record_id)
    config = await call_service(
        service.read_one(config_id), "read device config", RESOURCE,
    )
    if config is None:
        raise ResourceNotFoundError(
            RESOURCE_LABEL, ErrorContext(resource=RESOURCE, record_id=config_id),
        )
    return config


@router.delete("/{record_id}")
async def delete_device_config(
    record_id: str,
    service: DeviceConfigService = Depends(get_device_config_service),
):
    """Delete one config by id."""
    config_id = parse_record_id(record_id)
    rows_affected = await call_service(
        service.delete(config_id), "delete device config", RESOURCE,
    )
    if rows_affected == 0:
        raise ResourceNotFoundError(
            RESOURCE_LABEL, ErrorContext(resource=RESOURCE, record_id=config_id),
        )
    return {"message": f"{RESOURCE_LABEL} deleted successfully."}
