"""Device Config Service — validates configs before they reach the repository.

Invariants:
    - validate_config reports every broken rule in one DeviceConfigError
    - read_by_device_id rejects an empty device_id before touching storage
    - update does not check existence; the repository's rows-affected count does
"""

import logging
from datetime import datetime

from mazealarm.core.errors import DeviceConfigError
from mazealarm.core.repository_protocols import DeviceConfigRepository
from mazealarm.core.validate_device import check_device_config, join_violations
from mazealarm.schemas.device import DeviceConfig

logger = logging.getLogger(__name__)


class DeviceConfigService:
    """Business logic for device configurations."""

    def __init__(self, repo: DeviceConfigRepository):
        self._repo = repo

    def validate_config(
        self, config: DeviceConfig, now: datetime | None = None,
    ) -> None:
        violations = check_device_config(config, now)
        if violations:
            raise DeviceConfigError(
                "Invalid device config: " + join_violations(violations), violations,
            )

    async def create(self, config: DeviceConfig) -> None:
        self.validate_config(config)
        await self._repo.create(config)
        logger.info(
            "Device config created",
            extra={"device_id": config.device_id, "record_id": config.id},
        )

    async def read_one(self, record_id: int) -> DeviceConfig | None:
        return await self._repo.read_one(record_id)

    async def read_by_device_id(self, device_id: str) -> DeviceConfig | None:
        if not device_id:
            raise DeviceConfigError("device_id is required")
        return await self._repo.read_by_device_id(device_id)

    async def read_many(self, page: int, rows_per_page: int) -> list[DeviceConfig]:
        return await self._repo.read_many(page, rows_per_page)

    async def update(self, config: DeviceConfig) -> int:
        self.validate_config(config)
        return await self._repo.update(config)

    async def delete(self, record_id: int) -> int:
        return await self._repo.delete(record_id)
