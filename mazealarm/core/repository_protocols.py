"""Boundary Protocols — contracts between services and the persistence shell.

Invariants:
    - Services depend on these Protocols, never on SQLAlchemy
    - Absence is a value (None / empty list), never an exception
    - update/delete report rows affected; 0 is the only "not found" signal
    - create populates the record's id in place

Design Decisions:
    - Protocol over ABC: structural subtyping, test fakes need no inheritance
"""

from typing import Protocol

from mazealarm.schemas.device import DeviceConfig, MazeDeviceStatus


class DeviceConfigRepository(Protocol):
    """Contract for device config persistence — implemented by shell."""
    async def create(self, config: DeviceConfig) -> None: ...
    async def read_one(self, record_id: int) -> DeviceConfig | None: ...
    async def read_by_device_id(self, device_id: str) -> DeviceConfig | None: ...
    async def read_many(
        self, page: int, rows_per_page: int,
    ) -> list[DeviceConfig]: ...
    async def update(self, config: DeviceConfig) -> int: ...
    async def delete(self, record_id: int) -> int: ...


class MazeDeviceStatusRepository(Protocol):
    """Contract for maze device status persistence — implemented by shell."""
    async def create(self, status: MazeDeviceStatus) -> None: ...
    async def read_one(self, record_id: int) -> MazeDeviceStatus | None: ...
    async def read_by_device_id(self, device_id: str) -> list[MazeDeviceStatus]: ...
    async def read_many(
        self, page: int, rows_per_page: int,
    ) -> list[MazeDeviceStatus]: ...
    async def update(self, status: MazeDeviceStatus) -> int: ...
    async def delete(self, record_id: int) -> int: ...
