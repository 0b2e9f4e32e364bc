"""Device Config Repository — prepared statements over the device_config table.

Invariants:
    - read_one / read_by_device_id return None for absence
    - update / delete return rows affected (0 or 1, identity keyed)
    - A duplicate device_id surfaces as UniqueConstraintError for the caller to classify
"""

from sqlalchemy import bindparam, delete, insert, select, update

from mazealarm.models.device_config import DeviceConfigRecord
from mazealarm.repositories.base import PreparedRepository, page_offset
from mazealarm.schemas.device import DeviceConfig

_COLUMNS = ("device_id", "alarm_timeout", "sensitivity_level", "updated_at")


def _params(config: DeviceConfig) -> dict:
    return {column: getattr(config, column) for column in _COLUMNS}


class SQLiteDeviceConfigRepository(PreparedRepository):
    """DeviceConfigRepository backed by SQLite."""

    table = DeviceConfigRecord.__table__

    def _prepare(self) -> None:
        t = self.table
        self._create_stmt = insert(t)
        self._read_stmt = select(t).where(t.c.id == bindparam("record_id"))
        self._read_by_device_stmt = select(t).where(
            t.c.device_id == bindparam("lookup_device_id"),
        )
        self._read_all_stmt = select(t)
        self._update_stmt = update(t).where(t.c.id == bindparam("record_id"))
        self._delete_stmt = delete(t).where(t.c.id == bindparam("record_id"))

    async def create(self, config: DeviceConfig) -> None:
        self._require_open("create")
        async with self._db.session() as db:
            result = await db.execute(self._create_stmt, _params(config))
            new_id = result.inserted_primary_key[0]
            await db.commit()
        config.id = new_id

    async def read_one(self, record_id: int) -> DeviceConfig | None:
        self._require_open("read_one")
        async with self._db.session() as db:
            result = await db.execute(self._read_stmt, {"record_id": record_id})
            row = result.mappings().first()
        return DeviceConfig.model_validate(dict(row)) if row else None

    async def read_by_device_id(self, device_id: str) -> DeviceConfig | None:
        self._require_open("read_by_device_id")
        async with self._db.session() as db:
            result = await db.execute(
                self._read_by_device_stmt, {"lookup_device_id": device_id},
            )
            row = result.mappings().first()
        return DeviceConfig.model_validate(dict(row)) if row else None

    async def read_many(self, page: int, rows_per_page: int) -> list[DeviceConfig]:
        self._require_open("read_many")
        stmt = self._read_all_stmt
        if page >= 1:
            stmt = stmt.limit(rows_per_page).offset(page_offset(page, rows_per_page))
        async with self._db.session() as db:
            result = await db.execute(stmt)
            rows = result.mappings().all()
        return [DeviceConfig.model_validate(dict(row)) for row in rows]

    async def update(self, config: DeviceConfig) -> int:
        self._require_open("update")
        async with self._db.session() as db:
            result = await db.execute(
                self._update_stmt, {"record_id": config.id, **_params(config)},
            )
            affected = result.rowcount
            await db.commit()
        return affected

    async def delete(self, record_id: int) -> int:
        self._require_open("delete")
        async with self._db.session() as db:
            result = await db.execute(self._delete_stmt, {"record_id": record_id})
            affected = result.rowcount
            await db.commit()
        return affected
