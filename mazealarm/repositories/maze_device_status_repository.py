"""Maze Device Status Repository — prepared statements over the maze_device_status table.

Invariants:
    - read_by_device_id returns the device history newest first; unknown device = []
    - Unpaged reads are ordered newest first; paged reads use store order
    - update / delete return rows affected
"""

from sqlalchemy import bindparam, delete, insert, select, update

from mazealarm.models.maze_device_status import MazeDeviceStatusRecord
from mazealarm.repositories.base import PreparedRepository, page_offset
from mazealarm.schemas.device import MazeDeviceStatus

_COLUMNS = (
    "device_id", "alarm_active", "maze_completed",
    "hall_sensor_value", "battery_level", "timestamp",
)


def _params(status: MazeDeviceStatus) -> dict:
    return {column: getattr(status, column) for column in _COLUMNS}


class SQLiteMazeDeviceStatusRepository(PreparedRepository):
    """MazeDeviceStatusRepository backed by SQLite."""

    table = MazeDeviceStatusRecord.__table__

    def _prepare(self) -> None:
        t = self.table
        newest_first = (t.c.timestamp.desc(), t.c.id.desc())
        self._create_stmt = insert(t)
        self._read_stmt = select(t).where(t.c.id == bindparam("record_id"))
        self._read_page_stmt = select(t)
        self._read_all_stmt = select(t).order_by(*newest_first)
        self._read_by_device_stmt = (
            select(t)
            .where(t.c.device_id == bindparam("lookup_device_id"))
            .order_by(*newest_first)
        )
        self._update_stmt = update(t).where(t.c.id == bindparam("record_id"))
        self._delete_stmt = delete(t).where(t.c.id == bindparam("record_id"))

    async def create(self, status: MazeDeviceStatus) -> None:
        self._require_open("create")
        async with self._db.session() as db:
            result = await db.execute(self._create_stmt, _params(status))
            new_id = result.inserted_primary_key[0]
            await db.commit()
        status.id = new_id

    async def read_one(self, record_id: int) -> MazeDeviceStatus | None:
        self._require_open("read_one")
        async with self._db.session() as db:
            result = await db.execute(self._read_stmt, {"record_id": record_id})
            row = result.mappings().first()
        return MazeDeviceStatus.model_validate(dict(row)) if row else None

    async def read_many(
        self, page: int, rows_per_page: int,
    ) -> list[MazeDeviceStatus]:
        self._require_open("read_many")
        if page < 1:
            stmt = self._read_all_stmt
        else:
            stmt = self._read_page_stmt.limit(rows_per_page).offset(
                page_offset(page, rows_per_page),
            )
        async with self._db.session() as db:
            result = await db.execute(stmt)
            rows = result.mappings().all()
        return [MazeDeviceStatus.model_validate(dict(row)) for row in rows]

    async def read_by_device_id(self, device_id: str) -> list[MazeDeviceStatus]:
        self._require_open("read_by_device_id")
        async with self._db.session() as db:
            result = await db.execute(
                self._read_by_device_stmt, {"lookup_device_id": device_id},
            )
            rows = result.mappings().all()
        return [MazeDeviceStatus.model_validate(dict(row)) for row in rows]

    async def update(self, status: MazeDeviceStatus) -> int:
        self._require_open("update")
        async with self._db.session() as db:
            result = await db.execute(
                self._update_stmt, {"record_id": status.id, **_params(status)},
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
