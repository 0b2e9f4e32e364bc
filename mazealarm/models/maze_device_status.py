"""MazeDeviceStatus ORM — append-style history of status reports per device.

Invariants:
    - id is an autoincrement integer primary key
    - device_id is NOT NULL, indexed, not unique
    - battery_level CHECK 0..100
    - timestamp stored as RFC3339 text; device-scoped reads sort on it descending
"""

from sqlalchemy import Boolean, CheckConstraint, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from mazealarm.db.base import Base


class MazeDeviceStatusRecord(Base):
    """Persisted maze device status report."""
    __tablename__ = "maze_device_status"
    __table_args__ = (
        CheckConstraint(
            "battery_level >= 0 AND battery_level <= 100",
            name="ck_maze_device_status_battery_level",
        ),
        Index("idx_maze_device_status_device_id", "device_id"),
        {"sqlite_autoincrement": True},
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    device_id: Mapped[str] = mapped_column(String(50), nullable=False)
    alarm_active: Mapped[bool] = mapped_column(Boolean, nullable=False)
    maze_completed: Mapped[bool] = mapped_column(Boolean, nullable=False)
    hall_sensor_value: Mapped[bool] = mapped_column(Boolean, nullable=False)
    battery_level: Mapped[int] = mapped_column(Integer, nullable=False)
    timestamp: Mapped[str] = mapped_column(Text, nullable=False)
