"""DeviceConfig ORM — one configuration row per physical device.

Invariants:
    - id is an autoincrement integer primary key
    - device_id is NOT NULL and UNIQUE (at most one config per device)
    - sensitivity_level CHECK 1..10
    - updated_at stored as RFC3339 text, echoed verbatim
"""

from sqlalchemy import CheckConstraint, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from mazealarm.db.base import Base


class DeviceConfigRecord(Base):
    """Persisted device configuration."""
    __tablename__ = "device_config"
    __table_args__ = (
        CheckConstraint(
            "sensitivity_level >= 1 AND sensitivity_level <= 10",
            name="ck_device_config_sensitivity_level",
        ),
        Index("idx_device_config_device_id", "device_id"),
        {"sqlite_autoincrement": True},
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    device_id: Mapped[str] = mapped_column(String(50), nullable=False, unique=True)
    alarm_timeout: Mapped[int] = mapped_column(Integer, nullable=False)
    sensitivity_level: Mapped[int] = mapped_column(Integer, nullable=False)
    updated_at: Mapped[str] = mapped_column(Text, nullable=False)
