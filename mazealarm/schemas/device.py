"""Device Schemas — DeviceConfig and MazeDeviceStatus as exchanged with devices and apps.

Invariants:
    - Field names are the snake_case JSON keys used by firmware and clients
    - Missing fields decode to zero values (0, "", False) so validation can name them
    - Wrong JSON types are never coerced ("300" is not an int, "yes" is not a bool)
    - Integers fit SQLite's signed 64-bit INTEGER
    - id is store-assigned on create; 0 means "no identity"
    - Timestamps stay RFC3339 text end to end (stored and echoed verbatim)

Design Decisions:
    - Zero-value defaults over required fields: a payload missing alarm_timeout
      is a business-rule violation (400 with rule text), not a decode failure
    - strict=True: a type mismatch is a decode failure, like the firmware's
      own JSON decoder, while ranges stay with the service rules
"""

from pydantic import BaseModel, ConfigDict, Field

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


def _int64(default: int = 0):
    return Field(default, ge=INT64_MIN, le=INT64_MAX)


class DeviceConfig(BaseModel):
    """Configuration settings for one maze device (at most one per device_id)."""
    model_config = ConfigDict(from_attributes=True, strict=True)

    id: int = _int64()
    device_id: str = ""                  # hardware identifier of the microcontroller
    alarm_timeout: int = _int64()        # seconds, 1-3600
    sensitivity_level: int = _int64()    # hall sensor sensitivity, 1-10
    updated_at: str = ""                 # RFC3339


class MazeDeviceStatus(BaseModel):
    """One status report from a maze device; a device accumulates a history."""
    model_config = ConfigDict(from_attributes=True, strict=True)

    id: int = _int64()
    device_id: str = ""
    alarm_active: bool = False
    maze_completed: bool = False
    hall_sensor_value: bool = False      # True = ball detected at the goal
    battery_level: int = _int64()        # percent, 0-100
    timestamp: str = ""                  # RFC3339
