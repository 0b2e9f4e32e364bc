"""Test Factories — valid payloads and RFC3339 timestamps relative to now."""

from datetime import datetime, timedelta, timezone

from mazealarm.schemas.device import DeviceConfig, MazeDeviceStatus


def rfc3339(offset: timedelta = timedelta()) -> str:
    moment = datetime.now(timezone.utc).replace(microsecond=0) + offset
    return moment.isoformat().replace("+00:00", "Z")


def config_payload(**overrides) -> dict:
    payload = {
        "device_id": "ARD001",
        "alarm_timeout": 300,
        "sensitivity_level": 5,
        "updated_at": rfc3339(),
    }
    payload.update(overrides)
    return payload


def status_payload(**overrides) -> dict:
    payload = {
        "device_id": "ARD001",
        "alarm_active": True,
        "maze_completed": False,
        "hall_sensor_value": False,
        "battery_level": 85,
        "timestamp": rfc3339(),
    }
    payload.update(overrides)
    return payload


def make_config(**overrides) -> DeviceConfig:
    return DeviceConfig(**config_payload(**overrides))


def make_status(**overrides) -> MazeDeviceStatus:
    return MazeDeviceStatus(**status_payload(**overrides))
