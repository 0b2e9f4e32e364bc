"""Device Validation — pure business rules for configs and maze statuses.

Invariants:
    - Rules are evaluated exhaustively: every broken rule contributes a message
    - Functions return the list of violation messages; empty list = valid
    - "now" is injectable; defaults to the current UTC time
    - maze_completed implies hall_sensor_value (no completion without sensor proof)

Design Decisions:
    - Pure functions returning data, services decide how to raise
    - RFC3339 checked by pattern before parsing: datetime.fromisoformat alone
      accepts date-only and naive forms that devices must not send
"""

import re
from datetime import datetime, timedelta, timezone

from mazealarm.schemas.device import DeviceConfig, MazeDeviceStatus

DEVICE_ID_MAX_LENGTH = 50
ALARM_TIMEOUT_MIN, ALARM_TIMEOUT_MAX = 1, 3600
SENSITIVITY_MIN, SENSITIVITY_MAX = 1, 10
BATTERY_MIN, BATTERY_MAX = 0, 100
CLOCK_SKEW_TOLERANCE = timedelta(minutes=1)

RFC3339_EXAMPLE = "2006-01-02T15:04:05Z07:00"

_RFC3339_PATTERN = re.compile(
    r"(?P<date>\d{4}-\d{2}-\d{2})[Tt]"
    r"(?P<time>\d{2}:\d{2}:\d{2})"
    r"(?:\.(?P<fraction>\d+))?"
    r"(?P<offset>[Zz]|[+-]\d{2}:\d{2})",
    re.ASCII,
)


# ─── Timestamps ──────────────────────────────────────────────────

def parse_rfc3339(value: str) -> datetime | None:
    """Parse an RFC3339 timestamp into an aware datetime, or None if malformed."""
    match = _RFC3339_PATTERN.fullmatch(value or "")
    if not match:
        return None
    fraction = (match.group("fraction") or "")[:6].ljust(6, "0")
    offset = match.group("offset")
    if offset in ("Z", "z"):
        offset = "+00:00"
    try:
        return datetime.fromisoformat(
            f"{match.group('date')}T{match.group('time')}.{fraction}{offset}",
        )
    except ValueError:
        return None


def _check_device_id(device_id: str) -> list[str]:
    if not device_id or len(device_id) > DEVICE_ID_MAX_LENGTH:
        return [
            "device_id is required and must be less than "
            f"{DEVICE_ID_MAX_LENGTH} characters.",
        ]
    return []


def _check_timestamp(field_name: str, value: str, now: datetime) -> list[str]:
    parsed = parse_rfc3339(value)
    if parsed is None:
        return [f"{field_name} must be in RFC3339 format (e.g., {RFC3339_EXAMPLE})."]
    if parsed > now + CLOCK_SKEW_TOLERANCE:
        return [f"{field_name} must not be in the future."]
    return []


# ─── Rule Sets ───────────────────────────────────────────────────

def check_device_config(
    config: DeviceConfig, now: datetime | None = None,
) -> list[str]:
    """Return every rule the config breaks."""
    now = now or datetime.now(timezone.utc)
    violations = _check_device_id(config.device_id)
    if not ALARM_TIMEOUT_MIN <= config.alarm_timeout <= ALARM_TIMEOUT_MAX:
        violations.append(
            f"alarm_timeout must be between {ALARM_TIMEOUT_MIN} "
            f"and {ALARM_TIMEOUT_MAX} seconds.",
        )
    if not SENSITIVITY_MIN <= config.sensitivity_level <= SENSITIVITY_MAX:
        violations.append(
            f"sensitivity_level must be between {SENSITIVITY_MIN} "
            f"and {SENSITIVITY_MAX}.",
        )
    violations += _check_timestamp("updated_at", config.updated_at, now)
    return violations


def check_maze_device_status(
    status: MazeDeviceStatus, now: datetime | None = None,
) -> list[str]:
    """Return every rule the status breaks."""
    now = now or datetime.now(timezone.utc)
    violations = _check_device_id(status.device_id)
    if not BATTERY_MIN <= status.battery_level <= BATTERY_MAX:
        violations.append(
            f"battery_level must be between {BATTERY_MIN} and {BATTERY_MAX}.",
        )
    violations += _check_timestamp("timestamp", status.timestamp, now)
    if status.maze_completed and not status.hall_sensor_value:
        violations.append(
            "maze_completed cannot be true when hall_sensor_value is false.",
        )
    return violations


def join_violations(violations: list[str]) -> str:
    """Render violations as one message; each sentence keeps its trailing space."""
    return "".join(f"{violation} " for violation in violations)
