"""Device Validation — tests for the pure config and status rule sets.

Tests cover:
    - Every config rule rejects out-of-range values and accepts its boundaries
    - Every status rule, including maze_completed requiring hall_sensor_value
    - RFC3339 parsing strictness and the one-minute future tolerance
    - Rule evaluation never short-circuits
"""

from datetime import datetime, timedelta, timezone

import pytest

from mazealarm.core.validate_device import (
    check_device_config,
    check_maze_device_status,
    join_violations,
    parse_rfc3339,
)
from tests.factories import make_config, make_status, rfc3339

NOW = datetime(2025, 3, 1, 12, 0, 0, tzinfo=timezone.utc)


# ─── parse_rfc3339 ───────────────────────────────────────────────

@pytest.mark.parametrize("text", [
    "2024-01-15T10:30:00Z",
    "2024-01-15T10:30:00+02:00",
    "2024-01-15T10:30:00.123456789-05:30",
    "2024-01-15t10:30:00z",
])
def test_parse_rfc3339_accepts_valid_forms(text):
    parsed = parse_rfc3339(text)
    assert parsed is not None
    assert parsed.tzinfo is not None


@pytest.mark.parametrize("text", [
    "",
    "2024-01-15 10:30:00",
    "2024-01-15T10:30:00",
    "2024-01-15",
    "invalid-timestamp",
    "2024-13-15T10:30:00Z",
    "2024-01-15T25:30:00Z",
    "2024-01-15T10:30:00Z\n",
    "\u0662\u0660\u0662\u0664-01-15T10:30:00Z",
])
def test_parse_rfc3339_rejects_invalid_forms(text):
    assert parse_rfc3339(text) is None


def test_parse_rfc3339_keeps_offset():
    parsed = parse_rfc3339("2024-01-15T10:30:00+02:00")
    assert parsed == datetime(2024, 1, 15, 8, 30, tzinfo=timezone.utc)


# ─── check_device_config ─────────────────────────────────────────

def test_valid_config_has_no_violations():
    assert check_device_config(make_config(updated_at=rfc3339())) == []


@pytest.mark.parametrize("alarm_timeout,sensitivity_level", [
    (1, 1), (3600, 10), (1, 10), (3600, 1),
])
def test_config_accepts_boundaries(alarm_timeout, sensitivity_level):
    config = make_config(
        alarm_timeout=alarm_timeout, sensitivity_level=sensitivity_level,
        updated_at="2025-03-01T12:00:00Z",
    )
    assert check_device_config(config, now=NOW) == []


@pytest.mark.parametrize("device_id", ["", "X" * 51])
def test_config_rejects_bad_device_id(device_id):
    violations = check_device_config(
        make_config(device_id=device_id, updated_at="2025-03-01T12:00:00Z"), now=NOW,
    )
    assert violations == [
        "device_id is required and must be less than 50 characters.",
    ]


def test_config_accepts_fifty_character_device_id():
    config = make_config(device_id="X" * 50, updated_at="2025-03-01T12:00:00Z")
    assert check_device_config(config, now=NOW) == []


@pytest.mark.parametrize("alarm_timeout", [0, -5, 3601])
def test_config_rejects_alarm_timeout_out_of_range(alarm_timeout):
    violations = check_device_config(
        make_config(alarm_timeout=alarm_timeout, updated_at="2025-03-01T12:00:00Z"),
        now=NOW,
    )
    assert violations == ["alarm_timeout must be between 1 and 3600 seconds."]


@pytest.mark.parametrize("sensitivity_level", [0, 11])
def test_config_rejects_sensitivity_out_of_range(sensitivity_level):
    violations = check_device_config(
        make_config(
            sensitivity_level=sensitivity_level, updated_at="2025-03-01T12:00:00Z",
        ),
        now=NOW,
    )
    assert violations == ["sensitivity_level must be between 1 and 10."]


def test_config_rejects_unparseable_updated_at():
    violations = check_device_config(
        make_config(updated_at="2024-01-15 10:30:00"), now=NOW,
    )
    assert violations == [
        "updated_at must be in RFC3339 format (e.g., 2006-01-02T15:04:05Z07:00).",
    ]


def test_config_rejects_updated_at_beyond_skew_tolerance():
    violations = check_device_config(
        make_config(updated_at="2025-03-01T12:01:01Z"), now=NOW,
    )
    assert violations == ["updated_at must not be in the future."]


def test_config_tolerates_one_minute_of_clock_skew():
    config = make_config(updated_at="2025-03-01T12:01:00Z")
    assert check_device_config(config, now=NOW) == []


def test_config_reports_every_violation():
    config = make_config(
        device_id="", alarm_timeout=0, sensitivity_level=99, updated_at="nope",
    )
    violations = check_device_config(config, now=NOW)
    assert len(violations) == 4
    assert violations[0].startswith("device_id")
    assert violations[1].startswith("alarm_timeout")
    assert violations[2].startswith("sensitivity_level")
    assert violations[3].startswith("updated_at")


# ─── check_maze_device_status ────────────────────────────────────

def test_valid_status_has_no_violations():
    assert check_maze_device_status(make_status(timestamp=rfc3339())) == []


def test_status_accepts_completed_maze_with_sensor_confirmation():
    status = make_status(
        maze_completed=True, hall_sensor_value=True,
        timestamp=rfc3339(-timedelta(minutes=5)),
    )
    assert check_maze_device_status(status) == []


def test_status_rejects_completed_maze_without_sensor_confirmation():
    status = make_status(
        maze_completed=True, hall_sensor_value=False,
        timestamp="2025-03-01T11:00:00Z",
    )
    assert check_maze_device_status(status, now=NOW) == [
        "maze_completed cannot be true when hall_sensor_value is false.",
    ]


def test_status_allows_sensor_without_completion():
    status = make_status(
        maze_completed=False, hall_sensor_value=True,
        timestamp="2025-03-01T11:00:00Z",
    )
    assert check_maze_device_status(status, now=NOW) == []


@pytest.mark.parametrize("battery_level", [0, 100])
def test_status_accepts_battery_boundaries(battery_level):
    status = make_status(battery_level=battery_level, timestamp="2025-03-01T11:00:00Z")
    assert check_maze_device_status(status, now=NOW) == []


@pytest.mark.parametrize("battery_level", [-10, -1, 101, 150])
def test_status_rejects_battery_out_of_range(battery_level):
    status = make_status(battery_level=battery_level, timestamp="2025-03-01T11:00:00Z")
    assert check_maze_device_status(status, now=NOW) == [
        "battery_level must be between 0 and 100.",
    ]


def test_status_rejects_future_timestamp():
    status = make_status(timestamp=rfc3339(timedelta(minutes=10)))
    assert check_maze_device_status(status) == [
        "timestamp must not be in the future.",
    ]


def test_status_rejects_long_device_id():
    status = make_status(
        device_id="ThisIsAVeryLongDeviceIDThatExceedsTheFiftyCharacterLimit",
        timestamp="2025-03-01T11:00:00Z",
    )
    assert check_maze_device_status(status, now=NOW) == [
        "device_id is required and must be less than 50 characters.",
    ]


def test_status_reports_every_violation():
    status = make_status(
        device_id="", battery_level=200, timestamp="invalid-timestamp",
        maze_completed=True, hall_sensor_value=False,
    )
    violations = check_maze_device_status(status, now=NOW)
    assert len(violations) == 4
    assert violations[-1].startswith("maze_completed")


# ─── join_violations ─────────────────────────────────────────────

def test_join_violations_keeps_trailing_space_per_sentence():
    assert join_violations([
        "battery_level must be between 0 and 100.",
        "timestamp must not be in the future.",
    ]) == (
        "battery_level must be between 0 and 100. "
        "timestamp must not be in the future. "
    )


def test_join_violations_empty():
    assert join_violations([]) == ""
