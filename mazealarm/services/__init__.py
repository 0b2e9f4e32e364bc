"""Validating Services — business-rule gatekeepers between routes and repositories.

Invariants:
    - Validation runs on create and update only (never reads or deletes)
    - Rule violations raise a ValidationFailedError subclass; storage errors pass through
"""

from mazealarm.services.device_config_service import DeviceConfigService  # noqa: F401
from mazealarm.services.maze_device_service import MazeDeviceStatusService  # noqa: F401
