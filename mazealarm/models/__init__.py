"""ORM Models — SQLAlchemy tables backing the device resources.

Invariants:
    - All models inherit from Base (db/base.py)
    - Numeric ranges mirrored as CHECK constraints behind service validation

Design Decisions:
    - One file per table for locality
"""

from mazealarm.models.device_config import DeviceConfigRecord  # noqa: F401
from mazealarm.models.maze_device_status import MazeDeviceStatusRecord  # noqa: F401
