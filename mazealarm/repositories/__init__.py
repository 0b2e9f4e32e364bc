"""Repositories — SQLite implementations of core/repository_protocols.py.

Invariants:
    - Opened through an async factory that ensures the schema first
    - Statement constructs built once per repository, released with the database handle
"""

from mazealarm.repositories.device_config_repository import (  # noqa: F401
    SQLiteDeviceConfigRepository,
)
from mazealarm.repositories.maze_device_status_repository import (  # noqa: F401
    SQLiteMazeDeviceStatusRepository,
)
