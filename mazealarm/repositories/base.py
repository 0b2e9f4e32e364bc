"""Prepared Repository Base — schema bootstrap, statement lifetime and paging math.

Invariants:
    - open() creates the table (idempotent) before statements are prepared;
      a schema failure propagates and aborts startup
    - release() runs once, via DatabaseSessionManager.close()
    - Any call after release raises DatabaseError
    - page < 1 means "no paging": the whole table is returned
"""

import logging
from abc import ABC, abstractmethod
from typing import ClassVar, TypeVar

from sqlalchemy import Table

from mazealarm.core.errors import DatabaseError
from mazealarm.infrastructure.database import DatabaseSessionManager
from mazealarm.schemas.device import INT64_MAX, INT64_MIN

logger = logging.getLogger(__name__)

RepositoryT = TypeVar("RepositoryT", bound="PreparedRepository")


def page_offset(page: int, rows_per_page: int) -> int:
    """Offset of the first row of a 1-based page, clamped to SQLite INTEGER."""
    return max(INT64_MIN, min(INT64_MAX, rows_per_page * (page - 1)))


class PreparedRepository(ABC):
    """Shared lifecycle for the SQLite repositories.

    Subclasses set `table` and build their `*_stmt` attributes in _prepare().
    """

    table: ClassVar[Table]

    def __init__(self, db: DatabaseSessionManager):
        self._db = db
        self._released = False
        self._prepare()

    @classmethod
    async def open(cls: type[RepositoryT], db: DatabaseSessionManager) -> RepositoryT:
        """Ensure the schema exists, prepare statements, register release."""
        await db.create_tables(cls.table)
        repo = cls(db)
        db.register_release(repo.release)
        logger.info(
            f"Repository ready for {cls.table.name}",
            extra={"resource": cls.table.name},
        )
        return repo

    @abstractmethod
    def _prepare(self) -> None:
        """Build the statement constructs used by this repository."""

    def _require_open(self, operation: str) -> None:
        if self._released:
            raise DatabaseError(
                f"{self.table.name} repository already released", operation,
            )

    @property
    def released(self) -> bool:
        return self._released

    def release(self) -> None:
        """Drop prepared statements. Safe to call more than once."""
        if self._released:
            return
        self._released = True
        for name in list(vars(self)):
            if name.endswith("_stmt"):
                setattr(self, name, None)
        logger.debug(f"Released {self.table.name} statements")
