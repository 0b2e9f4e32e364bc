"""Database Session Manager — async SQLite engine with rollback, error mapping and scoped release.

Invariants:
    - Every session auto-rolls-back on exception (no partial commits leak)
    - All SQLAlchemy exceptions mapped to DatabaseError (core/errors.py)
    - UNIQUE violations become UniqueConstraintError carrying table and columns
    - close() is idempotent: release callbacks run exactly once, then the engine is disposed

Design Decisions:
    - Manager is injected (owned by the application lifespan), not a module singleton
    - UNIQUE detection keys on sqlite3's structured error name
      (SQLITE_CONSTRAINT_UNIQUE); the "UNIQUE constraint failed: t.c" message
      is parsed for table/columns and is the only signal on interpreters that
      expose no error name
    - expire_on_commit=False: rows are read into schemas before the session closes
"""

import logging
import re
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Callable

from sqlalchemy import Table, text
from sqlalchemy.exc import (
    IntegrityError, OperationalError, DBAPIError, SQLAlchemyError,
)
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)

from mazealarm.core.errors import DatabaseError, UniqueConstraintError
from mazealarm.db.base import Base

logger = logging.getLogger(__name__)

SQLITE_UNIQUE_ERROR_NAME = "SQLITE_CONSTRAINT_UNIQUE"
_UNIQUE_DETAIL = re.compile(r"UNIQUE constraint failed: (?P<targets>.+)$")


def classify_integrity_error(exc: IntegrityError) -> DatabaseError:
    """Map a driver IntegrityError to UniqueConstraintError or a generic DatabaseError."""
    driver_error = exc.orig
    error_name = getattr(driver_error, "sqlite_errorname", None)
    detail = str(driver_error) if driver_error is not None else str(exc)
    match = _UNIQUE_DETAIL.search(detail)

    if error_name is not None and error_name != SQLITE_UNIQUE_ERROR_NAME:
        return DatabaseError("Integrity constraint violated", "commit")
    if error_name is None and match is None:
        return DatabaseError("Integrity constraint violated", "commit")

    table = None
    columns: list[str] = []
    if match:
        for target in match.group("targets").split(","):
            owner, _, column = target.strip().rpartition(".")
            table = owner or table
            columns.append(column)
    return UniqueConstraintError(table, tuple(columns))


class DatabaseSessionManager:
    """Owns the engine; hands out sessions and releases dependents once on close."""

    def __init__(self, database_url: str, echo: bool = False):
        self.engine = create_async_engine(database_url, echo=echo)
        self._session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )
        self._release_callbacks: list[Callable[[], None]] = []
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Provide session with auto-rollback on exception."""
        if self._closed:
            raise DatabaseError("Database handle already released", "session")
        session = self._session_factory()
        try:
            yield session
        except IntegrityError as e:
            await session.rollback()
            logger.error(f"DB integrity error: {e}")
            raise classify_integrity_error(e) from e
        except OperationalError as e:
            await session.rollback()
            logger.error(f"DB operational error: {e}")
            raise DatabaseError("Connection or operational error", "execute") from e
        except DBAPIError as e:
            await session.rollback()
            logger.error(f"DB driver error: {e}")
            raise DatabaseError("Database driver error", "query") from e
        except SQLAlchemyError as e:
            await session.rollback()
            logger.error(f"SQLAlchemy error: {e}")
            raise DatabaseError("Database operation failed", "unknown") from e
        finally:
            await session.close()

    async def create_tables(self, *tables: Table) -> None:
        """Create the given tables and their indexes if they do not exist yet."""
        try:
            async with self.engine.begin() as conn:
                await conn.run_sync(
                    Base.metadata.create_all, tables=list(tables), checkfirst=True,
                )
        except SQLAlchemyError as e:
            logger.error(f"Schema creation failed: {e}")
            raise DatabaseError("Schema creation failed", "create_tables") from e

    def register_release(self, callback: Callable[[], None]) -> None:
        """Run callback once when the manager closes."""
        self._release_callbacks.append(callback)

    async def health_check(self) -> bool:
        """Check database connectivity (for readiness probes)."""
        try:
            async with self.session() as db:
                await db.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.error(f"DB health check failed: {e}")
            return False

    async def close(self) -> None:
        """Release registered dependents, then dispose the engine. Idempotent."""
        if self._closed:
            return
        self._closed = True
        callbacks, self._release_callbacks = self._release_callbacks, []
        for callback in reversed(callbacks):
            callback()
        await self.engine.dispose()
        logger.info("Database handle released")
