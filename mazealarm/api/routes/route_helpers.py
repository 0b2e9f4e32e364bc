"""Route Helpers — request deadline, identity parsing and lenient query parsing shared by resource routes.

Invariants:
    - Every service call runs under REQUEST_DEADLINE_SECONDS
    - MazeAlarmError propagates unchanged to the global handlers
    - Any other failure (deadline expiry included) is logged here and becomes
      ServiceCallError (500); the client never sees its details
    - Integers are ASCII decimal with an optional sign and must fit 64 bits
    - Unparsable pagination input coerces to 0; unparsable identities are rejected
"""

import asyncio
import logging
import re
from typing import Awaitable, TypeVar

from mazealarm.core.errors import (
    ErrorContext, InvalidIdentifierError, MazeAlarmError, ServiceCallError,
)
from mazealarm.schemas.device import INT64_MAX, INT64_MIN

logger = logging.getLogger(__name__)

REQUEST_DEADLINE_SECONDS = 2.0

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")

T = TypeVar("T")


async def call_service(
    awaitable: Awaitable[T], operation: str, resource: str,
    context: ErrorContext | None = None,
) -> T:
    """Await a service call under the request deadline."""
    try:
        return await asyncio.wait_for(awaitable, REQUEST_DEADLINE_SECONDS)
    except MazeAlarmError:
        raise
    except Exception as e:
        logger.error(
            f"Error during {operation}: {e!r}",
            extra={"resource": resource, "operation": operation},
            exc_info=not isinstance(e, TimeoutError),
        )
        raise ServiceCallError(operation, context) from e


def _parse_int64(raw: str) -> int | None:
    """Decimal integer with optional sign, within SQLite's INTEGER range."""
    if not _INTEGER_PATTERN.fullmatch(raw):
        return None
    value = int(raw)
    if not INT64_MIN <= value <= INT64_MAX:
        return None
    return value


def parse_record_id(raw: str) -> int:
    """Parse a path identity segment or raise InvalidIdentifierError."""
    value = _parse_int64(raw)
    if value is None:
        raise InvalidIdentifierError(raw)
    return value


def parse_int_or_zero(raw: str | None) -> int:
    """Parse a pagination parameter; anything unparsable means 0."""
    if raw is None:
        return 0
    value = _parse_int64(raw)
    return 0 if value is None else value
