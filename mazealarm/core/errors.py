"""Error Hierarchy — typed, categorized exceptions for every Maze Alarm failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Client errors (400-level) carry their message to the caller verbatim
    - Infrastructure errors (500-level) never leak details: to_response() renders
      the generic INTERNAL_ERROR_MESSAGE
    - Response body is always the flat envelope {"error": "<message>"}

Design Decisions:
    - Single hierarchy with MazeAlarmError base: FastAPI global handler catches all
    - Validation failures are distinguished by type (ValidationFailedError),
      never by inspecting message text
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone

INTERNAL_ERROR_MESSAGE = "Internal server error."
INVALID_INPUT_MESSAGE = "Invalid request data. Please check your input."


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    MALFORMED_INPUT = "malformed_input"
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    CONFLICT = "conflict"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    resource: str | None = None
    record_id: int | None = None
    device_id: str | None = None
    debug_info: dict[str, Any] | None = None


class MazeAlarmError(Exception):
    """Base exception for all Maze Alarm errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    @property
    def is_client_error(self) -> bool:
        return 400 <= self.http_status < 500

    def to_response(self) -> dict:
        """Convert to the fixed-shape REST error body."""
        if not self.is_client_error:
            return {"error": INTERNAL_ERROR_MESSAGE}
        return {"error": self.message}


# ─── Client Errors (400-level) ──────────────────────────────────

class MalformedRequestError(MazeAlarmError):
    """Request body could not be decoded into the resource."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            INVALID_INPUT_MESSAGE, "INVALID_INPUT", ErrorCategory.MALFORMED_INPUT,
            ErrorSeverity.WARNING, context, 400,
        )


class InvalidIdentifierError(MazeAlarmError):
    """Path identity segment is not an integer."""
    def __init__(self, raw_value: str, context: ErrorContext | None = None):
        super().__init__(
            "Invalid ID format.", "INVALID_ID", ErrorCategory.MALFORMED_INPUT,
            ErrorSeverity.WARNING, context, 400,
        )
        self.raw_value = raw_value


class MissingIdentifierError(MazeAlarmError):
    """Full-replacement update submitted without an identity."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "ID is required for update.", "ID_REQUIRED", ErrorCategory.MALFORMED_INPUT,
            ErrorSeverity.WARNING, context, 400,
        )


class ValidationFailedError(MazeAlarmError):
    """Business-rule validation failed; message names every broken rule."""
    def __init__(
        self, message: str, violations: list[str] | None = None,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )
        self.violations = list(violations or [])


class DeviceConfigError(ValidationFailedError):
    """Device configuration rejected by business rules."""


class MazeDeviceStatusError(ValidationFailedError):
    """Maze device status rejected by business rules."""


class ResourceNotFoundError(MazeAlarmError):
    """Requested record does not exist (absent row or zero rows affected)."""
    def __init__(self, resource_label: str, context: ErrorContext | None = None):
        super().__init__(
            f"{resource_label} not found.",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.INFO, context, 404,
        )
        self.resource_label = resource_label


class DeviceConfigConflictError(MazeAlarmError):
    """A configuration already exists for the submitted device_id."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Device config already exists for this device_id.",
            "DEVICE_CONFIG_CONFLICT", ErrorCategory.CONFLICT,
            ErrorSeverity.WARNING, context, 409,
        )


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(MazeAlarmError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.operation = operation


class UniqueConstraintError(DatabaseError):
    """A UNIQUE constraint rejected the write."""
    def __init__(
        self, table: str | None, columns: tuple[str, ...],
        context: ErrorContext | None = None,
    ):
        target = ", ".join(
            f"{table}.{col}" if table else col for col in columns
        ) or "unknown column"
        super().__init__(
            f"UNIQUE constraint violated on {target}", "commit", context,
        )
        self.table = table
        self.columns = columns

    def violates(self, table: str, column: str) -> bool:
        return self.table == table and column in self.columns


class ServiceCallError(MazeAlarmError):
    """Unclassified failure (including an expired request deadline) at the route boundary."""
    def __init__(self, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"{operation} failed", "INTERNAL_ERROR", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.operation = operation
