"""Error Handlers — global exception handlers for the Maze Alarm API.

Invariants:
    - MazeAlarmError → its http_status with {"error": "<message>"}
    - RequestValidationError (malformed JSON, wrong field types) → 400 fixed invalid-input message
    - HTTPException (auth, unknown route, wrong method) → its status with {"error": detail}
    - Exception (catch-all) → 500, never leaks internal details

Design Decisions:
    - 4xx logged at warning/info, 5xx at error with the underlying cause
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from mazealarm.core.errors import (
    INTERNAL_ERROR_MESSAGE, MalformedRequestError, MazeAlarmError,
)

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_maze_alarm_error_handler(app)
    _register_validation_error_handler(app)
    _register_http_exception_handler(app)
    _register_generic_error_handler(app)


def _register_maze_alarm_error_handler(app: FastAPI) -> None:

    @app.exception_handler(MazeAlarmError)
    async def maze_alarm_error_handler(request: Request, exc: MazeAlarmError):
        extra = {
            "error_code": exc.code,
            "path": request.url.path,
            "resource": exc.context.resource,
            "record_id": exc.context.record_id,
            "device_id": exc.context.device_id,
        }
        if exc.is_client_error:
            logger.info(f"{exc.code}: {exc.message}", extra=extra)
        else:
            logger.error(
                f"{exc.code}: {exc.message} (cause: {exc.__cause__!r})", extra=extra,
            )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Undecodable request → fixed invalid-input body; rule text is never shown here."""
        logger.warning(
            f"Malformed request on {request.url.path}: {exc.errors()}",
        )
        error = MalformedRequestError()
        return JSONResponse(
            status_code=error.http_status, content=error.to_response(),
        )


def _register_http_exception_handler(app: FastAPI) -> None:

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request, exc: StarletteHTTPException,
    ):
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
            headers=getattr(exc, "headers", None),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": INTERNAL_ERROR_MESSAGE},
        )
