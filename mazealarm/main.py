"""Maze Alarm API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map MazeAlarmError → {"error": ...} responses
    - CORS configured from settings (not hardcoded)
    - Database handle and services built on startup via the lifespan context
      manager; the handle (and every repository on it) is released on shutdown

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Services stored on app.state and injected through api/dependencies.py
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from mazealarm.api.error_handlers import register_error_handlers
from mazealarm.api.preflight import preflight_middleware
from mazealarm.api.routes import device_config, health, maze_device_status
from mazealarm.config import get_settings
from mazealarm.infrastructure.database import DatabaseSessionManager
from mazealarm.infrastructure.observability import setup_logging
from mazealarm.services.factory import open_services

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    db_manager = DatabaseSessionManager(settings.database_url)
    try:
        services = await open_services(db_manager)
        app.state.db_manager = db_manager
        app.state.device_config_service = services.device_config
        app.state.maze_device_status_service = services.maze_device_status
        logger.info("Maze Alarm API started")
        yield
        logger.info("Maze Alarm API shutting down")
    finally:
        await db_manager.close()


app = FastAPI(
    title="Maze Alarm API", version="1.0.0", lifespan=lifespan,
)

# Preflight first so CORSMiddleware (added last, outermost) sees requests before it
app.middleware("http")(preflight_middleware)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(device_config.router)
app.include_router(maze_device_status.router)

register_error_handlers(app)
