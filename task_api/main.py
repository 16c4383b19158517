"""Task API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Versioned routers mounted under settings.api_prefix (route_prefix + route_version)
    - Global error handlers map TaskApiError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database initialized on startup and disposed on shutdown via lifespan

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from task_api.api.error_handlers import register_error_handlers
from task_api.api.middleware import register_request_counter
from task_api.api.routes import greeting, health, tasks
from task_api import __version__
from task_api.config import get_settings
from task_api.infrastructure.database import close_db, init_db
from task_api.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    logger.info(f"Task API listening on port {settings.port}")
    yield
    await close_db()
    logger.info("Task API shutting down")


def create_app() -> FastAPI:
    settings = get_settings()
    app = FastAPI(title="Task API", version=__version__, lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_request_counter(app)

    app.include_router(greeting.router)
    app.include_router(health.router, prefix=settings.api_prefix)
    app.include_router(tasks.router, prefix=settings.api_prefix)

    register_error_handlers(app)
    return app


app = create_app()


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    settings = get_settings()
    uvicorn.run(
        "task_api.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
