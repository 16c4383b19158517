"""Health Routes — liveness and task-store readiness.

Invariants:
    - GET /health/ answers 200 while the process is up and names the mounted API prefix
    - GET /health/ready answers 200 only when the database responds AND the tasks table is queryable
    - Not-ready responses are 503 with a machine-readable reason
"""

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from task_api import __version__
from task_api.config import Settings, get_settings
from task_api.core.errors import DatabaseError
from task_api.db.task_repository import TaskRepository
from task_api.infrastructure import database

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/health", tags=["health"])


def _not_ready(reason: str) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"status": "not_ready", "reason": reason},
    )


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check(settings: Settings = Depends(get_settings)):
    return {
        "status": "healthy",
        "service": "task-api",
        "version": __version__,
        "api": settings.api_prefix,
    }


@router.get("/ready")
async def readiness_check():
    """Ready once SELECT 1 succeeds and the tasks table can be counted."""
    manager = database.db_manager
    if manager is None or not await manager.health_check():
        return _not_ready("database_unavailable")
    try:
        async with manager.session() as db:
            total = await TaskRepository(db).count()
    except DatabaseError as e:
        logger.warning(f"Tasks table not queryable: {e.message}")
        return _not_ready("tasks_table_unavailable")
    return {
        "status": "ready",
        "checks": {"database": "healthy", "tasks": total},
    }
