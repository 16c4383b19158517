"""Route Dependencies — wires request-scoped sessions into repositories."""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from task_api.db.task_repository import TaskRepository
from task_api.infrastructure.database import get_db


async def get_task_repository(
    db: AsyncSession = Depends(get_db),
) -> TaskRepository:
    """FastAPI dependency: TaskRepository bound to this request's session."""
    return TaskRepository(db)
