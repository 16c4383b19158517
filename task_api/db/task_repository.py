"""Task Repository — parameterized SQL statements against the `tasks` table.

Invariants:
    - Every statement uses bound parameters (SQLAlchemy expression language)
    - Writes commit the session they were given
    - update() never touches id or registration_date
    - Id-keyed statements record the id in session.info for error reporting

Design Decisions:
    - INSERT goes through the unit of work (add + flush) so the serial id is read back
      portably; UPDATE and DELETE are single bulk statements keyed on id
"""

import logging
from typing import Sequence

from sqlalchemy import select, update, delete, func
from sqlalchemy.ext.asyncio import AsyncSession

from task_api.core.domain_types import EDITABLE_FIELDS, TaskId
from task_api.infrastructure.database import TASK_ID_KEY
from task_api.models.task import Task

logger = logging.getLogger(__name__)


class TaskRepository:
    """SQLAlchemy implementation of core.repository_protocols.TaskRepository."""

    def __init__(self, db: AsyncSession):
        self.db = db

    def _track(self, task_id: TaskId) -> None:
        # read back by the session manager when a statement fails
        self.db.info[TASK_ID_KEY] = task_id

    async def select_all(self) -> Sequence[Task]:
        """SELECT * FROM tasks ORDER BY id."""
        result = await self.db.execute(select(Task).order_by(Task.id))
        return result.scalars().all()

    async def count(self) -> int:
        """SELECT count(*) FROM tasks."""
        result = await self.db.execute(select(func.count()).select_from(Task))
        return result.scalar_one()

    async def select_by_id(self, task_id: TaskId) -> Task | None:
        self._track(task_id)
        result = await self.db.execute(
            select(Task).where(Task.id == task_id),
        )
        return result.scalar_one_or_none()

    async def create(self, fields: dict) -> TaskId:
        """INSERT a task and return the id assigned by the database."""
        task = Task(
            descripcion=fields["descripcion"],
            observacion=fields.get("observacion"),
            is_finalizada=fields.get("is_finalizada", False),
            registration_date=fields["registration_date"],
        )
        self.db.add(task)
        await self.db.flush()
        task_id = TaskId(task.id)
        await self.db.commit()
        logger.info(f"Task {task_id} created", extra={"task_id": task_id})
        return task_id

    async def update(self, task_id: TaskId, fields: dict) -> None:
        self._track(task_id)
        values = {k: v for k, v in fields.items() if k in EDITABLE_FIELDS}
        if not values:
            return
        await self.db.execute(
            update(Task).where(Task.id == task_id).values(**values),
        )
        await self.db.commit()
        logger.info(f"Task {task_id} updated", extra={"task_id": task_id})

    async def delete(self, task_id: TaskId) -> None:
        self._track(task_id)
        await self.db.execute(delete(Task).where(Task.id == task_id))
        await self.db.commit()
        logger.info(f"Task {task_id} deleted", extra={"task_id": task_id})
