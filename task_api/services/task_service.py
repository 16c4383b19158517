"""Task Service — use cases for listing, reading, creating, updating and deleting tasks.

Invariants:
    - create_task rejects a missing or blank descripcion (TaskValidationError, 422)
    - update_task and delete_task raise TaskNotFoundError (404) for unknown ids
    - update_task rejects an explicitly blank descripcion (422); None means "keep"
    - update_task merges provided fields over the stored row; omitted fields survive
    - registration_date is stamped here, in UTC, once
"""

import logging
from datetime import datetime, timezone
from typing import Any, Mapping, Sequence

from task_api.core.domain_types import TaskId
from task_api.core.errors import TaskNotFoundError, TaskValidationError
from task_api.core.repository_protocols import TaskLike, TaskRepository
from task_api.core.task_fields import (
    build_new_task, is_blank, merge_task_update, task_to_fields,
)

logger = logging.getLogger(__name__)


async def get_tasks(repo: TaskRepository) -> Sequence[TaskLike]:
    return await repo.select_all()


async def get_task(repo: TaskRepository, task_id: TaskId) -> TaskLike | None:
    """Fetch one task; None when no row matches."""
    task = await repo.select_by_id(task_id)
    if not task:
        return None
    return task


async def create_task(repo: TaskRepository, task_data: Mapping[str, Any]) -> TaskId:
    """Validate, coerce and insert a task. Returns the new id."""
    if is_blank(task_data.get("descripcion")):
        raise TaskValidationError("descripcion")
    new_task = build_new_task(task_data, now=datetime.now(timezone.utc))
    return await repo.create(new_task)


async def update_task(
    repo: TaskRepository, task_id: TaskId, task_data: Mapping[str, Any],
) -> None:
    """Merge the provided fields into an existing task."""
    task = await get_task(repo, task_id)
    if task is None:
        raise TaskNotFoundError(task_id)
    descripcion = task_data.get("descripcion")
    if descripcion is not None and is_blank(descripcion):
        raise TaskValidationError("descripcion")
    updated = merge_task_update(task_to_fields(task), task_data)
    await repo.update(task_id, updated)


async def delete_task(repo: TaskRepository, task_id: TaskId) -> None:
    task = await get_task(repo, task_id)
    if task is None:
        raise TaskNotFoundError(task_id)
    await repo.delete(task_id)
