"""Task Routes — list, detail, create, update and delete for /task.

Invariants:
    - A missing body on POST/PUT is InvalidTaskDataError (400), raised before any DB access
    - Ids outside 1..MAX_TASK_ID fail path validation (400) and never reach the database
    - Every by-id route answers 404 for unknown ids (via the service)
    - Handlers never touch the session; they talk to TaskRepository through task_service
"""

import logging

from fastapi import APIRouter, Depends, Path, status

from task_api.api.dependencies import get_task_repository
from task_api.core.domain_types import MAX_TASK_ID, TaskId
from task_api.core.errors import InvalidTaskDataError, TaskNotFoundError
from task_api.db.task_repository import TaskRepository
from task_api.schemas.task import (
    MessageResponse, TaskCreate, TaskCreatedResponse, TaskResponse, TaskUpdate,
)
from task_api.services import task_service

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/task", tags=["tasks"])


@router.get("", response_model=list[TaskResponse])
async def list_tasks(repo: TaskRepository = Depends(get_task_repository)):
    """All tasks, ordered by id."""
    return await task_service.get_tasks(repo)


@router.get("/{task_id}", response_model=TaskResponse)
async def get_task_details(
    task_id: int = Path(ge=1, le=MAX_TASK_ID),
    repo: TaskRepository = Depends(get_task_repository),
):
    task = await task_service.get_task(repo, TaskId(task_id))
    if task is None:
        raise TaskNotFoundError(task_id)
    return task


@router.post(
    "", response_model=TaskCreatedResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_task(
    body: TaskCreate | None = None,
    repo: TaskRepository = Depends(get_task_repository),
):
    """Create a task. descripcion is required."""
    if body is None:
        raise InvalidTaskDataError()
    task_id = await task_service.create_task(repo, body.model_dump())
    return TaskCreatedResponse(taskId=task_id)


@router.put("/{task_id}", response_model=MessageResponse)
async def update_task(
    task_id: int = Path(ge=1, le=MAX_TASK_ID),
    body: TaskUpdate | None = None,
    repo: TaskRepository = Depends(get_task_repository),
):
    """Update a task. Omitted fields keep their stored value."""
    if body is None:
        raise InvalidTaskDataError()
    await task_service.update_task(
        repo, TaskId(task_id), body.model_dump(exclude_unset=True),
    )
    return MessageResponse(msg="Task updated")


@router.delete("/{task_id}", response_model=MessageResponse)
async def delete_task(
    task_id: int = Path(ge=1, le=MAX_TASK_ID),
    repo: TaskRepository = Depends(get_task_repository),
):
    await task_service.delete_task(repo, TaskId(task_id))
    return MessageResponse(msg="Task deleted")
