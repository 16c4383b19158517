"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell: dependency arrows point inward only
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, test fakes need no inheritance
    - Async in Protocol: implementations do IO
"""

from datetime import datetime
from typing import Protocol, Sequence

from task_api.core.domain_types import TaskId


class TaskLike(Protocol):
    """Structural contract for task rows handed back by a repository."""
    id: int
    descripcion: str
    observacion: str | None
    is_finalizada: bool
    registration_date: datetime


class TaskRepository(Protocol):
    """Contract for task persistence: implemented by db/task_repository.py."""
    async def select_all(self) -> Sequence[TaskLike]: ...
    async def select_by_id(self, task_id: TaskId) -> TaskLike | None: ...
    async def create(self, fields: dict) -> TaskId: ...
    async def update(self, task_id: TaskId, fields: dict) -> None: ...
    async def delete(self, task_id: TaskId) -> None: ...
