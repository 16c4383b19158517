"""Task service — use-case rules against an in-memory fake repository.

Invariants:
    - create_task stamps registration_date and returns the repository id
    - update_task/delete_task raise TaskNotFoundError for unknown ids
    - update_task writes the merged row, not just the changes
"""

from datetime import datetime, timezone
from types import SimpleNamespace

import pytest

from task_api.core.errors import TaskNotFoundError, TaskValidationError
from task_api.services import task_service


class FakeTaskRepository:
    """Dict-backed stand-in satisfying core.repository_protocols.TaskRepository."""

    def __init__(self):
        self.rows: dict[int, SimpleNamespace] = {}
        self.updates: list[tuple[int, dict]] = []
        self.deleted: list[int] = []
        self._next_id = 1

    async def select_all(self):
        return [self.rows[k] for k in sorted(self.rows)]

    async def select_by_id(self, task_id):
        return self.rows.get(task_id)

    async def create(self, fields):
        task_id = self._next_id
        self._next_id += 1
        self.rows[task_id] = SimpleNamespace(id=task_id, **fields)
        return task_id

    async def update(self, task_id, fields):
        self.updates.append((task_id, fields))
        for name, value in fields.items():
            setattr(self.rows[task_id], name, value)

    async def delete(self, task_id):
        self.deleted.append(task_id)
        self.rows.pop(task_id, None)


@pytest.fixture
def repo():
    return FakeTaskRepository()


async def test_create_returns_new_id_and_stamps_date(repo):
    task_id = await task_service.create_task(repo, {"descripcion": "Regar"})
    assert task_id == 1
    row = repo.rows[1]
    assert row.is_finalizada is False
    assert row.registration_date.tzinfo == timezone.utc
    assert (datetime.now(timezone.utc) - row.registration_date).total_seconds() < 5


async def test_create_requires_descripcion(repo):
    with pytest.raises(TaskValidationError):
        await task_service.create_task(repo, {"observacion": "x"})
    assert repo.rows == {}


async def test_get_task_returns_none_for_unknown_id(repo):
    assert await task_service.get_task(repo, 42) is None


async def test_get_tasks_lists_in_id_order(repo):
    await task_service.create_task(repo, {"descripcion": "b"})
    await task_service.create_task(repo, {"descripcion": "a"})
    tasks = await task_service.get_tasks(repo)
    assert [t.id for t in tasks] == [1, 2]


async def test_update_writes_merged_fields(repo):
    await task_service.create_task(
        repo, {"descripcion": "d", "observacion": "o"},
    )
    await task_service.update_task(repo, 1, {"is_finalizada": True})
    assert repo.updates == [
        (1, {"descripcion": "d", "observacion": "o", "is_finalizada": True}),
    ]


async def test_update_unknown_raises_not_found(repo):
    with pytest.raises(TaskNotFoundError) as exc_info:
        await task_service.update_task(repo, 9, {"descripcion": "x"})
    assert exc_info.value.task_id == 9
    assert repo.updates == []


async def test_update_rejects_blank_descripcion(repo):
    await task_service.create_task(repo, {"descripcion": "d"})
    with pytest.raises(TaskValidationError):
        await task_service.update_task(repo, 1, {"descripcion": " "})


async def test_delete_existing_task(repo):
    await task_service.create_task(repo, {"descripcion": "d"})
    await task_service.delete_task(repo, 1)
    assert repo.deleted == [1]
    assert repo.rows == {}


async def test_delete_unknown_raises_not_found(repo):
    with pytest.raises(TaskNotFoundError):
        await task_service.delete_task(repo, 3)
    assert repo.deleted == []
