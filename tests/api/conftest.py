"""Route test fixtures — async DB + FastAPI test client.

Invariants:
    - get_db dependency overridden to use test DB session
    - db_manager patched so readiness checks see the test engine
"""

from datetime import datetime, timezone

import pytest
from httpx import ASGITransport, AsyncClient

from task_api.infrastructure.database import get_db, DatabaseSessionManager
from task_api.models.task import Task
import task_api.infrastructure.database as db_module
from task_api.main import app


@pytest.fixture
def fake_manager(test_engine, test_session_factory):
    manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    manager.engine = test_engine
    manager._session_factory = test_session_factory
    return manager


@pytest.fixture
async def client(fake_manager):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with fake_manager.session() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
async def seed_task(test_db):
    """Insert one task directly into the test DB."""
    task = Task(
        descripcion="Comprar pan",
        observacion="Integral",
        is_finalizada=False,
        registration_date=datetime(2026, 1, 15, 9, 30, tzinfo=timezone.utc),
    )
    test_db.add(task)
    await test_db.commit()
    await test_db.refresh(task)
    return task
