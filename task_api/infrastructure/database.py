"""Task Database — async engine, request sessions and SQLAlchemy → DatabaseError mapping.

Invariants:
    - A failing task statement rolls the session back before DatabaseError is raised
    - DatabaseError.operation names the SQL verb that failed (select, insert, update, delete)
    - The task id a repository was working on travels in the error context
    - Sessions are always closed, success or failure

Design Decisions:
    - Task statements can only fail on the driver side (connection loss, bad
      parameter, missing table): one DBAPIError branch covers them; anything
      else from SQLAlchemy is a session-level failure
    - Repositories record the current id in session.info["task_id"] so the
      mapping can report it without knowing about repositories
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.exc import DBAPIError, OperationalError, SQLAlchemyError
from sqlalchemy import text

from task_api.core.errors import DatabaseError, ErrorContext

logger = logging.getLogger(__name__)

TASK_ID_KEY = "task_id"


def statement_verb(statement: str | None) -> str:
    """First SQL keyword of a statement, lower-cased ("query" when unknown)."""
    if not statement:
        return "query"
    return statement.lstrip().split(None, 1)[0].lower()


class DatabaseSessionManager:
    """Owns the async engine and hands out task sessions."""

    def __init__(
        self, database_url: str, pool_size: int = 20, max_overflow: int = 10,
    ):
        self.engine = create_async_engine(
            database_url,
            pool_size=pool_size,
            max_overflow=max_overflow,
            pool_pre_ping=True,
            pool_recycle=3600,
        )
        self._session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        session = self._session_factory()
        try:
            yield session
        except DBAPIError as e:
            reason = (
                "database unavailable" if isinstance(e, OperationalError)
                else "statement rejected"
            )
            raise await _rollback_and_wrap(
                session, e, reason, statement_verb(e.statement),
            )
        except SQLAlchemyError as e:
            raise await _rollback_and_wrap(
                session, e, "session error", "session",
            )
        finally:
            await session.close()

    async def health_check(self) -> bool:
        """True when the database answers SELECT 1."""
        try:
            async with self.session() as db:
                await db.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.error(f"DB health check failed: {e}")
            return False

    async def close(self) -> None:
        await self.engine.dispose()


async def _rollback_and_wrap(
    session: AsyncSession, exc: SQLAlchemyError, reason: str, operation: str,
) -> DatabaseError:
    await session.rollback()
    task_id = session.info.get(TASK_ID_KEY)
    logger.error(
        f"Task {operation} failed: {exc}",
        extra={"task_id": task_id, "error_code": "DATABASE_ERROR"},
    )
    context = ErrorContext(
        task_id=task_id,
        debug_info={"operation": operation, "driver_error": type(exc).__name__},
    )
    return DatabaseError(reason, operation, context)


# Set by the FastAPI lifespan
db_manager: DatabaseSessionManager | None = None


def init_db(database_url: str, **kwargs) -> DatabaseSessionManager:
    global db_manager
    db_manager = DatabaseSessionManager(database_url, **kwargs)
    return db_manager


async def close_db() -> None:
    global db_manager
    if db_manager:
        await db_manager.close()
        db_manager = None


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency: one session per request."""
    if not db_manager:
        raise RuntimeError("Database not initialized")
    async with db_manager.session() as session:
        yield session
