"""Alembic environment — applies the `tasks` schema with the app's own async driver.

The URL comes from Settings when DATABASE_URL is set (same postgresql:// →
postgresql+asyncpg:// rewrite as the running API), otherwise from alembic.ini.
Offline mode renders the SQL for a DBA to apply by hand.
"""

import asyncio
import os
from logging.config import fileConfig

from sqlalchemy import pool
from sqlalchemy.ext.asyncio import create_async_engine

from alembic import context

from task_api.config import Settings
from task_api.models.task import Task

config = context.config
if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Task.metadata


def _url() -> str:
    if os.environ.get("DATABASE_URL"):
        return Settings().database_url
    return config.get_main_option("sqlalchemy.url")


def _apply(connection) -> None:
    context.configure(connection=connection, target_metadata=target_metadata)
    with context.begin_transaction():
        context.run_migrations()


async def _apply_online() -> None:
    engine = create_async_engine(_url(), poolclass=pool.NullPool)
    async with engine.connect() as connection:
        await connection.run_sync(_apply)
    await engine.dispose()


if context.is_offline_mode():
    context.configure(url=_url(), target_metadata=target_metadata, literal_binds=True)
    with context.begin_transaction():
        context.run_migrations()
else:
    asyncio.run(_apply_online())
