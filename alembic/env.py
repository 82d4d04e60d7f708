"""Alembic migrations for the rental schema.

The target database is ``settings.database_url`` (DATABASE_URL), the same
URL the API uses, so alembic.ini carries no connection string. Both
drivers the service supports are async (asyncpg, aiosqlite); online
migrations open an async engine and run the sync migration context on its
connection.

    alembic upgrade head                  # apply
    alembic revision --autogenerate -m …  # diff models against the database
"""

import asyncio
from logging.config import fileConfig

from sqlalchemy import pool
from sqlalchemy.engine import Connection
from sqlalchemy.ext.asyncio import create_async_engine

from alembic import context
from src.core.config import settings
from src.infrastructure.persistence import BaseModel

# Importing the package registers equipment, members, rentals,
# reservations and damage_assessments on BaseModel.metadata.
import src.infrastructure.persistence.models  # noqa: E402, F401

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = BaseModel.metadata


def _configure(**options) -> None:
    context.configure(
        target_metadata=target_metadata,
        compare_type=True,
        **options,
    )


def emit_sql() -> None:
    """Write migration SQL to stdout (``alembic upgrade head --sql``)."""
    _configure(
        url=settings.database_url,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )
    with context.begin_transaction():
        context.run_migrations()


def _migrate(connection: Connection) -> None:
    # SQLite cannot ALTER most constraints in place; batch mode rebuilds tables.
    _configure(
        connection=connection,
        render_as_batch=connection.dialect.name == "sqlite",
    )
    with context.begin_transaction():
        context.run_migrations()


async def migrate_database() -> None:
    engine = create_async_engine(settings.database_url, poolclass=pool.NullPool)
    try:
        async with engine.connect() as connection:
            await connection.run_sync(_migrate)
    finally:
        await engine.dispose()


if context.is_offline_mode():
    emit_sql()
else:
    asyncio.run(migrate_database())
