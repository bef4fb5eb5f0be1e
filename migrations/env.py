"""Alembic entry point for the Pager Admin schema.

``scripts.migrate`` may hand over an open connection through
``config.attributes["connection"]``; otherwise an engine is built from
``sqlalchemy.url`` or, failing that, from application settings.
"""
from __future__ import annotations

import sys
from pathlib import Path

from alembic import context
from sqlalchemy import create_engine, pool
from sqlalchemy.engine import Connection

sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "src"))

from pager_admin.core.settings import settings  # noqa: E402
from pager_admin.db.session import Base  # noqa: E402

config = context.config
target_metadata = Base.metadata


def _database_url() -> str:
    return config.get_main_option("sqlalchemy.url") or settings.database_url_sync


def _configure(*, sqlite: bool, **kwargs) -> None:
    context.configure(
        target_metadata=target_metadata,
        compare_type=True,
        render_as_batch=sqlite,
        **kwargs,
    )


def _migrate(connection: Connection) -> None:
    _configure(sqlite=connection.dialect.name == "sqlite", connection=connection)
    with context.begin_transaction():
        context.run_migrations()


if context.is_offline_mode():
    url = _database_url()
    _configure(sqlite=url.startswith("sqlite"), url=url, literal_binds=True, dialect_opts={"paramstyle": "named"})
    with context.begin_transaction():
        context.run_migrations()
else:
    shared = config.attributes.get("connection")
    if shared is not None:
        _migrate(shared)
    else:
        with create_engine(_database_url(), poolclass=pool.NullPool).connect() as connection:
            _migrate(connection)
