# tests/test_migrations.py
"""The Alembic history must build the same tables the models declare."""
from __future__ import annotations

from sqlalchemy import create_engine, inspect
from sqlalchemy.pool import StaticPool

from pager_admin.db.session import Base
from pager_admin.scripts.migrate import run_upgrade_head


def test_upgrade_head_creates_model_tables() -> None:
    engine = create_engine("sqlite://", poolclass=StaticPool)
    try:
        with engine.begin() as connection:
            run_upgrade_head(connection=connection)
            inspector = inspect(connection)
            tables = set(inspector.get_table_names()) - {"alembic_version"}
            assert tables == set(Base.metadata.tables)
            for table in Base.metadata.sorted_tables:
                columns = {column["name"] for column in inspector.get_columns(table.name)}
                assert columns == set(table.columns.keys()), table.name
    finally:
        engine.dispose()
