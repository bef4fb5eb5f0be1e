"""Apply Alembic migrations to the configured database."""
from __future__ import annotations

import logging
from pathlib import Path

from alembic import command
from alembic.config import Config
from sqlalchemy.engine import Connection

from pager_admin.core.settings import settings

logger = logging.getLogger(__name__)

MIGRATIONS_DIR = Path(__file__).resolve().parents[3] / "migrations"


def build_config(database_url: str | None = None, connection: Connection | None = None) -> Config:
    """Return an Alembic config for the project's migrations folder.

    When ``connection`` is given the migrations run on it instead of opening
    a new engine.
    """
    cfg = Config()
    cfg.set_main_option("script_location", str(MIGRATIONS_DIR))
    cfg.set_main_option("sqlalchemy.url", database_url or settings.database_url_sync)
    if connection is not None:
        cfg.attributes["connection"] = connection
    return cfg


def run_upgrade_head(database_url: str | None = None, connection: Connection | None = None) -> None:
    logger.info("Upgrading database schema to head")
    command.upgrade(build_config(database_url, connection), "head")


if __name__ == "__main__":
    logging.basicConfig(level=settings.log_level.upper())
    run_upgrade_head()
