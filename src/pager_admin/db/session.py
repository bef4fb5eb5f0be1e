"""Engine and session factory for the Pager Admin database."""

from __future__ import annotations

from collections.abc import Generator, Iterator
from contextlib import contextmanager
from typing import Any

from sqlalchemy import create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from pager_admin.core.settings import settings


class Base(DeclarativeBase):
    """Declarative base for every table of the admin schema."""


# Model modules register their tables on Base.metadata when imported.
import pager_admin.models  # noqa: E402,F401


def engine_options(url: str) -> dict[str, Any]:
    """Return ``create_engine`` keyword arguments suited to ``url``'s backend."""
    options: dict[str, Any] = {"echo": settings.sql_debug}
    if make_url(url).get_backend_name() == "sqlite":
        # Request handlers and the CLI may touch the connection from other threads.
        options["connect_args"] = {"check_same_thread": False}
    else:
        options["pool_pre_ping"] = True
    return options


engine = create_engine(settings.effective_database_url, **engine_options(settings.effective_database_url))

SessionLocal = sessionmaker(bind=engine, autoflush=False)


def get_db() -> Generator[Session, None, None]:
    """FastAPI dependency yielding one session per request."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def session_scope() -> Iterator[Session]:
    """Session for scripts: rolled back if the block raises, always closed."""
    db = SessionLocal()
    try:
        yield db
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()
