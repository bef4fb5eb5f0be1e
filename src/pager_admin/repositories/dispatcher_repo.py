"""Data access helpers for administrators."""
from __future__ import annotations

from collections.abc import Iterable

from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload

from pager_admin.models.dispatcher import Dispatcher

__all__ = ["DispatcherRepository"]


class DispatcherRepository:
    """Thin wrapper around database access for dispatcher entities."""

    def __init__(self, session: Session) -> None:
        """Initialize the repository with a SQLAlchemy session."""
        self.session = session

    def _visible(self, enterprise_id: int):
        return (
            select(Dispatcher)
            .execution_options(populate_existing=True)
            .options(selectinload(Dispatcher.group_links))
            .where(
                Dispatcher.enterprise_id == enterprise_id,
                Dispatcher.active.is_(True),
                Dispatcher.deleted.is_(False),
            )
        )

    def list_after(self, enterprise_id: int, last_id: int) -> Iterable[Dispatcher]:
        """Return active administrators with ``id > last_id`` in ascending order."""
        stmt = self._visible(enterprise_id).where(Dispatcher.id > last_id).order_by(Dispatcher.id)
        return self.session.execute(stmt).scalars()

    def get_active(self, enterprise_id: int, dispatcher_id: int) -> Dispatcher | None:
        """Return an active, non-deleted administrator of the enterprise."""
        stmt = self._visible(enterprise_id).where(Dispatcher.id == dispatcher_id)
        return self.session.execute(stmt).scalars().first()

    def get(self, enterprise_id: int, dispatcher_id: int) -> Dispatcher | None:
        """Return an administrator of the enterprise regardless of state."""
        stmt = select(Dispatcher).where(
            Dispatcher.enterprise_id == enterprise_id,
            Dispatcher.id == dispatcher_id,
        )
        return self.session.execute(stmt).scalars().first()

    def get_by_email(self, email: str) -> Dispatcher | None:
        stmt = select(Dispatcher).where(Dispatcher.email == email)
        return self.session.execute(stmt).scalars().first()

    def ids_in_enterprise(self, enterprise_id: int, dispatcher_ids: Iterable[int]) -> set[int]:
        """Return the subset of ``dispatcher_ids`` belonging to the enterprise."""
        wanted = set(dispatcher_ids)
        if not wanted:
            return set()
        stmt = select(Dispatcher.id).where(
            Dispatcher.enterprise_id == enterprise_id,
            Dispatcher.id.in_(wanted),
        )
        return set(self.session.execute(stmt).scalars())

    def add(self, dispatcher: Dispatcher) -> Dispatcher:
        self.session.add(dispatcher)
        self.session.flush()
        return dispatcher
