"""Data access helpers for administrator groups."""
from __future__ import annotations

from collections.abc import Iterable

from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload

from pager_admin.models.dispatcher import AdminGroup

__all__ = ["AdminGroupRepository"]


class AdminGroupRepository:
    """Thin wrapper around database access for administrator groups."""

    def __init__(self, session: Session) -> None:
        """Initialize the repository with a SQLAlchemy session."""
        self.session = session

    def list_after(self, enterprise_id: int, last_id: int) -> Iterable[AdminGroup]:
        """Return the enterprise's groups with ``id > last_id`` in ascending order."""
        stmt = (
            select(AdminGroup)
            .execution_options(populate_existing=True)
            .options(selectinload(AdminGroup.members))
            .where(AdminGroup.enterprise_id == enterprise_id, AdminGroup.id > last_id)
            .order_by(AdminGroup.id)
        )
        return self.session.execute(stmt).scalars()

    def get(self, enterprise_id: int, group_id: int) -> AdminGroup | None:
        stmt = (
            select(AdminGroup)
            .execution_options(populate_existing=True)
            .options(selectinload(AdminGroup.members))
            .where(AdminGroup.enterprise_id == enterprise_id, AdminGroup.id == group_id)
        )
        return self.session.execute(stmt).scalars().first()

    def add(self, group: AdminGroup) -> AdminGroup:
        self.session.add(group)
        self.session.flush()
        return group

    def delete(self, group: AdminGroup) -> None:
        self.session.delete(group)
        self.session.flush()

    def ids_in_enterprise(self, enterprise_id: int, group_ids: Iterable[int]) -> set[int]:
        """Return the subset of ``group_ids`` belonging to the enterprise."""
        wanted = set(group_ids)
        if not wanted:
            return set()
        stmt = select(AdminGroup.id).where(
            AdminGroup.enterprise_id == enterprise_id,
            AdminGroup.id.in_(wanted),
        )
        return set(self.session.execute(stmt).scalars())
