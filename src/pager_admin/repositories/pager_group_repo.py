"""Data access helpers for contact groups."""
from __future__ import annotations

from collections.abc import Iterable

from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload

from pager_admin.models.pager_group import PagerGroup

__all__ = ["PagerGroupRepository"]


class PagerGroupRepository:
    """Thin wrapper around database access for contact groups."""

    def __init__(self, session: Session) -> None:
        """Initialize the repository with a SQLAlchemy session."""
        self.session = session

    def list_after(self, enterprise_id: int, last_id: int) -> Iterable[PagerGroup]:
        """Return the enterprise's groups with ``id > last_id`` in ascending order."""
        stmt = (
            select(PagerGroup)
            .execution_options(populate_existing=True)
            .options(selectinload(PagerGroup.members))
            .where(PagerGroup.enterprise_id == enterprise_id, PagerGroup.id > last_id)
            .order_by(PagerGroup.id)
        )
        return self.session.execute(stmt).scalars()

    def get(self, enterprise_id: int, group_id: int) -> PagerGroup | None:
        stmt = (
            select(PagerGroup)
            .execution_options(populate_existing=True)
            .options(selectinload(PagerGroup.members))
            .where(PagerGroup.enterprise_id == enterprise_id, PagerGroup.id == group_id)
        )
        return self.session.execute(stmt).scalars().first()

    def mask_in_use(self, mask: str, exclude_id: int | None = None) -> bool:
        """Return True if another group already owns the OPID ``mask``."""
        stmt = select(PagerGroup.id).where(PagerGroup.alternative_pager_number == mask)
        if exclude_id is not None:
            stmt = stmt.where(PagerGroup.id != exclude_id)
        return self.session.execute(stmt).first() is not None

    def add(self, group: PagerGroup) -> PagerGroup:
        self.session.add(group)
        self.session.flush()
        return group
