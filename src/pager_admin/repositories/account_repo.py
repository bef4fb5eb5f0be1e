"""Data access helpers for contacts."""
from __future__ import annotations

from collections.abc import Iterable

from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload

from pager_admin.models.account import Account
from pager_admin.models.pager_group import PagerGroupMember

__all__ = ["AccountRepository"]


class AccountRepository:
    """Thin wrapper around database access for contact accounts."""

    def __init__(self, session: Session) -> None:
        """Initialize the repository with a SQLAlchemy session."""
        self.session = session

    def _visible(self, enterprise_id: int):
        return (
            select(Account)
            .execution_options(populate_existing=True)
            .options(
                selectinload(Account.device),
                selectinload(Account.group_links).selectinload(PagerGroupMember.group),
            )
            .where(
                Account.enterprise_id == enterprise_id,
                Account.active.is_(True),
                Account.deleted.is_(False),
            )
        )

    def list_after(self, enterprise_id: int, last_id: int) -> Iterable[Account]:
        """Return active contacts with ``id > last_id`` in ascending order."""
        stmt = self._visible(enterprise_id).where(Account.id > last_id).order_by(Account.id)
        return self.session.execute(stmt).scalars()

    def list_active(self, enterprise_id: int) -> Iterable[Account]:
        """Return every active contact of the enterprise in ascending id order."""
        stmt = self._visible(enterprise_id).order_by(Account.id)
        return self.session.execute(stmt).scalars()

    def get_active(self, enterprise_id: int, account_id: int) -> Account | None:
        stmt = self._visible(enterprise_id).where(Account.id == account_id)
        return self.session.execute(stmt).scalars().first()

    def get_by_email(self, email: str) -> Account | None:
        stmt = select(Account).where(Account.email == email)
        return self.session.execute(stmt).scalars().first()

    def mask_in_use(self, mask: str) -> bool:
        stmt = select(Account.id).where(Account.alternative_pager_number == mask)
        return self.session.execute(stmt).first() is not None

    def ids_in_enterprise(self, enterprise_id: int, account_ids: Iterable[int]) -> set[int]:
        """Return the subset of ``account_ids`` belonging to the enterprise."""
        wanted = set(account_ids)
        if not wanted:
            return set()
        stmt = select(Account.id).where(
            Account.enterprise_id == enterprise_id,
            Account.id.in_(wanted),
        )
        return set(self.session.execute(stmt).scalars())

    def add(self, account: Account) -> Account:
        self.session.add(account)
        self.session.flush()
        return account
