"""Contact (pager account) management."""
from __future__ import annotations

import logging
from collections.abc import Iterable

from sqlalchemy.orm import Session

from pager_admin.core.security import hash_password
from pager_admin.models.account import Account
from pager_admin.pagination import Page, SearchableSource, TokenCodec, paginate
from pager_admin.repositories.account_repo import AccountRepository
from pager_admin.schemas.contact import ContactCreate, ContactResponse, ContactStatus
from pager_admin.services.errors import ConflictError, NotFoundError
from pager_admin.services.opid import reserve_opid

__all__ = [
    "ContactSource",
    "contact_status",
    "create_contact",
    "delete_contact",
    "get_contact",
    "list_contacts",
]

logger = logging.getLogger(__name__)


def contact_status(account: Account) -> ContactStatus:
    """Derive presence from the contact's device registration."""
    if account.device is None:
        return ContactStatus.LOGGED_OFF
    if not account.device.pager_on:
        return ContactStatus.PAGER_OFF
    return ContactStatus.LOGGED_IN


def to_contact_dto(account: Account) -> ContactResponse:
    return ContactResponse(
        id=account.id,
        opid=account.pager_number,
        first_name=account.first_name,
        last_name=account.last_name,
        email=account.email,
        phone_number=account.phone_number,
        status=contact_status(account),
        groups=sorted(link.group.name for link in account.group_links),
    )


class ContactSource(SearchableSource[Account, ContactResponse]):
    """Active contacts of an enterprise, searched by OPID, email and name."""

    cursor_key = "lastContactId"

    def __init__(self, db: Session) -> None:
        self.repo = AccountRepository(db)

    def fetch_candidates_after(self, enterprise_id: int, last_id: int) -> Iterable[Account]:
        return self.repo.list_after(enterprise_id, last_id)

    def to_dto(self, record: Account) -> ContactResponse:
        return to_contact_dto(record)


def list_contacts(
    db: Session,
    codec: TokenCodec,
    *,
    enterprise_id: int,
    search: str = "",
    page_token: str | None = None,
    limit: int = 10,
) -> Page[ContactResponse]:
    """Return one page of contacts matching ``search``."""
    return paginate(
        ContactSource(db),
        enterprise_id=enterprise_id,
        search=search,
        page_token=page_token,
        limit=limit,
        codec=codec,
    )


def get_contact(db: Session, enterprise_id: int, contact_id: int) -> ContactResponse:
    account = AccountRepository(db).get_active(enterprise_id, contact_id)
    if account is None:
        raise NotFoundError(f"Contact with ID {contact_id} not found.")
    return to_contact_dto(account)


def create_contact(db: Session, enterprise_id: int, payload: ContactCreate) -> int:
    """Register a contact and return its id.

    Raises:
        ConflictError: If the email or the OPID mask is already registered.
    """
    repo = AccountRepository(db)
    if repo.get_by_email(payload.email) is not None:
        raise ConflictError(f'Email "{payload.email}" already registered.')
    mask = reserve_opid(db, payload.opid)

    account = repo.add(
        Account(
            enterprise_id=enterprise_id,
            pager_number=payload.opid,
            alternative_pager_number=mask,
            email=payload.email,
            password_hash=hash_password(payload.password),
            first_name=payload.first_name,
            last_name=payload.last_name,
            phone_number=payload.phone_number,
            active=True,
            deleted=False,
        )
    )
    db.commit()
    logger.info("Created contact %s for enterprise %s", account.id, enterprise_id)
    return account.id


def delete_contact(db: Session, enterprise_id: int, contact_id: int) -> None:
    """Soft-delete a contact."""
    account = AccountRepository(db).get_active(enterprise_id, contact_id)
    if account is None:
        raise NotFoundError(f"Contact with ID {contact_id} not found.")
    account.active = False
    account.deleted = True
    db.commit()
    logger.info("Deleted contact %s of enterprise %s", contact_id, enterprise_id)
