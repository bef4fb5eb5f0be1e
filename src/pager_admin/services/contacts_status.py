"""Presence overview of an enterprise's contacts."""
from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from pager_admin.pagination import matches_search, paginate_offset
from pager_admin.repositories.account_repo import AccountRepository
from pager_admin.schemas.common import OffsetMetadata
from pager_admin.schemas.contact import ContactsStatusResponse, ContactsStatusTypes, ContactStatus
from pager_admin.services.contacts import contact_status

__all__ = ["get_contacts_status"]

logger = logging.getLogger(__name__)


def get_contacts_status(
    db: Session,
    *,
    enterprise_id: int,
    search: str = "",
    offset: int = 0,
    limit: int = 10,
) -> ContactsStatusResponse:
    """Bucket one page of active contacts by status.

    ``offset`` is a page index rather than a row count.
    """
    logger.debug(
        "Contacts status for enterprise %s: search=%r offset=%s limit=%s",
        enterprise_id,
        search,
        offset,
        limit,
    )
    page = paginate_offset(
        AccountRepository(db).list_active(enterprise_id),
        search=search,
        offset=offset,
        limit=limit,
        matches=lambda account, term: matches_search(account.searchable_values(), term),
        to_item=lambda account: (account.id, contact_status(account)),
    )

    buckets: dict[ContactStatus, list[int]] = {status: [] for status in ContactStatus}
    for account_id, status in page.items:
        buckets[status].append(account_id)

    return ContactsStatusResponse(
        contacts_status=ContactsStatusTypes(
            logged_in=buckets[ContactStatus.LOGGED_IN],
            logged_off=buckets[ContactStatus.LOGGED_OFF],
            pager_off=buckets[ContactStatus.PAGER_OFF],
        ),
        metadata=OffsetMetadata(has_more_data=page.has_more_data),
    )
