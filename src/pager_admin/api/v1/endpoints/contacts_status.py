# src/pager_admin/api/v1/endpoints/contacts_status.py
"""Contact presence endpoint."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Query

from pager_admin.api.v1.dependencies import EnterpriseDep, SessionDep
from pager_admin.core.settings import settings
from pager_admin.schemas.contact import ContactsStatusResponse
from pager_admin.services.contacts_status import get_contacts_status

router = APIRouter(prefix="/contacts-status", tags=["contacts"])


@router.get("/", response_model=ContactsStatusResponse)
async def list_contacts_status(
    enterprise_id: EnterpriseDep,
    db: SessionDep,
    search: Annotated[str, Query()] = "",
    offset: Annotated[int, Query(ge=0, description="Page index")] = 0,
    limit: Annotated[int, Query(ge=0, le=settings.page_limit_max)] = settings.page_limit_default,
) -> ContactsStatusResponse:
    """Return contact ids grouped by status, paginated by page index."""
    return get_contacts_status(
        db,
        enterprise_id=enterprise_id,
        search=search,
        offset=offset,
        limit=limit,
    )
