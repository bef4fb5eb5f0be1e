# src/pager_admin/api/v1/endpoints/contacts.py
"""Contact endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Response, status

from pager_admin.api.v1.dependencies import (
    EnterpriseDep,
    ListParamsDep,
    SessionDep,
    TokenCodecDep,
)
from pager_admin.schemas.common import IdResponse, PageMetadata
from pager_admin.schemas.contact import ContactCreate, ContactList, ContactResponse
from pager_admin.services import contacts as service

router = APIRouter(prefix="/contacts", tags=["contacts"])


@router.get("/", response_model=ContactList)
async def list_contacts(
    enterprise_id: EnterpriseDep,
    params: ListParamsDep,
    codec: TokenCodecDep,
    db: SessionDep,
) -> ContactList:
    """List active contacts, one page at a time."""
    page = service.list_contacts(
        db,
        codec,
        enterprise_id=enterprise_id,
        search=params.search,
        page_token=params.page_token,
        limit=params.limit,
    )
    return ContactList(
        contacts=page.items,
        metadata=PageMetadata(next_page_token=page.next_page_token),
    )


@router.get("/{contact_id}", response_model=ContactResponse)
async def get_contact(
    contact_id: int,
    enterprise_id: EnterpriseDep,
    db: SessionDep,
) -> ContactResponse:
    return service.get_contact(db, enterprise_id, contact_id)


@router.post("/", response_model=IdResponse, status_code=status.HTTP_201_CREATED)
async def create_contact(
    payload: ContactCreate,
    enterprise_id: EnterpriseDep,
    db: SessionDep,
) -> IdResponse:
    """Register a contact and return its ID."""
    return IdResponse(id=service.create_contact(db, enterprise_id, payload))


@router.delete(
    "/{contact_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
async def delete_contact(
    contact_id: int,
    enterprise_id: EnterpriseDep,
    db: SessionDep,
) -> Response:
    """Deactivate a contact."""
    service.delete_contact(db, enterprise_id, contact_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
