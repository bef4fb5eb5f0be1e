# src/pager_admin/api/v1/endpoints/contact_groups.py
"""Contact group endpoints."""

from __future__ import annotations

from fastapi import APIRouter, status

from pager_admin.api.v1.dependencies import (
    EnterpriseDep,
    ListParamsDep,
    SessionDep,
    TokenCodecDep,
)
from pager_admin.schemas.common import PageMetadata, PatchOperation
from pager_admin.schemas.contact_group import (
    ContactGroupCreate,
    ContactGroupList,
    ContactGroupResponse,
    ContactGroupUpdate,
)
from pager_admin.services import contact_groups as service

router = APIRouter(prefix="/contact-groups", tags=["contact groups"])


@router.get("/", response_model=ContactGroupList)
async def list_contact_groups(
    enterprise_id: EnterpriseDep,
    params: ListParamsDep,
    codec: TokenCodecDep,
    db: SessionDep,
) -> ContactGroupList:
    """List contact groups, one page at a time."""
    page = service.list_contact_groups(
        db,
        codec,
        enterprise_id=enterprise_id,
        search=params.search,
        page_token=params.page_token,
        limit=params.limit,
    )
    return ContactGroupList(
        groups=page.items,
        metadata=PageMetadata(next_page_token=page.next_page_token),
    )


@router.get("/{group_id}", response_model=ContactGroupResponse)
async def get_contact_group(
    group_id: int,
    enterprise_id: EnterpriseDep,
    db: SessionDep,
) -> ContactGroupResponse:
    return service.get_contact_group(db, enterprise_id, group_id)


@router.post("/", response_model=ContactGroupResponse, status_code=status.HTTP_201_CREATED)
async def create_contact_group(
    payload: ContactGroupCreate,
    enterprise_id: EnterpriseDep,
    db: SessionDep,
) -> ContactGroupResponse:
    """Create a contact group."""
    return service.create_contact_group(db, enterprise_id, payload)


@router.put("/{group_id}", response_model=ContactGroupResponse)
async def update_contact_group(
    group_id: int,
    payload: ContactGroupUpdate,
    enterprise_id: EnterpriseDep,
    db: SessionDep,
) -> ContactGroupResponse:
    """Replace a contact group's settings."""
    return service.update_contact_group(db, enterprise_id, group_id, payload)


@router.patch("/{group_id}", response_model=ContactGroupResponse)
async def patch_contact_group(
    group_id: int,
    operations: list[PatchOperation],
    enterprise_id: EnterpriseDep,
    db: SessionDep,
) -> ContactGroupResponse:
    """Apply JSON Patch operations to a contact group."""
    return service.patch_contact_group(
        db, enterprise_id, group_id, [operation.as_operation() for operation in operations]
    )
