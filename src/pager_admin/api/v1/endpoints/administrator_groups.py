# src/pager_admin/api/v1/endpoints/administrator_groups.py
"""Administrator group endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Response, status

from pager_admin.api.v1.dependencies import (
    EnterpriseDep,
    ListParamsDep,
    SessionDep,
    TokenCodecDep,
)
from pager_admin.schemas.administrator_group import (
    AdministratorGroupCreate,
    AdministratorGroupList,
    AdministratorGroupResponse,
    AdministratorGroupUpdate,
)
from pager_admin.schemas.common import PageMetadata, PatchOperation
from pager_admin.services import administrator_groups as service

router = APIRouter(prefix="/administrators-groups", tags=["administrator groups"])


@router.get("/", response_model=AdministratorGroupList)
async def list_administrator_groups(
    enterprise_id: EnterpriseDep,
    params: ListParamsDep,
    codec: TokenCodecDep,
    db: SessionDep,
) -> AdministratorGroupList:
    """List administrator groups, one page at a time."""
    page = service.list_administrator_groups(
        db,
        codec,
        enterprise_id=enterprise_id,
        search=params.search,
        page_token=params.page_token,
        limit=params.limit,
    )
    return AdministratorGroupList(
        groups=page.items,
        metadata=PageMetadata(next_page_token=page.next_page_token),
    )


@router.get("/{group_id}", response_model=AdministratorGroupResponse)
async def get_administrator_group(
    group_id: int,
    enterprise_id: EnterpriseDep,
    db: SessionDep,
) -> AdministratorGroupResponse:
    return service.get_administrator_group(db, enterprise_id, group_id)


@router.post("/", response_model=AdministratorGroupResponse, status_code=status.HTTP_201_CREATED)
async def create_administrator_group(
    payload: AdministratorGroupCreate,
    enterprise_id: EnterpriseDep,
    db: SessionDep,
) -> AdministratorGroupResponse:
    """Create an administrator group."""
    return service.create_administrator_group(db, enterprise_id, payload)


@router.put("/{group_id}", response_model=AdministratorGroupResponse)
async def update_administrator_group(
    group_id: int,
    payload: AdministratorGroupUpdate,
    enterprise_id: EnterpriseDep,
    db: SessionDep,
) -> AdministratorGroupResponse:
    """Rename a group and replace its members."""
    return service.update_administrator_group(db, enterprise_id, group_id, payload)


@router.patch("/{group_id}", response_model=AdministratorGroupResponse)
async def patch_administrator_group(
    group_id: int,
    operations: list[PatchOperation],
    enterprise_id: EnterpriseDep,
    db: SessionDep,
) -> AdministratorGroupResponse:
    """Apply JSON Patch operations to an administrator group."""
    return service.patch_administrator_group(
        db, enterprise_id, group_id, [operation.as_operation() for operation in operations]
    )


@router.delete(
    "/{group_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
async def delete_administrator_group(
    group_id: int,
    enterprise_id: EnterpriseDep,
    db: SessionDep,
) -> Response:
    service.delete_administrator_group(db, enterprise_id, group_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
