# src/pager_admin/api/v1/endpoints/administrators.py
"""Administrator endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Response, status

from pager_admin.api.v1.dependencies import (
    EnterpriseDep,
    ListParamsDep,
    SessionDep,
    TokenCodecDep,
)
from pager_admin.schemas.administrator import (
    AdministratorCreate,
    AdministratorList,
    AdministratorResponse,
    AdministratorUpdate,
)
from pager_admin.schemas.common import PageMetadata
from pager_admin.services import administrators as service

router = APIRouter(prefix="/administrators", tags=["administrators"])


@router.get("/", response_model=AdministratorList)
async def list_administrators(
    enterprise_id: EnterpriseDep,
    params: ListParamsDep,
    codec: TokenCodecDep,
    db: SessionDep,
) -> AdministratorList:
    """List active administrators, one page at a time."""
    page = service.list_administrators(
        db,
        codec,
        enterprise_id=enterprise_id,
        search=params.search,
        page_token=params.page_token,
        limit=params.limit,
    )
    return AdministratorList(
        administrators=page.items,
        metadata=PageMetadata(next_page_token=page.next_page_token),
    )


@router.get("/{administrator_id}", response_model=AdministratorResponse)
async def get_administrator(
    administrator_id: int,
    enterprise_id: EnterpriseDep,
    db: SessionDep,
) -> AdministratorResponse:
    """Get an administrator by ID."""
    return service.get_administrator(db, enterprise_id, administrator_id)


@router.post("/", response_model=AdministratorResponse, status_code=status.HTTP_201_CREATED)
async def create_administrator(
    payload: AdministratorCreate,
    enterprise_id: EnterpriseDep,
    db: SessionDep,
) -> AdministratorResponse:
    """Create an administrator."""
    return service.create_administrator(db, enterprise_id, payload)


@router.put("/{administrator_id}", response_model=AdministratorResponse)
async def update_administrator(
    administrator_id: int,
    payload: AdministratorUpdate,
    enterprise_id: EnterpriseDep,
    db: SessionDep,
) -> AdministratorResponse:
    """Update the provided fields of an administrator."""
    return service.update_administrator(db, enterprise_id, administrator_id, payload)


@router.delete(
    "/{administrator_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
async def delete_administrator(
    administrator_id: int,
    enterprise_id: EnterpriseDep,
    db: SessionDep,
) -> Response:
    """Deactivate an administrator. The enterprise super admin cannot be removed."""
    service.delete_administrator(db, enterprise_id, administrator_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
