# src/pager_admin/api/v1/endpoints/templates.py
"""Message template endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Response, status

from pager_admin.api.v1.dependencies import (
    EnterpriseDep,
    ListParamsDep,
    SessionDep,
    TokenCodecDep,
)
from pager_admin.schemas.common import PageMetadata
from pager_admin.schemas.template import (
    TemplateCreate,
    TemplateList,
    TemplateResponse,
    TemplateUpdate,
)
from pager_admin.services import templates as service

router = APIRouter(prefix="/templates", tags=["templates"])


@router.get("/", response_model=TemplateList)
async def list_templates(
    enterprise_id: EnterpriseDep,
    params: ListParamsDep,
    codec: TokenCodecDep,
    db: SessionDep,
) -> TemplateList:
    """List message templates, one page at a time."""
    page = service.list_templates(
        db,
        codec,
        enterprise_id=enterprise_id,
        search=params.search,
        page_token=params.page_token,
        limit=params.limit,
    )
    return TemplateList(
        templates=page.items,
        metadata=PageMetadata(next_page_token=page.next_page_token),
    )


@router.get("/{template_id}", response_model=TemplateResponse)
async def get_template(
    template_id: int,
    enterprise_id: EnterpriseDep,
    db: SessionDep,
) -> TemplateResponse:
    return service.get_template(db, enterprise_id, template_id)


@router.post("/", response_model=TemplateResponse, status_code=status.HTTP_201_CREATED)
async def create_template(
    payload: TemplateCreate,
    enterprise_id: EnterpriseDep,
    db: SessionDep,
) -> TemplateResponse:
    return service.create_template(db, enterprise_id, payload)


@router.patch("/{template_id}", response_model=TemplateResponse)
async def update_template(
    template_id: int,
    payload: TemplateUpdate,
    enterprise_id: EnterpriseDep,
    db: SessionDep,
) -> TemplateResponse:
    """Update the provided fields of a template."""
    return service.update_template(db, enterprise_id, template_id, payload)


@router.delete(
    "/{template_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
async def delete_template(
    template_id: int,
    enterprise_id: EnterpriseDep,
    db: SessionDep,
) -> Response:
    service.delete_template(db, enterprise_id, template_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
