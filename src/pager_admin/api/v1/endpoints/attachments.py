# src/pager_admin/api/v1/endpoints/attachments.py
"""Attachment endpoints."""

from __future__ import annotations

from fastapi import APIRouter, File, Response, UploadFile, status

from pager_admin.api.v1.dependencies import EnterpriseDep, SessionDep
from pager_admin.schemas.attachment import AttachmentResponse
from pager_admin.schemas.common import IdResponse
from pager_admin.services import attachments as service

router = APIRouter(prefix="/attachments", tags=["attachments"])


@router.post("/", response_model=IdResponse, status_code=status.HTTP_201_CREATED)
async def upload_attachment(
    _enterprise_id: EnterpriseDep,
    db: SessionDep,
    file: UploadFile = File(...),
) -> IdResponse:
    """Upload a file and return the ID it can be fetched with."""
    data = await file.read()
    file_id = service.create_attachment(
        db,
        file_name=file.filename,
        mime_type=file.content_type,
        data=data,
    )
    return IdResponse(id=file_id)


@router.get("/{file_id}", response_model=AttachmentResponse)
async def get_attachment(
    file_id: str,
    _enterprise_id: EnterpriseDep,
    db: SessionDep,
) -> AttachmentResponse:
    """Return an attachment with its content base64-encoded."""
    return service.get_attachment(db, file_id)


@router.delete(
    "/{file_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
async def delete_attachment(
    file_id: str,
    _enterprise_id: EnterpriseDep,
    db: SessionDep,
) -> Response:
    service.delete_attachment(db, file_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
