"""Attachment upload, download and removal."""
from __future__ import annotations

import base64
import logging
import uuid
from enum import IntEnum

from sqlalchemy.orm import Session

from pager_admin.models.attachment import Attachment
from pager_admin.repositories.attachment_repo import AttachmentRepository
from pager_admin.schemas.attachment import AttachmentResponse
from pager_admin.services.errors import InvalidRequestError, NotFoundError

__all__ = [
    "AttachmentFileType",
    "create_attachment",
    "delete_attachment",
    "file_type_for_mime",
    "get_attachment",
]

logger = logging.getLogger(__name__)


class AttachmentFileType(IntEnum):
    IMAGE = 0
    VIDEO = 1
    AUDIO = 2
    TEXT = 3
    MSWORD = 4
    PDF = 5
    OTHER = 99


_TEXT_MIME_TYPES = frozenset({"application/json", "application/javascript", "application/xml"})
_MSWORD_MIME_TYPES = frozenset({
    "application/msword",
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
})


def file_type_for_mime(mime_type: str) -> AttachmentFileType:
    """Classify an upload by its MIME type."""
    if mime_type.startswith("image/"):
        return AttachmentFileType.IMAGE
    if mime_type.startswith("video/"):
        return AttachmentFileType.VIDEO
    if mime_type.startswith("audio/"):
        return AttachmentFileType.AUDIO
    if mime_type.startswith("text/") or mime_type in _TEXT_MIME_TYPES:
        return AttachmentFileType.TEXT
    if mime_type == "application/pdf":
        return AttachmentFileType.PDF
    if mime_type in _MSWORD_MIME_TYPES:
        return AttachmentFileType.MSWORD
    return AttachmentFileType.OTHER


def create_attachment(
    db: Session, *, file_name: str | None, mime_type: str | None, data: bytes
) -> str:
    """Store an uploaded file and return its generated id.

    Raises:
        InvalidRequestError: If the file is empty or lacks a name or type.
    """
    if not data:
        raise InvalidRequestError("File is empty.")
    if not file_name or not mime_type:
        raise InvalidRequestError("File name and type are required.")

    attachment = AttachmentRepository(db).add(
        Attachment(
            file_id=str(uuid.uuid4()),
            file_name=file_name,
            file_size=len(data),
            file_type=int(file_type_for_mime(mime_type)),
            mime_type=mime_type,
            file_data=data,
        )
    )
    db.commit()
    logger.info("Stored attachment %s (%d bytes)", attachment.file_id, attachment.file_size)
    return attachment.file_id


def _get(db: Session, file_id: str) -> Attachment:
    attachment = AttachmentRepository(db).get_by_file_id(file_id)
    if attachment is None:
        raise NotFoundError(f"Attachment {file_id} not found.")
    return attachment


def get_attachment(db: Session, file_id: str) -> AttachmentResponse:
    attachment = _get(db, file_id)
    return AttachmentResponse(
        id=attachment.file_id,
        name=attachment.file_name,
        size=attachment.file_size,
        data=base64.b64encode(attachment.file_data).decode("ascii"),
    )


def delete_attachment(db: Session, file_id: str) -> None:
    AttachmentRepository(db).delete(_get(db, file_id))
    db.commit()
    logger.info("Deleted attachment %s", file_id)
