"""Data access helpers for attachments."""
from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import Session

from pager_admin.models.attachment import Attachment

__all__ = ["AttachmentRepository"]


class AttachmentRepository:
    """Thin wrapper around database access for attachments."""

    def __init__(self, session: Session) -> None:
        """Initialize the repository with a SQLAlchemy session."""
        self.session = session

    def get_by_file_id(self, file_id: str) -> Attachment | None:
        stmt = select(Attachment).where(Attachment.file_id == file_id)
        return self.session.execute(stmt).scalars().first()

    def add(self, attachment: Attachment) -> Attachment:
        self.session.add(attachment)
        self.session.flush()
        return attachment

    def delete(self, attachment: Attachment) -> None:
        self.session.delete(attachment)
        self.session.flush()
