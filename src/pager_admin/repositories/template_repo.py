"""Data access helpers for message templates."""
from __future__ import annotations

from collections.abc import Iterable

from sqlalchemy import select
from sqlalchemy.orm import Session

from pager_admin.models.template import MessageTemplate

__all__ = ["TemplateRepository"]


class TemplateRepository:
    """Thin wrapper around database access for message templates."""

    def __init__(self, session: Session) -> None:
        """Initialize the repository with a SQLAlchemy session."""
        self.session = session

    def list_after(self, enterprise_id: int, last_id: int) -> Iterable[MessageTemplate]:
        """Return the enterprise's templates with ``id > last_id`` in ascending order."""
        stmt = (
            select(MessageTemplate)
            .where(MessageTemplate.enterprise_id == enterprise_id, MessageTemplate.id > last_id)
            .order_by(MessageTemplate.id)
        )
        return self.session.execute(stmt).scalars()

    def get(self, enterprise_id: int, template_id: int) -> MessageTemplate | None:
        stmt = select(MessageTemplate).where(
            MessageTemplate.enterprise_id == enterprise_id,
            MessageTemplate.id == template_id,
        )
        return self.session.execute(stmt).scalars().first()

    def add(self, template: MessageTemplate) -> MessageTemplate:
        self.session.add(template)
        self.session.flush()
        return template

    def delete(self, template: MessageTemplate) -> None:
        self.session.delete(template)
        self.session.flush()
