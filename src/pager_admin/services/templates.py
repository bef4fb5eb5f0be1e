"""Message template management."""
from __future__ import annotations

import datetime
import logging
from collections.abc import Iterable

from sqlalchemy.orm import Session

from pager_admin.models.template import MessageTemplate
from pager_admin.pagination import Page, SearchableSource, TokenCodec, paginate
from pager_admin.repositories.template_repo import TemplateRepository
from pager_admin.schemas.template import TemplateCreate, TemplateResponse, TemplateUpdate
from pager_admin.services.errors import NotFoundError

__all__ = [
    "TemplateSource",
    "create_template",
    "delete_template",
    "get_template",
    "list_templates",
    "update_template",
]

logger = logging.getLogger(__name__)

REPLY_SEPARATOR = ";"


def to_template_dto(template: MessageTemplate) -> TemplateResponse:
    replies = template.predefined_replies
    return TemplateResponse(
        id=template.id,
        name=template.name,
        subject=template.subject,
        body=template.body,
        predefined_replies=replies.split(REPLY_SEPARATOR) if replies else [],
        sync_to_device=template.sync_to_device,
    )


class TemplateSource(SearchableSource[MessageTemplate, TemplateResponse]):
    """Templates of an enterprise, searched by name, subject and body."""

    cursor_key = "lastTemplateId"

    def __init__(self, db: Session) -> None:
        self.repo = TemplateRepository(db)

    def fetch_candidates_after(self, enterprise_id: int, last_id: int) -> Iterable[MessageTemplate]:
        return self.repo.list_after(enterprise_id, last_id)

    def to_dto(self, record: MessageTemplate) -> TemplateResponse:
        return to_template_dto(record)


def list_templates(
    db: Session,
    codec: TokenCodec,
    *,
    enterprise_id: int,
    search: str = "",
    page_token: str | None = None,
    limit: int = 10,
) -> Page[TemplateResponse]:
    """Return one page of templates matching ``search``."""
    return paginate(
        TemplateSource(db),
        enterprise_id=enterprise_id,
        search=search,
        page_token=page_token,
        limit=limit,
        codec=codec,
    )


def _get_template(db: Session, enterprise_id: int, template_id: int) -> MessageTemplate:
    template = TemplateRepository(db).get(enterprise_id, template_id)
    if template is None:
        raise NotFoundError(f"Template with ID {template_id} not found.")
    return template


def get_template(db: Session, enterprise_id: int, template_id: int) -> TemplateResponse:
    return to_template_dto(_get_template(db, enterprise_id, template_id))


def create_template(db: Session, enterprise_id: int, payload: TemplateCreate) -> TemplateResponse:
    template = TemplateRepository(db).add(
        MessageTemplate(
            enterprise_id=enterprise_id,
            name=payload.name,
            subject=payload.subject,
            body=payload.body,
            predefined_replies=(
                REPLY_SEPARATOR.join(payload.predefined_replies)
                if payload.predefined_replies
                else None
            ),
            sync_to_device=payload.sync_to_device,
        )
    )
    db.commit()
    logger.info("Created template %s for enterprise %s", template.id, enterprise_id)
    return to_template_dto(template)


def update_template(
    db: Session, enterprise_id: int, template_id: int, payload: TemplateUpdate
) -> TemplateResponse:
    """Apply only the fields present in ``payload``."""
    template = _get_template(db, enterprise_id, template_id)
    for key, value in payload.model_dump(exclude_unset=True).items():
        if key == "predefined_replies":
            value = REPLY_SEPARATOR.join(value) if value else None
        elif key == "sync_to_device" and value is None:
            value = False
        setattr(template, key, value)
    template.updated_at = datetime.datetime.now(datetime.timezone.utc)
    db.commit()
    db.refresh(template)
    return to_template_dto(template)


def delete_template(db: Session, enterprise_id: int, template_id: int) -> None:
    repo = TemplateRepository(db)
    repo.delete(_get_template(db, enterprise_id, template_id))
    db.commit()
    logger.info("Deleted template %s of enterprise %s", template_id, enterprise_id)
