# src/pager_admin/schemas/template.py
"""Message template Pydantic schemas."""
from __future__ import annotations

from pydantic import Field, field_validator

from .common import ApiModel, PageMetadata


class TemplateCreate(ApiModel):
    name: str = Field(..., min_length=1, max_length=255)
    subject: str = Field(..., min_length=1)
    body: str | None = None
    predefined_replies: list[str] | None = None
    sync_to_device: bool = False


class TemplateUpdate(ApiModel):
    """Partial template update; omitted fields are left unchanged."""

    name: str | None = Field(None, min_length=1, max_length=255)
    subject: str | None = Field(None, min_length=1)
    body: str | None = None
    predefined_replies: list[str] | None = None
    sync_to_device: bool | None = None

    @field_validator("name", "subject")
    @classmethod
    def reject_null(cls, v: str | None) -> str:
        """Name and subject may be omitted but never cleared."""
        if v is None:
            raise ValueError("must not be null")
        return v


class TemplateResponse(ApiModel):
    id: int
    name: str
    subject: str
    body: str | None = None
    predefined_replies: list[str] = Field(default_factory=list)
    sync_to_device: bool


class TemplateList(ApiModel):
    templates: list[TemplateResponse]
    metadata: PageMetadata
