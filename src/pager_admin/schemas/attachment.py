# src/pager_admin/schemas/attachment.py
"""Attachment Pydantic schemas."""
from __future__ import annotations

from .common import ApiModel


class AttachmentShort(ApiModel):
    id: str
    name: str
    size: int


class AttachmentResponse(AttachmentShort):
    """Attachment with its content encoded as base64."""

    data: str
