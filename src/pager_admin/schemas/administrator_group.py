# src/pager_admin/schemas/administrator_group.py
"""Administrator group Pydantic schemas."""
from __future__ import annotations

from pydantic import Field

from .common import ApiModel, PageMetadata


class AdministratorGroupCreate(ApiModel):
    """Schema for creating or replacing an administrator group."""

    name: str = Field(..., min_length=1, max_length=255)
    administrators: list[int] | None = Field(None, description="Administrator ids")


AdministratorGroupUpdate = AdministratorGroupCreate


class AdministratorGroupResponse(ApiModel):
    id: int
    name: str
    administrators: list[int] = Field(default_factory=list)


class AdministratorGroupList(ApiModel):
    groups: list[AdministratorGroupResponse]
    metadata: PageMetadata
