# src/pager_admin/schemas/administrator.py
"""Administrator-related Pydantic schemas."""
from __future__ import annotations

from pydantic import Field

from .common import ApiModel, PageMetadata


class AdministratorPermissions(ApiModel):
    """Console permissions granted to an administrator."""

    create_escalation: bool = False
    group_create: bool = False
    contact_delete: bool = False
    contact_edit: bool = False
    contact_add: bool = False
    contact_to_group: bool = False
    remove_contact_from_group: bool = False
    delete_group: bool = False
    edit_group: bool = False
    edit_escalation_group: bool = False
    view_schedule: bool = False
    edit_schedule: bool = False
    view_reports: bool = False


class AdministratorCreate(ApiModel):
    """Schema for creating an administrator."""

    password: str = Field(..., min_length=1)
    first_name: str
    last_name: str
    email: str = Field(..., min_length=3, max_length=255)
    phone_number: str = Field(..., min_length=1)
    groups: list[int] | None = None
    super_admin: bool = False
    permissions: AdministratorPermissions


class AdministratorUpdate(ApiModel):
    """Schema for updating an administrator; omitted fields are left unchanged."""

    password: str | None = Field(None, min_length=1)
    first_name: str | None = None
    last_name: str | None = None
    phone_number: str | None = Field(None, min_length=1)
    groups: list[int] | None = None
    super_admin: bool | None = None
    permissions: AdministratorPermissions | None = None


class AdministratorResponse(ApiModel):
    """Schema for administrator information returned by the API."""

    id: int
    first_name: str
    last_name: str
    email: str
    phone_number: str | None
    groups: list[int] = Field(default_factory=list, description="Administrator group ids")
    super_admin: bool
    permissions: AdministratorPermissions


class AdministratorList(ApiModel):
    administrators: list[AdministratorResponse]
    metadata: PageMetadata
