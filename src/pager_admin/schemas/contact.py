# src/pager_admin/schemas/contact.py
"""Contact-related Pydantic schemas."""
from __future__ import annotations

from enum import Enum

from pydantic import Field

from .common import ApiModel, OffsetMetadata, PageMetadata


class ContactStatus(str, Enum):
    """Presence of a contact's paging device."""

    LOGGED_IN = "LOGGED-IN"
    LOGGED_OFF = "LOGGED-OFF"
    PAGER_OFF = "PAGER-OFF"


class ContactCreate(ApiModel):
    """Schema for registering a contact."""

    opid: str = Field(..., min_length=1, max_length=255, description="OnPage ID")
    first_name: str
    last_name: str
    email: str = Field(..., min_length=3, max_length=255)
    password: str = Field(..., min_length=1)
    phone_number: str = Field(..., min_length=1)


class ContactResponse(ApiModel):
    id: int
    opid: str
    first_name: str
    last_name: str
    email: str
    phone_number: str | None
    status: ContactStatus
    groups: list[str] = Field(default_factory=list, description="Contact group names")


class ContactList(ApiModel):
    contacts: list[ContactResponse]
    metadata: PageMetadata


class ContactsStatusTypes(ApiModel):
    """Contact ids bucketed by status."""

    logged_in: list[int] = Field(default_factory=list)
    logged_off: list[int] = Field(default_factory=list)
    pager_off: list[int] = Field(default_factory=list)


class ContactsStatusResponse(ApiModel):
    contacts_status: ContactsStatusTypes
    metadata: OffsetMetadata
