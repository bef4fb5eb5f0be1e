# src/pager_admin/schemas/contact_group.py
"""Contact group Pydantic schemas."""
from __future__ import annotations

from enum import Enum

from pydantic import Field

from .common import ApiModel, PageMetadata


class EscalationInterval(str, Enum):
    """Delay between escalation steps."""

    NONE = "NONE"
    MINUTES_1 = "1 minute"
    MINUTES_2 = "2 minutes"
    MINUTES_3 = "3 minutes"
    MINUTES_5 = "5 minutes"
    MINUTES_10 = "10 minutes"
    MINUTES_15 = "15 minutes"
    MINUTES_20 = "20 minutes"
    MINUTES_25 = "25 minutes"
    MINUTES_30 = "30 minutes"
    MINUTES_35 = "35 minutes"
    MINUTES_40 = "40 minutes"
    MINUTES_45 = "45 minutes"
    MINUTES_50 = "50 minutes"
    MINUTES_55 = "55 minutes"
    HOUR_1 = "1 hour"


class EscalationFactor(str, Enum):
    """Page state that stops an escalation."""

    NONE = "NONE"
    DELIVERED = "DELIVERED"
    READ = "READ"
    REPLIED = "REPLIED"


class ContactGroupMember(ApiModel):
    contact_id: int
    order: int | None = Field(None, description="Escalation order")


class GroupFailOver(ApiModel):
    """Where pages go when a group fails to respond."""

    include_original_message: bool = False
    emails: list[str] = Field(default_factory=list)
    contacts: list[int] = Field(default_factory=list)
    groups: list[int] = Field(default_factory=list)


class ContactGroupCreate(ApiModel):
    """Schema for creating or replacing a contact group."""

    opid: str = Field(..., min_length=1, max_length=255)
    name: str = Field(..., min_length=1, max_length=250)
    description: str | None = None
    contacts: list[ContactGroupMember] | None = None
    escalation: bool = False
    escalation_interval: EscalationInterval = EscalationInterval.NONE
    escalation_factor: EscalationFactor = EscalationFactor.NONE
    fail_over: GroupFailOver | None = None


ContactGroupUpdate = ContactGroupCreate


class ContactGroupResponse(ApiModel):
    id: int
    opid: str
    name: str
    description: str | None = None
    contacts: list[ContactGroupMember] = Field(default_factory=list)
    escalation: bool
    escalation_interval: EscalationInterval
    escalation_factor: EscalationFactor
    fail_over: GroupFailOver


class ContactGroupList(ApiModel):
    groups: list[ContactGroupResponse]
    metadata: PageMetadata
