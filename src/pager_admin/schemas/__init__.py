# src/pager_admin/schemas/__init__.py
"""
Pydantic schemas for API request/response models.

Field names are snake_case in Python and camelCase on the wire.
"""

from .administrator import (
    AdministratorCreate,
    AdministratorList,
    AdministratorPermissions,
    AdministratorResponse,
    AdministratorUpdate,
)
from .administrator_group import (
    AdministratorGroupCreate,
    AdministratorGroupList,
    AdministratorGroupResponse,
    AdministratorGroupUpdate,
)
from .attachment import AttachmentResponse, AttachmentShort
from .common import ApiModel, IdResponse, OffsetMetadata, PageMetadata, PatchOperation
from .contact import (
    ContactCreate,
    ContactList,
    ContactResponse,
    ContactsStatusResponse,
    ContactsStatusTypes,
    ContactStatus,
)
from .contact_group import (
    ContactGroupCreate,
    ContactGroupList,
    ContactGroupMember,
    ContactGroupResponse,
    ContactGroupUpdate,
    EscalationFactor,
    EscalationInterval,
    GroupFailOver,
)
from .settings import SettingsResponse, SettingsUpdate
from .template import TemplateCreate, TemplateList, TemplateResponse, TemplateUpdate

__all__ = [
    "AdministratorCreate", "AdministratorList", "AdministratorPermissions",
    "AdministratorResponse", "AdministratorUpdate",
    "AdministratorGroupCreate", "AdministratorGroupList",
    "AdministratorGroupResponse", "AdministratorGroupUpdate",
    "AttachmentResponse", "AttachmentShort",
    "ApiModel", "IdResponse", "OffsetMetadata", "PageMetadata", "PatchOperation",
    "ContactCreate", "ContactList", "ContactResponse",
    "ContactsStatusResponse", "ContactsStatusTypes", "ContactStatus",
    "ContactGroupCreate", "ContactGroupList", "ContactGroupMember",
    "ContactGroupResponse", "ContactGroupUpdate",
    "EscalationFactor", "EscalationInterval", "GroupFailOver",
    "SettingsResponse", "SettingsUpdate",
    "TemplateCreate", "TemplateList", "TemplateResponse", "TemplateUpdate",
]
