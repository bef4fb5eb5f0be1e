"""Data access helpers for the Pager Admin models."""

from .account_repo import AccountRepository
from .admin_group_repo import AdminGroupRepository
from .attachment_repo import AttachmentRepository
from .dispatcher_repo import DispatcherRepository
from .enterprise_repo import EnterpriseRepository
from .pager_group_repo import PagerGroupRepository
from .template_repo import TemplateRepository

__all__ = [
    "AccountRepository",
    "AdminGroupRepository",
    "AttachmentRepository",
    "DispatcherRepository",
    "EnterpriseRepository",
    "PagerGroupRepository",
    "TemplateRepository",
]
