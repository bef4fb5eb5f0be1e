# src/pager_admin/models/__init__.py
"""SQLAlchemy models for the Pager Admin application."""

from .account import Account, Device
from .attachment import Attachment
from .dispatcher import AdminGroup, AdminGroupMember, Dispatcher
from .enterprise import Enterprise, PublicApiToken
from .pager_group import PagerGroup, PagerGroupMember
from .template import MessageTemplate

__all__ = [
    "Account", "Device",
    "Attachment",
    "AdminGroup", "AdminGroupMember", "Dispatcher",
    "Enterprise", "PublicApiToken",
    "PagerGroup", "PagerGroupMember",
    "MessageTemplate",
]
