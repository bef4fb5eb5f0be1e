# src/pager_admin/api/v1/__init__.py
"""Version 1 API endpoints."""

from .endpoints import (
    administrator_groups_router,
    administrators_router,
    attachments_router,
    contact_groups_router,
    contacts_router,
    contacts_status_router,
    settings_router,
    templates_router,
)

__all__ = [
    "administrators_router",
    "administrator_groups_router",
    "attachments_router",
    "contacts_router",
    "contact_groups_router",
    "contacts_status_router",
    "settings_router",
    "templates_router",
]
