# src/pager_admin/api/v1/endpoints/__init__.py
"""API endpoint modules for version 1."""

from .administrator_groups import router as administrator_groups_router
from .administrators import router as administrators_router
from .attachments import router as attachments_router
from .contact_groups import router as contact_groups_router
from .contacts import router as contacts_router
from .contacts_status import router as contacts_status_router
from .settings import router as settings_router
from .templates import router as templates_router

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
