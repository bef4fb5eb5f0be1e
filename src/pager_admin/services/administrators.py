"""Administrator (dispatcher) management."""
from __future__ import annotations

import logging
from collections.abc import Iterable

from sqlalchemy.orm import Session

from pager_admin.core.security import hash_password
from pager_admin.models.dispatcher import (
    ADMIN_TYPE_ADMINISTRATOR,
    ADMIN_TYPE_DISPATCHER,
    AdminGroupMember,
    Dispatcher,
)
from pager_admin.pagination import Page, SearchableSource, TokenCodec, paginate
from pager_admin.repositories.admin_group_repo import AdminGroupRepository
from pager_admin.repositories.dispatcher_repo import DispatcherRepository
from pager_admin.repositories.enterprise_repo import EnterpriseRepository
from pager_admin.schemas.administrator import (
    AdministratorCreate,
    AdministratorPermissions,
    AdministratorResponse,
    AdministratorUpdate,
)
from pager_admin.services.errors import NotAcceptableError, NotFoundError

__all__ = [
    "AdministratorSource",
    "create_administrator",
    "delete_administrator",
    "get_administrator",
    "list_administrators",
    "update_administrator",
]

logger = logging.getLogger(__name__)

# API permission name -> dispatcher column.
PERMISSION_FLAGS: dict[str, str] = {
    "group_create": "can_add_group",
    "contact_delete": "can_delete_contact",
    "contact_edit": "can_edit_contact",
    "contact_add": "can_add_contact",
    "contact_to_group": "can_add_contact_to_group",
    "remove_contact_from_group": "can_remove_contact_from_group",
    "delete_group": "can_delete_group",
    "edit_group": "can_edit_group",
    "create_escalation": "can_add_escalation",
    "edit_escalation_group": "can_edit_escalation",
    "view_schedule": "can_view_schedule",
    "edit_schedule": "can_edit_schedule",
    "view_reports": "can_view_reports",
}


def to_administrator_dto(dispatcher: Dispatcher) -> AdministratorResponse:
    """Map a dispatcher row to its API representation."""
    permissions = AdministratorPermissions(
        **{name: getattr(dispatcher, column) for name, column in PERMISSION_FLAGS.items()}
    )
    return AdministratorResponse(
        id=dispatcher.id,
        first_name=dispatcher.first_name,
        last_name=dispatcher.last_name,
        email=dispatcher.email,
        phone_number=dispatcher.phone_number,
        groups=sorted(link.admin_group_id for link in dispatcher.group_links),
        super_admin=dispatcher.is_super_admin,
        permissions=permissions,
    )


class AdministratorSource(SearchableSource[Dispatcher, AdministratorResponse]):
    """Active, non-deleted administrators of an enterprise."""

    cursor_key = "lastAdministratorId"

    def __init__(self, db: Session) -> None:
        self.repo = DispatcherRepository(db)

    def fetch_candidates_after(self, enterprise_id: int, last_id: int) -> Iterable[Dispatcher]:
        return self.repo.list_after(enterprise_id, last_id)

    def to_dto(self, record: Dispatcher) -> AdministratorResponse:
        return to_administrator_dto(record)


def list_administrators(
    db: Session,
    codec: TokenCodec,
    *,
    enterprise_id: int,
    search: str = "",
    page_token: str | None = None,
    limit: int = 10,
) -> Page[AdministratorResponse]:
    """Return one page of administrators matching ``search``."""
    return paginate(
        AdministratorSource(db),
        enterprise_id=enterprise_id,
        search=search,
        page_token=page_token,
        limit=limit,
        codec=codec,
    )


def get_administrator(db: Session, enterprise_id: int, administrator_id: int) -> AdministratorResponse:
    """Return an active administrator or raise :class:`NotFoundError`."""
    dispatcher = DispatcherRepository(db).get_active(enterprise_id, administrator_id)
    if dispatcher is None:
        raise NotFoundError(f"Administrator with ID {administrator_id} not found.")
    return to_administrator_dto(dispatcher)


def _apply_permissions(dispatcher: Dispatcher, permissions: AdministratorPermissions) -> None:
    # Only flags present in the request are touched.
    for name in permissions.model_fields_set:
        setattr(dispatcher, PERMISSION_FLAGS[name], getattr(permissions, name))


def _sync_groups(db: Session, dispatcher: Dispatcher, group_ids: list[int]) -> None:
    """Make the dispatcher a member of exactly the enterprise groups in ``group_ids``."""
    wanted = AdminGroupRepository(db).ids_in_enterprise(dispatcher.enterprise_id, group_ids)
    for link in list(dispatcher.group_links):
        if link.admin_group_id not in wanted:
            dispatcher.group_links.remove(link)
    present = {link.admin_group_id for link in dispatcher.group_links}
    for group_id in sorted(wanted - present):
        dispatcher.group_links.append(AdminGroupMember(admin_group_id=group_id))


def create_administrator(
    db: Session, enterprise_id: int, payload: AdministratorCreate
) -> AdministratorResponse:
    """Create an administrator.

    Raises:
        NotAcceptableError: If the email address is already registered.
    """
    repo = DispatcherRepository(db)
    if repo.get_by_email(payload.email) is not None:
        raise NotAcceptableError(f"Dispatcher with email {payload.email} already exist.")

    dispatcher = Dispatcher(
        enterprise_id=enterprise_id,
        email=payload.email,
        password_hash=hash_password(payload.password),
        first_name=payload.first_name,
        last_name=payload.last_name,
        phone_number=payload.phone_number,
        admin_type=ADMIN_TYPE_ADMINISTRATOR if payload.super_admin else ADMIN_TYPE_DISPATCHER,
        active=True,
        deleted=False,
    )
    for name, column in PERMISSION_FLAGS.items():
        setattr(dispatcher, column, getattr(payload.permissions, name))
    repo.add(dispatcher)
    if payload.groups:
        _sync_groups(db, dispatcher, payload.groups)
    db.commit()
    db.refresh(dispatcher)
    logger.info("Created administrator %s for enterprise %s", dispatcher.id, enterprise_id)
    return to_administrator_dto(dispatcher)


def update_administrator(
    db: Session, enterprise_id: int, administrator_id: int, payload: AdministratorUpdate
) -> AdministratorResponse:
    """Apply the provided fields to an active administrator."""
    dispatcher = DispatcherRepository(db).get_active(enterprise_id, administrator_id)
    if dispatcher is None:
        raise NotFoundError(f"Dispatcher with ID {administrator_id} not found or not active.")

    if payload.password:
        dispatcher.password_hash = hash_password(payload.password)
    if payload.first_name:
        dispatcher.first_name = payload.first_name
    if payload.last_name:
        dispatcher.last_name = payload.last_name
    if payload.phone_number:
        dispatcher.phone_number = payload.phone_number
    if payload.super_admin is not None:
        dispatcher.admin_type = (
            ADMIN_TYPE_ADMINISTRATOR if payload.super_admin else ADMIN_TYPE_DISPATCHER
        )
    if payload.permissions is not None:
        _apply_permissions(dispatcher, payload.permissions)
    if payload.groups is not None:
        _sync_groups(db, dispatcher, payload.groups)

    db.commit()
    db.refresh(dispatcher)
    return to_administrator_dto(dispatcher)


def delete_administrator(db: Session, enterprise_id: int, administrator_id: int) -> None:
    """Soft-delete an administrator.

    Raises:
        NotFoundError: If the administrator does not exist in the enterprise.
        NotAcceptableError: If the enterprise is missing or the administrator
            is its super admin.
    """
    dispatcher = DispatcherRepository(db).get(enterprise_id, administrator_id)
    if dispatcher is None:
        raise NotFoundError(f"Administrator with ID {administrator_id} not found.")

    enterprise = EnterpriseRepository(db).get(dispatcher.enterprise_id)
    if enterprise is None or enterprise.super_admin_email == dispatcher.email:
        raise NotAcceptableError(
            f"Administrator with ID {administrator_id} is SUPER admin and can not be deleted."
        )

    dispatcher.active = False
    dispatcher.deleted = True
    db.commit()
    logger.info("Deleted administrator %s of enterprise %s", administrator_id, enterprise_id)
