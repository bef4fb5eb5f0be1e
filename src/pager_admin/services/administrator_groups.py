"""Administrator group management."""
from __future__ import annotations

import logging
from collections.abc import Iterable

from pydantic import ValidationError
from sqlalchemy.orm import Session

from pager_admin.models.dispatcher import AdminGroup, AdminGroupMember
from pager_admin.pagination import Page, SearchableSource, TokenCodec, paginate
from pager_admin.repositories.admin_group_repo import AdminGroupRepository
from pager_admin.repositories.dispatcher_repo import DispatcherRepository
from pager_admin.schemas.administrator_group import (
    AdministratorGroupCreate,
    AdministratorGroupResponse,
    AdministratorGroupUpdate,
)
from pager_admin.services.errors import InvalidRequestError, NotFoundError
from pager_admin.services.patching import apply_patch

__all__ = [
    "AdministratorGroupSource",
    "create_administrator_group",
    "delete_administrator_group",
    "get_administrator_group",
    "list_administrator_groups",
    "patch_administrator_group",
    "update_administrator_group",
]

logger = logging.getLogger(__name__)


def to_administrator_group_dto(group: AdminGroup) -> AdministratorGroupResponse:
    return AdministratorGroupResponse(
        id=group.id,
        name=group.name,
        administrators=[member.dispatcher_id for member in group.members],
    )


class AdministratorGroupSource(SearchableSource[AdminGroup, AdministratorGroupResponse]):
    """Administrator groups of an enterprise, searched by name."""

    cursor_key = "lastAdministratorGroupId"

    def __init__(self, db: Session) -> None:
        self.repo = AdminGroupRepository(db)

    def fetch_candidates_after(self, enterprise_id: int, last_id: int) -> Iterable[AdminGroup]:
        return self.repo.list_after(enterprise_id, last_id)

    def to_dto(self, record: AdminGroup) -> AdministratorGroupResponse:
        return to_administrator_group_dto(record)


def list_administrator_groups(
    db: Session,
    codec: TokenCodec,
    *,
    enterprise_id: int,
    search: str = "",
    page_token: str | None = None,
    limit: int = 10,
) -> Page[AdministratorGroupResponse]:
    """Return one page of administrator groups matching ``search``."""
    return paginate(
        AdministratorGroupSource(db),
        enterprise_id=enterprise_id,
        search=search,
        page_token=page_token,
        limit=limit,
        codec=codec,
    )


def _get_group(db: Session, enterprise_id: int, group_id: int) -> AdminGroup:
    group = AdminGroupRepository(db).get(enterprise_id, group_id)
    if group is None:
        raise NotFoundError(f"Administrator group with ID {group_id} not found.")
    return group


def get_administrator_group(
    db: Session, enterprise_id: int, group_id: int
) -> AdministratorGroupResponse:
    return to_administrator_group_dto(_get_group(db, enterprise_id, group_id))


def _set_members(db: Session, group: AdminGroup, administrator_ids: list[int]) -> None:
    """Replace the group's members; ids outside the enterprise are skipped."""
    allowed = DispatcherRepository(db).ids_in_enterprise(group.enterprise_id, administrator_ids)
    skipped = set(administrator_ids) - allowed
    if skipped:
        logger.debug("Ignoring administrators %s outside enterprise %s", sorted(skipped), group.enterprise_id)
    for member in list(group.members):
        if member.dispatcher_id not in allowed:
            group.members.remove(member)
    present = {member.dispatcher_id for member in group.members}
    for dispatcher_id in sorted(allowed - present):
        group.members.append(AdminGroupMember(dispatcher_id=dispatcher_id))


def create_administrator_group(
    db: Session, enterprise_id: int, payload: AdministratorGroupCreate
) -> AdministratorGroupResponse:
    """Create a group and attach the administrators that belong to the enterprise."""
    group = AdminGroupRepository(db).add(AdminGroup(enterprise_id=enterprise_id, name=payload.name))
    if payload.administrators:
        _set_members(db, group, payload.administrators)
    db.commit()
    db.refresh(group)
    logger.info("Created administrator group %s for enterprise %s", group.id, enterprise_id)
    return to_administrator_group_dto(group)


def update_administrator_group(
    db: Session, enterprise_id: int, group_id: int, payload: AdministratorGroupUpdate
) -> AdministratorGroupResponse:
    """Rename a group and, when ``administrators`` is given, replace its members."""
    group = _get_group(db, enterprise_id, group_id)
    group.name = payload.name
    if payload.administrators is not None:
        _set_members(db, group, payload.administrators)
    db.commit()
    db.refresh(group)
    return to_administrator_group_dto(group)


def patch_administrator_group(
    db: Session, enterprise_id: int, group_id: int, operations: list[dict]
) -> AdministratorGroupResponse:
    """Apply JSON Patch operations to the group's representation and save it."""
    current = to_administrator_group_dto(_get_group(db, enterprise_id, group_id))
    patched = apply_patch(current.model_dump(by_alias=True), operations)
    try:
        payload = AdministratorGroupUpdate.model_validate(patched)
    except ValidationError as err:
        raise InvalidRequestError(f"Patched administrator group is invalid: {err}") from err
    return update_administrator_group(db, enterprise_id, group_id, payload)


def delete_administrator_group(db: Session, enterprise_id: int, group_id: int) -> None:
    """Delete a group together with its memberships."""
    repo = AdminGroupRepository(db)
    group = repo.get(enterprise_id, group_id)
    if group is None:
        raise NotFoundError(f"Administrator group with ID {group_id} not found.")
    repo.delete(group)
    db.commit()
    logger.info("Deleted administrator group %s of enterprise %s", group_id, enterprise_id)
