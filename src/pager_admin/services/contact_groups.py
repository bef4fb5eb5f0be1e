"""Contact group management, including escalation and fail-over settings."""
from __future__ import annotations

import datetime
import logging
from collections.abc import Iterable

from pydantic import ValidationError
from sqlalchemy.orm import Session

from pager_admin.models.pager_group import (
    ESCALATION_FACTOR_DELIVERED,
    ESCALATION_FACTOR_READ,
    ESCALATION_FACTOR_REPLIED,
    PagerGroup,
    PagerGroupMember,
)
from pager_admin.pagination import Page, SearchableSource, TokenCodec, paginate
from pager_admin.repositories.account_repo import AccountRepository
from pager_admin.repositories.pager_group_repo import PagerGroupRepository
from pager_admin.schemas.contact_group import (
    ContactGroupCreate,
    ContactGroupMember,
    ContactGroupResponse,
    ContactGroupUpdate,
    EscalationFactor,
    EscalationInterval,
    GroupFailOver,
)
from pager_admin.services.errors import InvalidRequestError, NotFoundError
from pager_admin.services.opid import reserve_opid
from pager_admin.services.patching import apply_patch

__all__ = [
    "ContactGroupSource",
    "create_contact_group",
    "get_contact_group",
    "list_contact_groups",
    "patch_contact_group",
    "update_contact_group",
]

logger = logging.getLogger(__name__)

_INTERVAL_MINUTES: dict[EscalationInterval, int | None] = {
    EscalationInterval.NONE: None,
    EscalationInterval.MINUTES_1: 1,
    EscalationInterval.MINUTES_2: 2,
    EscalationInterval.MINUTES_3: 3,
    EscalationInterval.MINUTES_5: 5,
    EscalationInterval.MINUTES_10: 10,
    EscalationInterval.MINUTES_15: 15,
    EscalationInterval.MINUTES_20: 20,
    EscalationInterval.MINUTES_25: 25,
    EscalationInterval.MINUTES_30: 30,
    EscalationInterval.MINUTES_35: 35,
    EscalationInterval.MINUTES_40: 40,
    EscalationInterval.MINUTES_45: 45,
    EscalationInterval.MINUTES_50: 50,
    EscalationInterval.MINUTES_55: 55,
    EscalationInterval.HOUR_1: 60,
}
_MINUTES_INTERVAL = {minutes: label for label, minutes in _INTERVAL_MINUTES.items()}

_FACTOR_CODES: dict[EscalationFactor, int | None] = {
    EscalationFactor.NONE: None,
    EscalationFactor.DELIVERED: ESCALATION_FACTOR_DELIVERED,
    EscalationFactor.READ: ESCALATION_FACTOR_READ,
    EscalationFactor.REPLIED: ESCALATION_FACTOR_REPLIED,
}
_CODE_FACTORS = {code: label for label, code in _FACTOR_CODES.items()}


def _split(value: str | None) -> list[str]:
    if not value:
        return []
    return [part.strip() for part in value.split(";") if part.strip()]


def _join(values: Iterable[object]) -> str | None:
    joined = ";".join(str(value) for value in values)
    return joined or None


def to_contact_group_dto(group: PagerGroup) -> ContactGroupResponse:
    """Map a contact group row to its API representation."""
    return ContactGroupResponse(
        id=group.id,
        opid=group.pager_number,
        name=group.name,
        description=group.description,
        contacts=[
            ContactGroupMember(contact_id=member.account_id, order=member.escalation_order)
            for member in group.members
        ],
        escalation=group.escalation,
        escalation_interval=_MINUTES_INTERVAL.get(group.escalation_interval, EscalationInterval.NONE),
        escalation_factor=_CODE_FACTORS.get(group.escalation_factor, EscalationFactor.NONE),
        fail_over=GroupFailOver(
            include_original_message=group.fail_over_include_original,
            emails=_split(group.fail_report_email),
            contacts=[int(value) for value in _split(group.fail_over_opids) if value.isdigit()],
            groups=[int(value) for value in _split(group.fail_over_group_opids) if value.isdigit()],
        ),
    )


class ContactGroupSource(SearchableSource[PagerGroup, ContactGroupResponse]):
    """Contact groups of an enterprise, searched by OPID and name."""

    cursor_key = "lastGroupId"

    def __init__(self, db: Session) -> None:
        self.repo = PagerGroupRepository(db)

    def fetch_candidates_after(self, enterprise_id: int, last_id: int) -> Iterable[PagerGroup]:
        return self.repo.list_after(enterprise_id, last_id)

    def to_dto(self, record: PagerGroup) -> ContactGroupResponse:
        return to_contact_group_dto(record)


def list_contact_groups(
    db: Session,
    codec: TokenCodec,
    *,
    enterprise_id: int,
    search: str = "",
    page_token: str | None = None,
    limit: int = 10,
) -> Page[ContactGroupResponse]:
    """Return one page of contact groups matching ``search``."""
    return paginate(
        ContactGroupSource(db),
        enterprise_id=enterprise_id,
        search=search,
        page_token=page_token,
        limit=limit,
        codec=codec,
    )


def _get_group(db: Session, enterprise_id: int, group_id: int) -> PagerGroup:
    group = PagerGroupRepository(db).get(enterprise_id, group_id)
    if group is None:
        raise NotFoundError(f"Contact group with ID {group_id} not found.")
    return group


def get_contact_group(db: Session, enterprise_id: int, group_id: int) -> ContactGroupResponse:
    return to_contact_group_dto(_get_group(db, enterprise_id, group_id))


def _set_members(db: Session, group: PagerGroup, members: list[ContactGroupMember]) -> None:
    """Replace the group's members; contacts outside the enterprise are skipped."""
    orders = {member.contact_id: member.order for member in members}
    allowed = AccountRepository(db).ids_in_enterprise(group.enterprise_id, orders)
    for existing in list(group.members):
        if existing.account_id in allowed:
            existing.escalation_order = orders[existing.account_id]
        else:
            group.members.remove(existing)
    present = {existing.account_id for existing in group.members}
    for account_id in sorted(allowed - present):
        group.members.append(
            PagerGroupMember(account_id=account_id, escalation_order=orders[account_id])
        )


def _apply_payload(group: PagerGroup, payload: ContactGroupCreate, mask: str) -> None:
    group.pager_number = payload.opid
    group.alternative_pager_number = mask
    group.name = payload.name
    group.description = payload.description
    group.escalation = payload.escalation
    group.escalation_interval = _INTERVAL_MINUTES[payload.escalation_interval]
    group.escalation_factor = _FACTOR_CODES[payload.escalation_factor]
    fail_over = payload.fail_over or GroupFailOver()
    group.fail_over_include_original = fail_over.include_original_message
    group.fail_report_email = _join(fail_over.emails)
    group.fail_over_opids = _join(fail_over.contacts)
    group.fail_over_group_opids = _join(fail_over.groups)
    group.latest_revision = datetime.datetime.now(datetime.timezone.utc)


def create_contact_group(
    db: Session, enterprise_id: int, payload: ContactGroupCreate
) -> ContactGroupResponse:
    """Create a contact group.

    Raises:
        ConflictError: If the OPID mask is already used by a contact or group.
    """
    mask = reserve_opid(db, payload.opid)
    group = PagerGroup(enterprise_id=enterprise_id)
    _apply_payload(group, payload, mask)
    PagerGroupRepository(db).add(group)
    if payload.contacts:
        _set_members(db, group, payload.contacts)
    db.commit()
    db.refresh(group)
    logger.info("Created contact group %s for enterprise %s", group.id, enterprise_id)
    return to_contact_group_dto(group)


def update_contact_group(
    db: Session, enterprise_id: int, group_id: int, payload: ContactGroupUpdate
) -> ContactGroupResponse:
    """Replace a contact group's settings, and its members when ``contacts`` is given."""
    group = _get_group(db, enterprise_id, group_id)
    mask = reserve_opid(db, payload.opid, skip_group_id=group.id)
    _apply_payload(group, payload, mask)
    if payload.contacts is not None:
        _set_members(db, group, payload.contacts)
    db.commit()
    db.refresh(group)
    return to_contact_group_dto(group)


def patch_contact_group(
    db: Session, enterprise_id: int, group_id: int, operations: list[dict]
) -> ContactGroupResponse:
    """Apply JSON Patch operations to the group's representation and save it."""
    current = to_contact_group_dto(_get_group(db, enterprise_id, group_id))
    patched = apply_patch(current.model_dump(by_alias=True, mode="json"), operations)
    try:
        payload = ContactGroupUpdate.model_validate(patched)
    except ValidationError as err:
        raise InvalidRequestError(f"Patched contact group is invalid: {err}") from err
    return update_contact_group(db, enterprise_id, group_id, payload)
