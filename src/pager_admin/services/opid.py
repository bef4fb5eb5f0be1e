"""OPID normalisation and uniqueness checks shared by contacts and groups."""
from __future__ import annotations

import logging
import re

from sqlalchemy.orm import Session

from pager_admin.repositories.account_repo import AccountRepository
from pager_admin.repositories.pager_group_repo import PagerGroupRepository
from pager_admin.services.errors import ConflictError

__all__ = ["opid_mask", "reserve_opid"]

logger = logging.getLogger(__name__)

_NON_ALNUM = re.compile(r"[^0-9a-z]")


def opid_mask(opid: str) -> str:
    """Return the normalised form of an OPID (lower case, alphanumerics only)."""
    return _NON_ALNUM.sub("", opid.lower())


def reserve_opid(db: Session, opid: str, *, skip_group_id: int | None = None) -> str:
    """Return the mask for ``opid`` after checking nobody else uses it.

    Contacts and contact groups share one OPID namespace, so both tables are
    consulted. ``skip_group_id`` lets a group keep its own OPID on update.

    Raises:
        ConflictError: If the mask belongs to a contact or another group.
    """
    mask = opid_mask(opid)
    if not mask:
        raise ConflictError(f'OPID "{opid}" is not valid.')
    if AccountRepository(db).mask_in_use(mask):
        logger.debug("OPID mask %s already used by a contact", mask)
        raise ConflictError(f'OPID "{opid}" is already registered.')
    if PagerGroupRepository(db).mask_in_use(mask, exclude_id=skip_group_id):
        logger.debug("OPID mask %s already used by a group", mask)
        raise ConflictError(f'OPID mask "{mask}" for OPID {opid} is already registered.')
    return mask
