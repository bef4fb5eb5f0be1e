"""Enterprise-wide console settings."""
from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from pager_admin.repositories.enterprise_repo import EnterpriseRepository
from pager_admin.schemas.settings import SettingsResponse, SettingsUpdate
from pager_admin.services.errors import NotAcceptableError, NotFoundError

__all__ = ["get_settings", "update_settings"]

logger = logging.getLogger(__name__)


def get_settings(db: Session, enterprise_id: int) -> SettingsResponse:
    enterprise = EnterpriseRepository(db).get(enterprise_id)
    if enterprise is None:
        raise NotFoundError(f"Enterprise {enterprise_id} not found.")
    return SettingsResponse(
        on_call_reminders=enterprise.on_call_reminders,
        two_factor_authentication=enterprise.two_factor_authentication,
        dispatcher_session_timeout=enterprise.logout_timeout or 0,
    )


def update_settings(db: Session, enterprise_id: int, payload: SettingsUpdate) -> None:
    """Store the provided settings.

    Raises:
        NotAcceptableError: If the enterprise does not exist.
    """
    enterprise = EnterpriseRepository(db).get(enterprise_id)
    if enterprise is None:
        raise NotAcceptableError("Could not update settings.")
    if payload.on_call_reminders is not None:
        enterprise.on_call_reminders = payload.on_call_reminders
    if payload.two_factor_authentication is not None:
        enterprise.two_factor_authentication = payload.two_factor_authentication
    if payload.dispatcher_session_timeout is not None:
        enterprise.logout_timeout = payload.dispatcher_session_timeout
    db.commit()
    logger.info("Updated settings of enterprise %s", enterprise_id)
