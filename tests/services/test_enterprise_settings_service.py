# tests/services/test_enterprise_settings_service.py
from __future__ import annotations

import pytest

from pager_admin.schemas.settings import SettingsUpdate
from pager_admin.services import enterprise_settings as service
from pager_admin.services.errors import NotAcceptableError, NotFoundError


def test_defaults(db_session, enterprise) -> None:
    current = service.get_settings(db_session, enterprise.id)
    assert current.on_call_reminders is False
    assert current.two_factor_authentication is False
    assert current.dispatcher_session_timeout == 0


def test_update_applies_only_given_values(db_session, enterprise) -> None:
    service.update_settings(db_session, enterprise.id, SettingsUpdate(dispatcher_session_timeout=30))
    service.update_settings(db_session, enterprise.id, SettingsUpdate(on_call_reminders=True))

    current = service.get_settings(db_session, enterprise.id)
    assert current.dispatcher_session_timeout == 30
    assert current.on_call_reminders is True
    assert current.two_factor_authentication is False
    assert enterprise.logout_timeout == 30


def test_missing_enterprise(db_session) -> None:
    with pytest.raises(NotFoundError):
        service.get_settings(db_session, 9999)
    with pytest.raises(NotAcceptableError):
        service.update_settings(db_session, 9999, SettingsUpdate(on_call_reminders=True))
