# src/pager_admin/schemas/settings.py
"""Enterprise settings Pydantic schemas."""
from __future__ import annotations

from pydantic import Field

from .common import ApiModel


class SettingsResponse(ApiModel):
    on_call_reminders: bool
    two_factor_authentication: bool
    dispatcher_session_timeout: int = Field(..., description="Console time out in minutes")


class SettingsUpdate(ApiModel):
    on_call_reminders: bool | None = None
    two_factor_authentication: bool | None = None
    dispatcher_session_timeout: int | None = Field(None, ge=0)
