# src/pager_admin/api/v1/endpoints/settings.py
"""Enterprise settings endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Response, status

from pager_admin.api.v1.dependencies import EnterpriseDep, SessionDep
from pager_admin.schemas.settings import SettingsResponse, SettingsUpdate
from pager_admin.services import enterprise_settings as service

router = APIRouter(prefix="/settings", tags=["settings"])


@router.get("/", response_model=SettingsResponse)
async def get_settings(enterprise_id: EnterpriseDep, db: SessionDep) -> SettingsResponse:
    """Return the enterprise's console settings."""
    return service.get_settings(db, enterprise_id)


@router.patch(
    "/",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
async def update_settings(
    payload: SettingsUpdate,
    enterprise_id: EnterpriseDep,
    db: SessionDep,
) -> Response:
    """Update the provided settings."""
    service.update_settings(db, enterprise_id, payload)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
