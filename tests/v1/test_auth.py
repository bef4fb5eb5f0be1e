# tests/v1/test_auth.py
from __future__ import annotations

import pytest
from fastapi import status

from pager_admin.models import PublicApiToken

PROTECTED = [
    "/api/v1/administrators/",
    "/api/v1/administrators-groups/",
    "/api/v1/contacts/",
    "/api/v1/contact-groups/",
    "/api/v1/contacts-status/",
    "/api/v1/templates/",
    "/api/v1/settings/",
]


@pytest.mark.parametrize("url", PROTECTED)
def test_missing_token_is_rejected(client, url) -> None:
    response = client.get(url)
    assert response.status_code == status.HTTP_401_UNAUTHORIZED
    assert response.headers["www-authenticate"] == "Bearer"


def test_unknown_token_is_rejected(client, enterprise) -> None:
    response = client.get("/api/v1/contacts/", headers={"Authorization": "Bearer nope"})
    assert response.status_code == status.HTTP_401_UNAUTHORIZED


def test_inactive_token_is_rejected(client, db_session, enterprise, auth_headers) -> None:
    db_session.query(PublicApiToken).update({"active": False})
    db_session.flush()

    response = client.get("/api/v1/contacts/", headers=auth_headers)
    assert response.status_code == status.HTTP_401_UNAUTHORIZED


def test_valid_token_is_accepted(client, auth_headers) -> None:
    response = client.get("/api/v1/contacts/", headers=auth_headers)
    assert response.status_code == status.HTTP_200_OK


def test_health_and_root_are_public(client) -> None:
    assert client.get("/health").json() == {"status": "ok"}
    root = client.get("/")
    assert root.status_code == status.HTTP_200_OK
    assert root.json()["docs"] == "/docs"
