# tests/v1/test_templates.py
from __future__ import annotations

import pytest
from fastapi import status

URL = "/api/v1/templates/"


def test_crud(client, auth_headers) -> None:
    response = client.post(
        URL,
        headers=auth_headers,
        json={
            "name": "Evacuation",
            "subject": "Evacuate now",
            "predefinedReplies": ["Safe", "Need help"],
            "syncToDevice": True,
        },
    )
    assert response.status_code == status.HTTP_201_CREATED
    created = response.json()
    assert created["predefinedReplies"] == ["Safe", "Need help"]

    patched = client.patch(f"{URL}{created['id']}", headers=auth_headers, json={"body": "Use stairs"})
    assert patched.status_code == status.HTTP_200_OK
    assert patched.json()["body"] == "Use stairs"
    assert patched.json()["subject"] == "Evacuate now"

    assert client.delete(f"{URL}{created['id']}", headers=auth_headers).status_code == (
        status.HTTP_204_NO_CONTENT
    )
    assert client.get(f"{URL}{created['id']}", headers=auth_headers).status_code == (
        status.HTTP_404_NOT_FOUND
    )


def test_list_pages_and_search(client, auth_headers, enterprise, make_template) -> None:
    ids = [make_template(enterprise.id, f"Storm {n}").id for n in range(3)]
    make_template(enterprise.id, "Calm")

    first = client.get(URL, headers=auth_headers, params={"search": "storm", "limit": 2}).json()
    assert [t["id"] for t in first["templates"]] == ids[:2]

    second = client.get(
        URL,
        headers=auth_headers,
        params={"search": "storm", "limit": 2, "nextPageToken": first["metadata"]["nextPageToken"]},
    ).json()
    assert [t["id"] for t in second["templates"]] == ids[2:]
    assert second["metadata"]["nextPageToken"] is None


def test_create_requires_subject(client, auth_headers) -> None:
    response = client.post(URL, headers=auth_headers, json={"name": "No subject"})
    assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY


@pytest.mark.parametrize("field", ["name", "subject"])
def test_patch_rejects_null_required_field(
    client, auth_headers, enterprise, make_template, field
) -> None:
    template = make_template(enterprise.id, "Flood")

    response = client.patch(f"{URL}{template.id}", headers=auth_headers, json={field: None})
    assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY

    current = client.get(f"{URL}{template.id}", headers=auth_headers).json()
    assert current["name"] == "Flood"
    assert current["subject"] == "Flood subject"


def test_patch_allows_clearing_body(client, auth_headers, enterprise, make_template) -> None:
    template = make_template(enterprise.id, "Flood", body="Move uphill")

    response = client.patch(f"{URL}{template.id}", headers=auth_headers, json={"body": None})
    assert response.status_code == status.HTTP_200_OK
    assert response.json()["body"] is None
