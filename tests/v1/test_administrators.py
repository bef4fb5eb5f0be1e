# tests/v1/test_administrators.py
from __future__ import annotations

from fastapi import status

URL = "/api/v1/administrators/"


def _create_body(**overrides) -> dict:
    body = {
        "password": "s3cret",
        "firstName": "Dana",
        "lastName": "Scully",
        "email": "dana@acme.test",
        "phoneNumber": "+15551234567",
        "superAdmin": False,
        "permissions": {"contactAdd": True, "viewReports": True},
    }
    body.update(overrides)
    return body


def test_list_walks_every_page(client, auth_headers, enterprise, make_dispatcher) -> None:
    ids = [make_dispatcher(enterprise.id).id for _ in range(25)]

    seen: list[int] = []
    pages = 0
    params = {}
    while True:
        response = client.get(URL, headers=auth_headers, params=params)
        assert response.status_code == status.HTTP_200_OK
        body = response.json()
        seen.extend(item["id"] for item in body["administrators"])
        pages += 1
        token = body["metadata"]["nextPageToken"]
        if token is None:
            break
        params = {"nextPageToken": token}

    assert seen == ids
    assert pages == 3


def test_list_limit_and_search(client, auth_headers, enterprise, make_dispatcher) -> None:
    first = make_dispatcher(enterprise.id, last_name="Reyes")
    make_dispatcher(enterprise.id)
    second = make_dispatcher(enterprise.id, email="reyes.m@acme.test")

    response = client.get(URL, headers=auth_headers, params={"search": "REYES", "limit": 1})
    body = response.json()
    assert [item["id"] for item in body["administrators"]] == [first.id]

    response = client.get(
        URL,
        headers=auth_headers,
        params={"search": "reyes", "limit": 1, "nextPageToken": body["metadata"]["nextPageToken"]},
    )
    body = response.json()
    assert [item["id"] for item in body["administrators"]] == [second.id]
    assert body["metadata"]["nextPageToken"] is None


def test_list_with_garbage_token_starts_over(client, auth_headers, enterprise, make_dispatcher) -> None:
    dispatcher = make_dispatcher(enterprise.id)
    response = client.get(URL, headers=auth_headers, params={"nextPageToken": "garbage"})
    assert response.status_code == status.HTTP_200_OK
    assert [item["id"] for item in response.json()["administrators"]] == [dispatcher.id]


def test_list_rejects_out_of_range_limit(client, auth_headers) -> None:
    assert client.get(URL, headers=auth_headers, params={"limit": -1}).status_code == (
        status.HTTP_422_UNPROCESSABLE_ENTITY
    )
    assert client.get(URL, headers=auth_headers, params={"limit": 100000}).status_code == (
        status.HTTP_422_UNPROCESSABLE_ENTITY
    )


def test_list_is_tenant_scoped(client, auth_headers, other_enterprise, make_dispatcher) -> None:
    make_dispatcher(other_enterprise.id)
    body = client.get(URL, headers=auth_headers).json()
    assert body["administrators"] == []
    assert body["metadata"]["nextPageToken"] is None


def test_create_and_get(client, auth_headers) -> None:
    response = client.post(URL, headers=auth_headers, json=_create_body())
    assert response.status_code == status.HTTP_201_CREATED
    created = response.json()
    assert created["firstName"] == "Dana"
    assert created["permissions"]["contactAdd"] is True
    assert created["permissions"]["groupCreate"] is False
    assert "password" not in created

    fetched = client.get(f"{URL}{created['id']}", headers=auth_headers)
    assert fetched.status_code == status.HTTP_200_OK
    assert fetched.json() == created


def test_create_duplicate_email(client, auth_headers, enterprise, make_dispatcher) -> None:
    make_dispatcher(enterprise.id, email="dana@acme.test")
    response = client.post(URL, headers=auth_headers, json=_create_body())
    assert response.status_code == status.HTTP_406_NOT_ACCEPTABLE
    assert "already exist" in response.json()["detail"]


def test_create_requires_fields(client, auth_headers) -> None:
    body = _create_body()
    del body["email"]
    response = client.post(URL, headers=auth_headers, json=body)
    assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY


def test_update(client, auth_headers, enterprise, make_dispatcher) -> None:
    dispatcher = make_dispatcher(enterprise.id, first_name="Before")

    response = client.put(
        f"{URL}{dispatcher.id}",
        headers=auth_headers,
        json={"firstName": "After", "permissions": {"editSchedule": True}},
    )
    assert response.status_code == status.HTTP_200_OK
    body = response.json()
    assert body["firstName"] == "After"
    assert body["lastName"] == dispatcher.last_name
    assert body["permissions"]["editSchedule"] is True


def test_get_unknown(client, auth_headers) -> None:
    response = client.get(f"{URL}999", headers=auth_headers)
    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json()["detail"] == "Administrator with ID 999 not found."


def test_delete(client, auth_headers, enterprise, make_dispatcher) -> None:
    dispatcher = make_dispatcher(enterprise.id)

    response = client.delete(f"{URL}{dispatcher.id}", headers=auth_headers)
    assert response.status_code == status.HTTP_204_NO_CONTENT
    assert response.content == b""

    assert client.get(f"{URL}{dispatcher.id}", headers=auth_headers).status_code == (
        status.HTTP_404_NOT_FOUND
    )


def test_delete_super_admin(client, auth_headers, enterprise, make_dispatcher) -> None:
    owner = make_dispatcher(enterprise.id, email=enterprise.super_admin_email)
    response = client.delete(f"{URL}{owner.id}", headers=auth_headers)
    assert response.status_code == status.HTTP_406_NOT_ACCEPTABLE
