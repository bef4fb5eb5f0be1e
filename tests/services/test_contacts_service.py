# tests/services/test_contacts_service.py
from __future__ import annotations

import pytest

from pager_admin.models.account import Account
from pager_admin.schemas.contact import ContactCreate, ContactStatus
from pager_admin.services import contacts as service
from pager_admin.services.errors import ConflictError, NotFoundError


def _payload(**overrides) -> ContactCreate:
    values = {
        "opid": "Unit-42",
        "first_name": "Rita",
        "last_name": "Hayes",
        "email": "rita@acme.test",
        "password": "pw",
        "phone_number": "+15557654321",
    }
    values.update(overrides)
    return ContactCreate(**values)


@pytest.mark.parametrize(
    ("pager_on", "expected"),
    [
        (None, ContactStatus.LOGGED_OFF),
        (False, ContactStatus.PAGER_OFF),
        (True, ContactStatus.LOGGED_IN),
    ],
)
def test_status_follows_device(db_session, enterprise, make_account, pager_on, expected) -> None:
    account = make_account(enterprise.id, pager_on=pager_on)
    assert service.get_contact(db_session, enterprise.id, account.id).status is expected


def test_dto_lists_group_names_sorted(db_session, enterprise, make_account, make_pager_group) -> None:
    account = make_account(enterprise.id)
    make_pager_group(enterprise.id, "Zulu", members=[account.id])
    make_pager_group(enterprise.id, "Alpha", members=[account.id])

    dto = service.get_contact(db_session, enterprise.id, account.id)
    assert dto.groups == ["Alpha", "Zulu"]


def test_list_searches_opid_email_and_names(db_session, codec, enterprise, make_account) -> None:
    by_opid = make_account(enterprise.id, pager_number="MEDIC-7")
    by_last_name = make_account(enterprise.id, last_name="Medici")
    make_account(enterprise.id, first_name="Other")

    page = service.list_contacts(db_session, codec, enterprise_id=enterprise.id, search="medic")
    assert [item.id for item in page.items] == [by_opid.id, by_last_name.id]


def test_list_pages_with_contact_cursor(db_session, codec, enterprise, make_account) -> None:
    ids = [make_account(enterprise.id).id for _ in range(5)]

    first = service.list_contacts(db_session, codec, enterprise_id=enterprise.id, limit=2)
    assert [item.id for item in first.items] == ids[:2]
    assert codec.decode(first.next_page_token) == {"lastContactId": ids[1]}

    rest = service.list_contacts(
        db_session, codec, enterprise_id=enterprise.id, page_token=first.next_page_token, limit=10
    )
    assert [item.id for item in rest.items] == ids[2:]
    assert rest.next_page_token is None


def test_create_contact(db_session, enterprise) -> None:
    contact_id = service.create_contact(db_session, enterprise.id, _payload())

    account = db_session.get(Account, contact_id)
    assert account.pager_number == "Unit-42"
    assert account.alternative_pager_number == "unit42"
    assert account.enterprise_id == enterprise.id


def test_create_duplicate_email(db_session, enterprise, make_account) -> None:
    make_account(enterprise.id, email="rita@acme.test")
    with pytest.raises(ConflictError):
        service.create_contact(db_session, enterprise.id, _payload())


def test_create_opid_collides_after_normalisation(db_session, enterprise, make_account) -> None:
    make_account(enterprise.id, pager_number="unit42")
    with pytest.raises(ConflictError):
        service.create_contact(db_session, enterprise.id, _payload(opid="UNIT 42"))


def test_create_opid_taken_by_group(db_session, enterprise, make_pager_group) -> None:
    make_pager_group(enterprise.id, "Units", opid="unit-42")
    with pytest.raises(ConflictError):
        service.create_contact(db_session, enterprise.id, _payload())


def test_delete_contact_is_soft(db_session, codec, enterprise, make_account) -> None:
    account = make_account(enterprise.id)

    service.delete_contact(db_session, enterprise.id, account.id)

    stored = db_session.get(Account, account.id)
    assert stored.deleted is True
    assert stored.active is False
    assert service.list_contacts(db_session, codec, enterprise_id=enterprise.id).items == []
    with pytest.raises(NotFoundError):
        service.delete_contact(db_session, enterprise.id, account.id)
