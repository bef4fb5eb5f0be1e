# tests/services/test_opid.py
from __future__ import annotations

import pytest

from pager_admin.services.errors import ConflictError
from pager_admin.services.opid import opid_mask, reserve_opid


@pytest.mark.parametrize(
    ("opid", "mask"),
    [
        ("Unit-42", "unit42"),
        ("  FIRE crew  ", "firecrew"),
        ("abc_def.ghi", "abcdefghi"),
        ("already", "already"),
    ],
)
def test_opid_mask(opid, mask) -> None:
    assert opid_mask(opid) == mask


def test_reserve_free_opid(db_session) -> None:
    assert reserve_opid(db_session, "Brand New") == "brandnew"


def test_reserve_rejects_empty_mask(db_session) -> None:
    with pytest.raises(ConflictError):
        reserve_opid(db_session, "--!!--")


def test_contacts_and_groups_share_namespace(db_session, enterprise, make_account, make_pager_group) -> None:
    make_account(enterprise.id, pager_number="medic1")
    group = make_pager_group(enterprise.id, "Engines", opid="engine-1")

    with pytest.raises(ConflictError):
        reserve_opid(db_session, "MEDIC 1")
    with pytest.raises(ConflictError):
        reserve_opid(db_session, "Engine1")
    assert reserve_opid(db_session, "Engine1", skip_group_id=group.id) == "engine1"


def test_namespace_spans_enterprises(db_session, other_enterprise, make_account) -> None:
    make_account(other_enterprise.id, pager_number="shared")
    with pytest.raises(ConflictError):
        reserve_opid(db_session, "Shared")
