# tests/test_paginate.py
"""Tests for the cursor and offset pagination loops."""
from __future__ import annotations

from dataclasses import dataclass

import pytest

from pager_admin.pagination import (
    CandidateRecord,
    SearchableSource,
    matches_search,
    paginate,
    paginate_offset,
)


@dataclass
class Row:
    id: int
    name: str
    email: str | None = None

    def searchable_values(self) -> tuple[str | None, ...]:
        return (self.name, self.email)


class RowSource(SearchableSource[Row, int]):
    """In-memory source that records how far the scan went."""

    cursor_key = "lastRowId"

    def __init__(self, rows: list[Row]) -> None:
        self.rows = rows
        self.scanned: list[int] = []
        self.enterprise_ids: list[int] = []

    def fetch_candidates_after(self, enterprise_id: int, last_id: int):
        self.enterprise_ids.append(enterprise_id)
        for row in sorted(self.rows, key=lambda r: r.id):
            if row.id > last_id:
                self.scanned.append(row.id)
                yield row

    def to_dto(self, record: Row) -> int:
        return record.id


def _rows(ids, name="row") -> list[Row]:
    return [Row(id=i, name=f"{name}-{i}") for i in ids]


def _page(source, codec, token=None, limit=10, search=""):
    return paginate(
        source,
        enterprise_id=1,
        search=search,
        page_token=token,
        limit=limit,
        codec=codec,
    )


def test_row_satisfies_candidate_protocol() -> None:
    assert isinstance(Row(id=1, name="x"), CandidateRecord)


def test_twenty_five_rows_in_three_pages(codec) -> None:
    source = RowSource(_rows(range(1, 26)))

    first = _page(source, codec)
    assert first.items == list(range(1, 11))
    assert first.next_page_token is not None

    second = _page(source, codec, token=first.next_page_token)
    assert second.items == list(range(11, 21))
    assert second.next_page_token is not None

    third = _page(source, codec, token=second.next_page_token)
    assert third.items == list(range(21, 26))
    assert third.next_page_token is None


def test_short_list_fits_one_page(codec) -> None:
    page = _page(RowSource(_rows(range(1, 6))), codec)
    assert page.items == [1, 2, 3, 4, 5]
    assert page.next_page_token is None


def test_empty_source(codec) -> None:
    page = _page(RowSource([]), codec)
    assert page.items == []
    assert page.next_page_token is None


def test_exactly_limit_rows_has_no_token(codec) -> None:
    page = _page(RowSource(_rows(range(1, 11))), codec)
    assert len(page.items) == 10
    assert page.next_page_token is None


def test_full_page_never_exceeds_limit(codec) -> None:
    page = _page(RowSource(_rows(range(1, 12))), codec)
    assert page.items == list(range(1, 11))
    assert page.next_page_token is not None


def test_token_points_at_last_emitted_id(codec) -> None:
    page = _page(RowSource(_rows([3, 8, 15, 40])), codec, limit=2)
    assert page.items == [3, 8]
    assert codec.decode(page.next_page_token) == {"lastRowId": 8}


def test_scan_stops_at_first_surplus_match(codec) -> None:
    source = RowSource(_rows(range(1, 101)))
    _page(source, codec, limit=3)
    assert source.scanned == [1, 2, 3, 4]


def test_following_tokens_yields_every_match_once(codec) -> None:
    ids = [2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31]
    source = RowSource(_rows(ids))
    seen: list[int] = []
    token = None
    while True:
        page = _page(source, codec, token=token, limit=3)
        seen.extend(page.items)
        token = page.next_page_token
        if token is None:
            break
    assert seen == ids


def test_search_composes_with_paging(codec) -> None:
    rows = [Row(id=i, name="alpha" if i % 3 == 0 else "beta") for i in range(1, 31)]
    source = RowSource(rows)

    first = _page(source, codec, limit=4, search="ALPHA")
    assert first.items == [3, 6, 9, 12]
    assert first.next_page_token is not None

    second = _page(source, codec, token=first.next_page_token, limit=4, search="alpha")
    assert second.items == [15, 18, 21, 24]

    third = _page(source, codec, token=second.next_page_token, limit=4, search="alpha")
    assert third.items == [27, 30]
    assert third.next_page_token is None


def test_non_matching_trailing_rows_do_not_produce_token(codec) -> None:
    rows = [Row(id=1, name="match"), Row(id=2, name="match"), Row(id=3, name="other")]
    page = _page(RowSource(rows), codec, limit=2, search="match")
    assert page.items == [1, 2]
    assert page.next_page_token is None


def test_invalid_token_restarts_from_beginning(codec) -> None:
    page = _page(RowSource(_rows(range(1, 4))), codec, token="not-a-valid-token")
    assert page.items == [1, 2, 3]


def test_foreign_cursor_key_restarts_from_beginning(codec) -> None:
    token = codec.encode({"lastContactId": 2})
    page = _page(RowSource(_rows(range(1, 4))), codec, token=token)
    assert page.items == [1, 2, 3]


def test_outbound_token_keeps_other_keys(codec) -> None:
    token = codec.encode({"lastRowId": 1, "lastContactId": 9})
    page = _page(RowSource(_rows(range(1, 6))), codec, token=token, limit=2)
    assert page.items == [2, 3]
    assert codec.decode(page.next_page_token) == {"lastRowId": 3, "lastContactId": 9}


def test_zero_limit_returns_token_at_current_cursor(codec) -> None:
    page = _page(RowSource(_rows(range(1, 4))), codec, limit=0)
    assert page.items == []
    assert page.next_page_token is not None
    assert codec.decode(page.next_page_token) == {}


def test_zero_limit_on_empty_source_has_no_token(codec) -> None:
    page = _page(RowSource([]), codec, limit=0)
    assert page.items == []
    assert page.next_page_token is None


def test_negative_limit_behaves_like_zero(codec) -> None:
    page = _page(RowSource(_rows(range(1, 4))), codec, limit=-5)
    assert page.items == []
    assert page.next_page_token is not None


def test_enterprise_id_is_passed_to_source(codec) -> None:
    source = RowSource(_rows([1]))
    paginate(source, enterprise_id=77, search="", page_token=None, limit=10, codec=codec)
    assert source.enterprise_ids == [77]


def test_fetch_errors_propagate(codec) -> None:
    class BrokenSource(RowSource):
        def fetch_candidates_after(self, enterprise_id, last_id):
            raise RuntimeError("database unavailable")

    with pytest.raises(RuntimeError):
        _page(BrokenSource([]), codec)


@pytest.mark.parametrize(
    ("values", "search", "expected"),
    [
        (("Alice", "alice@example.test"), "", True),
        (("Alice", "alice@example.test"), None, True),
        (("Alice", "alice@example.test"), "LIC", True),
        (("Alice", "alice@example.test"), "EXAMPLE", True),
        (("Alice", "alice@example.test"), "bob", False),
        ((None, "bob@example.test"), "bob", True),
        ((None, None), "x", False),
    ],
)
def test_matches_search(values, search, expected) -> None:
    assert matches_search(values, search) is expected


class TestPaginateOffset:
    """Page-index pagination used by the contacts status overview."""

    @staticmethod
    def _run(rows, offset, limit, search=""):
        return paginate_offset(
            rows,
            search=search,
            offset=offset,
            limit=limit,
            matches=lambda row, term: matches_search(row.searchable_values(), term),
            to_item=lambda row: row.id,
        )

    def test_first_page(self) -> None:
        page = self._run(_rows(range(1, 26)), offset=0, limit=10)
        assert page.items == list(range(1, 11))
        assert page.has_more_data is True

    def test_offset_is_page_index(self) -> None:
        page = self._run(_rows(range(1, 26)), offset=2, limit=10)
        assert page.items == list(range(21, 26))
        assert page.has_more_data is False

    def test_exact_fit_has_no_more_data(self) -> None:
        page = self._run(_rows(range(1, 11)), offset=0, limit=10)
        assert page.has_more_data is False

    def test_skips_only_matching_rows(self) -> None:
        rows = [Row(id=i, name="keep" if i % 2 else "drop") for i in range(1, 11)]
        page = self._run(rows, offset=1, limit=2, search="keep")
        assert page.items == [5, 7]
        assert page.has_more_data is True

    def test_offset_past_the_end(self) -> None:
        page = self._run(_rows(range(1, 4)), offset=5, limit=10)
        assert page.items == []
        assert page.has_more_data is False
