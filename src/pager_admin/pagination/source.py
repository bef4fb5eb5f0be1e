"""Adapter contract between list endpoints and the pagination loop."""
from __future__ import annotations

from collections.abc import Iterable
from typing import Any, Generic, Protocol, TypeVar, runtime_checkable

__all__ = ["CandidateRecord", "ListSource", "SearchableSource", "matches_search"]


@runtime_checkable
class CandidateRecord(Protocol):
    """Row that can be paged and searched."""

    id: int

    def searchable_values(self) -> tuple[str | None, ...]:
        ...


RecordT = TypeVar("RecordT", bound=CandidateRecord)
ItemT = TypeVar("ItemT")


class ListSource(Protocol[RecordT, ItemT]):
    """What the pagination loop needs from a resource."""

    cursor_key: str

    def fetch_candidates_after(self, enterprise_id: int, last_id: int) -> Iterable[RecordT]:
        ...

    def matches(self, record: RecordT, search: str) -> bool:
        ...

    def to_dto(self, record: RecordT) -> ItemT:
        ...


def matches_search(values: Iterable[Any], search: str | None) -> bool:
    """Return True if ``search`` is blank or a substring of any value.

    Comparison is case-insensitive; ``None`` values never match.
    """
    if not search:
        return True
    needle = search.lower()
    return any(value is not None and needle in str(value).lower() for value in values)


class SearchableSource(Generic[RecordT, ItemT]):
    """Base adapter with the standard search predicate.

    Subclasses set ``cursor_key`` and implement candidate fetching and DTO
    mapping.
    """

    cursor_key: str = ""

    def fetch_candidates_after(self, enterprise_id: int, last_id: int) -> Iterable[RecordT]:
        raise NotImplementedError

    def matches(self, record: RecordT, search: str) -> bool:
        return matches_search(record.searchable_values(), search)

    def to_dto(self, record: RecordT) -> ItemT:
        raise NotImplementedError
