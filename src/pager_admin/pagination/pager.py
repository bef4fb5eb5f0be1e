"""Cursor and offset pagination over filtered record sources."""
from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from .cursor import CursorState
from .source import ListSource
from .token import TokenCodec

__all__ = ["OffsetPage", "Page", "paginate", "paginate_offset"]

logger = logging.getLogger(__name__)

ItemT = TypeVar("ItemT")
RecordT = TypeVar("RecordT")


@dataclass
class Page(Generic[ItemT]):
    """One page of a cursor-paginated list."""

    items: list[ItemT] = field(default_factory=list)
    next_page_token: str | None = None


@dataclass
class OffsetPage(Generic[ItemT]):
    """One page of an offset-paginated list."""

    items: list[ItemT] = field(default_factory=list)
    has_more_data: bool = False


def paginate(
    source: ListSource[Any, ItemT],
    *,
    enterprise_id: int,
    search: str | None,
    page_token: str | None,
    limit: int,
    codec: TokenCodec,
) -> Page[ItemT]:
    """Return the next page of ``source`` after the cursor in ``page_token``.

    Candidates are scanned in ascending id order starting strictly after the
    last id recorded under ``source.cursor_key``. Up to ``limit`` matching
    records are emitted; the first match beyond that stops the scan and the
    cursor (pointing at the last emitted id) is returned as the continuation
    token. When the source is exhausted first, the token is ``None``.

    Args:
        source: Resource adapter supplying candidates, predicate and mapping.
        enterprise_id: Tenant scope passed through to the source.
        search: Free-text filter; blank matches everything.
        page_token: Inbound continuation token; invalid tokens restart paging.
        limit: Maximum items to return; negative values count as zero.
        codec: Token codec used to decode and encode the cursor.
    """
    limit = max(limit, 0)
    cursor = CursorState.from_token(page_token, codec)
    last_id = cursor.get(source.cursor_key) or 0

    page: Page[ItemT] = Page()
    for record in source.fetch_candidates_after(enterprise_id, last_id):
        if not source.matches(record, search or ""):
            continue
        if len(page.items) < limit:
            page.items.append(source.to_dto(record))
            cursor.set(source.cursor_key, record.id)
        else:
            page.next_page_token = cursor.to_token()
            break

    logger.debug(
        "Paged %s: %d item(s), more=%s",
        source.cursor_key,
        len(page.items),
        page.next_page_token is not None,
    )
    return page


def paginate_offset(
    records: Iterable[RecordT],
    *,
    search: str | None,
    offset: int,
    limit: int,
    matches: Callable[[RecordT, str], bool],
    to_item: Callable[[RecordT], ItemT],
) -> OffsetPage[ItemT]:
    """Return page number ``offset`` of the records accepted by ``matches``.

    ``offset`` is a page index, so ``offset * limit`` matches are skipped.
    ``has_more_data`` is set when at least one further match exists.
    """
    limit = max(limit, 0)
    skip = max(offset, 0) * limit
    search = search or ""

    page: OffsetPage[ItemT] = OffsetPage()
    seen = 0
    for record in records:
        if not matches(record, search):
            continue
        seen += 1
        if seen <= skip:
            continue
        if len(page.items) < limit:
            page.items.append(to_item(record))
        else:
            page.has_more_data = True
            break
    return page
