"""Cursor pagination shared by the list endpoints."""

from .cursor import CursorState
from .pager import OffsetPage, Page, paginate, paginate_offset
from .source import CandidateRecord, ListSource, SearchableSource, matches_search
from .token import TokenCodec

__all__ = [
    "CandidateRecord",
    "CursorState",
    "ListSource",
    "OffsetPage",
    "Page",
    "SearchableSource",
    "TokenCodec",
    "matches_search",
    "paginate",
    "paginate_offset",
]
