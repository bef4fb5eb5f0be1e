"""Shared Pydantic schemas for common API elements."""
from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    """Base model serialising field names as camelCase."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class PageMetadata(ApiModel):
    """Continuation data returned by cursor-paginated list endpoints."""

    next_page_token: str | None = Field(
        None, description="Opaque token for the next page, null on the last page."
    )


class OffsetMetadata(ApiModel):
    """Continuation data returned by offset-paginated list endpoints."""

    has_more_data: bool = Field(False, description="True when a further page exists.")


class IdResponse(ApiModel):
    """Identifier of a newly created resource."""

    id: int | str


class PatchOperation(ApiModel):
    """Single RFC 6902 JSON Patch operation."""

    op: Literal["add", "remove", "replace", "move", "copy", "test"]
    path: str
    value: Any = None
    from_: str | None = Field(None, alias="from")

    def as_operation(self) -> dict[str, Any]:
        """Return the operation in the wire form expected by ``jsonpatch``."""
        return self.model_dump(by_alias=True, exclude_unset=True)
