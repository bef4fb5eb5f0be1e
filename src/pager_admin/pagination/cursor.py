"""Request-local pagination cursor."""
from __future__ import annotations

from typing import Any

from .token import TokenCodec

__all__ = ["CursorState"]


class CursorState:
    """Mutable mapping of cursor keys to the last primary key emitted.

    One instance lives for the duration of a single list request. Each
    resource uses its own key so tokens from one list never steer another.
    """

    def __init__(self, codec: TokenCodec, values: dict[str, Any] | None = None) -> None:
        self._codec = codec
        self._values: dict[str, Any] = dict(values or {})

    @classmethod
    def init(cls, codec: TokenCodec) -> CursorState:
        """Return an empty cursor."""
        return cls(codec)

    @classmethod
    def from_token(cls, token: str | None, codec: TokenCodec) -> CursorState:
        """Return a cursor seeded from an inbound token (empty if invalid)."""
        return cls(codec, codec.decode(token))

    def set(self, key: str, value: Any) -> None:
        self._values[key] = value

    def get(self, key: str, default: Any = None) -> Any:
        return self._values.get(key, default)

    def to_token(self) -> str:
        """Serialise the cursor into a continuation token."""
        return self._codec.encode(self._values)

    def as_dict(self) -> dict[str, Any]:
        return dict(self._values)
