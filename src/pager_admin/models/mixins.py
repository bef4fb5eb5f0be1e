"""Shared model behaviour."""
from __future__ import annotations

from typing import ClassVar


class SearchableMixin:
    """Expose the text columns a list search is matched against.

    Subclasses name their columns in ``__search_fields__``; list endpoints
    consume :meth:`searchable_values` without knowing the concrete model.
    """

    __search_fields__: ClassVar[tuple[str, ...]] = ()

    def searchable_values(self) -> tuple[str | None, ...]:
        """Return the current values of the searchable columns."""
        return tuple(getattr(self, name) for name in self.__search_fields__)
