"""JSON Patch (RFC 6902) application for PATCH endpoints."""
from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from typing import Any

import jsonpatch
import jsonpointer

from pager_admin.services.errors import InvalidRequestError

__all__ = ["FORBIDDEN_PATHS", "apply_patch", "check_forbidden_paths"]

logger = logging.getLogger(__name__)

FORBIDDEN_PATHS: tuple[str, ...] = ("/id",)


def check_forbidden_paths(
    operations: Iterable[dict[str, Any]],
    forbidden: Sequence[str] = FORBIDDEN_PATHS,
) -> None:
    """Reject operations that target (or read from) an immutable path."""
    for operation in operations:
        for key in ("path", "from"):
            path = operation.get(key)
            if isinstance(path, str) and any(
                path == prefix or path.startswith(prefix + "/") for prefix in forbidden
            ):
                raise InvalidRequestError(f"Modifying {path} is not allowed.")


def apply_patch(document: dict[str, Any], operations: list[dict[str, Any]]) -> dict[str, Any]:
    """Return a patched copy of ``document``.

    Raises:
        InvalidRequestError: If a path is forbidden or the patch cannot be applied.
    """
    check_forbidden_paths(operations)
    try:
        return jsonpatch.apply_patch(document, operations, in_place=False)
    except (jsonpatch.JsonPatchException, jsonpointer.JsonPointerException) as err:
        logger.info("Rejected patch: %s", err)
        raise InvalidRequestError(f"Patch could not be applied: {err}") from err
