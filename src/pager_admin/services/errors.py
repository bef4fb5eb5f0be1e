"""Exceptions raised by the service layer and mapped to HTTP responses."""
from __future__ import annotations

from fastapi import status

__all__ = [
    "ConflictError",
    "InvalidRequestError",
    "NotAcceptableError",
    "NotFoundError",
    "ServiceError",
]


class ServiceError(RuntimeError):
    """Base error carrying the HTTP status it should be reported with."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = "Internal server error"

    def __init__(self, detail: str | None = None) -> None:
        self.detail = detail or self.default_detail
        super().__init__(self.detail)


class NotFoundError(ServiceError):
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = "Not found"


class ConflictError(ServiceError):
    status_code = status.HTTP_409_CONFLICT
    default_detail = "Conflict"


class NotAcceptableError(ServiceError):
    status_code = status.HTTP_406_NOT_ACCEPTABLE
    default_detail = "Not acceptable"


class InvalidRequestError(ServiceError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Bad request"
