"""Business logic for the Pager Admin resources."""

from .errors import ConflictError, InvalidRequestError, NotAcceptableError, NotFoundError, ServiceError

__all__ = [
    "ConflictError",
    "InvalidRequestError",
    "NotAcceptableError",
    "NotFoundError",
    "ServiceError",
]
