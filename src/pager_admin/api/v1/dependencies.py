"""Shared API dependencies for authentication and list parameters."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import Annotated

from fastapi import Depends, HTTPException, Query, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from pager_admin.core.security import hash_api_token
from pager_admin.core.settings import settings
from pager_admin.db.session import get_db
from pager_admin.pagination import TokenCodec
from pager_admin.repositories.enterprise_repo import EnterpriseRepository

logger = logging.getLogger(__name__)

# HTTP Bearer scheme for public API tokens
bearer_scheme = HTTPBearer(auto_error=False)

# Type alias for database session dependency
SessionDep = Annotated[Session, Depends(get_db)]


def get_enterprise_id(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
    db: SessionDep,
) -> int:
    """Resolve the enterprise owning the bearer token.

    Args:
        credentials: HTTP Bearer token credentials
        db: Database session

    Returns:
        Identifier of the enterprise the request is scoped to

    Raises:
        HTTPException: If the token is missing, unknown or inactive
    """
    if credentials is None or not credentials.credentials:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    enterprise_id = EnterpriseRepository(db).enterprise_id_for_token(
        hash_api_token(credentials.credentials)
    )
    if enterprise_id is None:
        logger.info("Rejected request with unknown API token")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Could not validate credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return enterprise_id


# Type alias for the authenticated enterprise
EnterpriseDep = Annotated[int, Depends(get_enterprise_id)]


@lru_cache
def get_token_codec() -> TokenCodec:
    """Return the continuation-token codec configured from settings."""
    return TokenCodec(settings.effective_pagination_secret, settings.pagination_algorithm)


TokenCodecDep = Annotated[TokenCodec, Depends(get_token_codec)]


@dataclass
class ListParams:
    """Query parameters shared by cursor-paginated list endpoints."""

    search: str
    page_token: str
    limit: int


def get_list_params(
    search: Annotated[str, Query(description="Case-insensitive text filter")] = "",
    next_page_token: Annotated[
        str, Query(alias="nextPageToken", description="Token from a previous page")
    ] = "",
    limit: Annotated[
        int, Query(ge=0, le=settings.page_limit_max, description="Maximum items per page")
    ] = settings.page_limit_default,
) -> ListParams:
    return ListParams(search=search, page_token=next_page_token, limit=limit)


ListParamsDep = Annotated[ListParams, Depends(get_list_params)]
