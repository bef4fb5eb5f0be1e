"""Data access helpers for enterprises and their API tokens."""
from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import Session

from pager_admin.models.enterprise import Enterprise, PublicApiToken

__all__ = ["EnterpriseRepository"]


class EnterpriseRepository:
    """Thin wrapper around database access for enterprise entities."""

    def __init__(self, session: Session) -> None:
        """Initialize the repository with a SQLAlchemy session."""
        self.session = session

    def get(self, enterprise_id: int) -> Enterprise | None:
        return self.session.get(Enterprise, enterprise_id)

    def enterprise_id_for_token(self, token_hash: str) -> int | None:
        """Return the enterprise owning an active token with ``token_hash``."""
        stmt = select(PublicApiToken.enterprise_id).where(
            PublicApiToken.token_hash == token_hash,
            PublicApiToken.active.is_(True),
        )
        return self.session.execute(stmt).scalars().first()

    def add_token(self, enterprise_id: int, token_hash: str) -> PublicApiToken:
        """Persist a new active token hash for the enterprise."""
        token = PublicApiToken(enterprise_id=enterprise_id, token_hash=token_hash, active=True)
        self.session.add(token)
        self.session.flush()
        return token
