"""SQLAlchemy models for tenants and their API credentials."""
from __future__ import annotations

from sqlalchemy import BigInteger, Boolean, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from pager_admin.db.session import Base


class Enterprise(Base):
    """Tenant owning every other resource."""

    __tablename__ = "enterprise"

    id: Mapped[int] = mapped_column(BigInteger().with_variant(Integer, "sqlite"), primary_key=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    super_admin_email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    # Dispatcher console session timeout in minutes.
    logout_timeout: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    on_call_reminders: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    two_factor_authentication: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)


class PublicApiToken(Base):
    """Bearer token granting API access to a single enterprise."""

    __tablename__ = "public_api_token"

    id: Mapped[int] = mapped_column(BigInteger().with_variant(Integer, "sqlite"), primary_key=True)
    enterprise_id: Mapped[int] = mapped_column(
        BigInteger,
        ForeignKey("enterprise.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    # Only the SHA-256 of the token is stored.
    token_hash: Mapped[str] = mapped_column(String(64), unique=True, nullable=False)
    active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
