"""SQLAlchemy models for contacts (pager accounts) and their devices."""
from __future__ import annotations

import datetime

from sqlalchemy import BigInteger, Boolean, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from pager_admin.db.session import Base
from pager_admin.models.mixins import SearchableMixin


class Account(SearchableMixin, Base):
    """Contact reachable through its pager number (OPID)."""

    __tablename__ = "account"
    __search_fields__ = ("pager_number", "email", "first_name", "last_name")

    id: Mapped[int] = mapped_column(BigInteger().with_variant(Integer, "sqlite"), primary_key=True)
    enterprise_id: Mapped[int] = mapped_column(BigInteger, nullable=False, index=True)
    pager_number: Mapped[str] = mapped_column(String(255), nullable=False)
    # Normalised OPID used for uniqueness checks across accounts and groups.
    alternative_pager_number: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    password_hash: Mapped[str] = mapped_column(Text, nullable=False)
    first_name: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    last_name: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    phone_number: Mapped[str | None] = mapped_column(String(64), nullable=True)
    active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    deleted: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    created_at: Mapped[datetime.datetime] = mapped_column(
        DateTime,
        nullable=False,
        default=lambda: datetime.datetime.now(datetime.timezone.utc),
    )

    device: Mapped[Device | None] = relationship(
        "Device",
        back_populates="account",
        cascade="all, delete-orphan",
        uselist=False,
    )
    group_links: Mapped[list["PagerGroupMember"]] = relationship(  # noqa: F821
        "PagerGroupMember",
        back_populates="account",
        cascade="all, delete-orphan",
    )


class Device(Base):
    """Paging device registered by a logged-in contact."""

    __tablename__ = "device"

    id: Mapped[int] = mapped_column(BigInteger().with_variant(Integer, "sqlite"), primary_key=True)
    account_id: Mapped[int] = mapped_column(
        BigInteger,
        ForeignKey("account.id", ondelete="CASCADE"),
        unique=True,
        nullable=False,
    )
    pager_on: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    account: Mapped[Account] = relationship("Account", back_populates="device")
