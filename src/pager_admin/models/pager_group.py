"""SQLAlchemy models for contact groups and their membership."""
from __future__ import annotations

import datetime

from sqlalchemy import BigInteger, Boolean, DateTime, ForeignKey, Integer, SmallInteger, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from pager_admin.db.session import Base
from pager_admin.models.account import Account
from pager_admin.models.mixins import SearchableMixin

ESCALATION_FACTOR_DELIVERED = 0
ESCALATION_FACTOR_READ = 1
ESCALATION_FACTOR_REPLIED = 2


class PagerGroup(SearchableMixin, Base):
    """Contact group addressable by its own OPID, optionally escalating."""

    __tablename__ = "pager_group"
    __search_fields__ = ("pager_number", "name")

    id: Mapped[int] = mapped_column(BigInteger().with_variant(Integer, "sqlite"), primary_key=True)
    enterprise_id: Mapped[int] = mapped_column(BigInteger, nullable=False, index=True)
    name: Mapped[str] = mapped_column(String(250), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    pager_number: Mapped[str] = mapped_column(String(255), nullable=False)
    alternative_pager_number: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    escalation: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    # Minutes between escalation steps; NULL disables the interval.
    escalation_interval: Mapped[int | None] = mapped_column(SmallInteger, nullable=True)
    escalation_factor: Mapped[int | None] = mapped_column(SmallInteger, nullable=True)
    # Semicolon separated lists.
    fail_over_opids: Mapped[str | None] = mapped_column(Text, nullable=True)
    fail_over_group_opids: Mapped[str | None] = mapped_column(Text, nullable=True)
    fail_report_email: Mapped[str | None] = mapped_column(Text, nullable=True)
    fail_over_include_original: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False
    )
    latest_revision: Mapped[datetime.datetime] = mapped_column(
        DateTime,
        nullable=False,
        default=lambda: datetime.datetime.now(datetime.timezone.utc),
    )

    members: Mapped[list[PagerGroupMember]] = relationship(
        "PagerGroupMember",
        back_populates="group",
        cascade="all, delete-orphan",
        order_by="PagerGroupMember.account_id",
    )


class PagerGroupMember(Base):
    """Join table mapping contacts into contact groups."""

    __tablename__ = "pager_group_member"

    group_id: Mapped[int] = mapped_column(
        BigInteger,
        ForeignKey("pager_group.id", ondelete="CASCADE"),
        primary_key=True,
    )
    account_id: Mapped[int] = mapped_column(
        BigInteger,
        ForeignKey("account.id", ondelete="CASCADE"),
        primary_key=True,
    )
    escalation_order: Mapped[int | None] = mapped_column(SmallInteger, nullable=True)

    group: Mapped[PagerGroup] = relationship("PagerGroup", back_populates="members")
    account: Mapped[Account] = relationship("Account", back_populates="group_links")
