"""SQLAlchemy models for administrators (dispatchers) and their groups."""
from __future__ import annotations

import datetime

from sqlalchemy import BigInteger, Boolean, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from pager_admin.db.session import Base
from pager_admin.models.mixins import SearchableMixin

ADMIN_TYPE_ADMINISTRATOR = "ADMINISTRATOR"
ADMIN_TYPE_DISPATCHER = "DISPATCHER"


class Dispatcher(SearchableMixin, Base):
    """Console user allowed to administer an enterprise."""

    __tablename__ = "dispatcher"
    __search_fields__ = ("email", "first_name", "last_name")

    id: Mapped[int] = mapped_column(BigInteger().with_variant(Integer, "sqlite"), primary_key=True)
    enterprise_id: Mapped[int] = mapped_column(BigInteger, nullable=False, index=True)
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    password_hash: Mapped[str] = mapped_column(Text, nullable=False)
    first_name: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    last_name: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    phone_number: Mapped[str | None] = mapped_column(String(64), nullable=True)
    admin_type: Mapped[str] = mapped_column(
        String(32), nullable=False, default=ADMIN_TYPE_DISPATCHER
    )
    active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    deleted: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    created_at: Mapped[datetime.datetime] = mapped_column(
        DateTime,
        nullable=False,
        default=lambda: datetime.datetime.now(datetime.timezone.utc),
    )

    # Permission flags
    can_add_group: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    can_delete_contact: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    can_edit_contact: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    can_add_contact: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    can_add_contact_to_group: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    can_remove_contact_from_group: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False
    )
    can_delete_group: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    can_edit_group: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    can_add_escalation: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    can_edit_escalation: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    can_view_schedule: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    can_edit_schedule: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    can_view_reports: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    group_links: Mapped[list[AdminGroupMember]] = relationship(
        "AdminGroupMember",
        back_populates="dispatcher",
        cascade="all, delete-orphan",
    )

    @property
    def is_super_admin(self) -> bool:
        """Return True for enterprise-level administrators."""
        return self.admin_type == ADMIN_TYPE_ADMINISTRATOR


class AdminGroup(SearchableMixin, Base):
    """Named set of dispatchers."""

    __tablename__ = "admin_group"
    __search_fields__ = ("name",)

    id: Mapped[int] = mapped_column(BigInteger().with_variant(Integer, "sqlite"), primary_key=True)
    enterprise_id: Mapped[int] = mapped_column(BigInteger, nullable=False, index=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)

    members: Mapped[list[AdminGroupMember]] = relationship(
        "AdminGroupMember",
        back_populates="admin_group",
        cascade="all, delete-orphan",
        order_by="AdminGroupMember.dispatcher_id",
    )


class AdminGroupMember(Base):
    """Join table mapping dispatchers into administrator groups."""

    __tablename__ = "admin_group_member"

    admin_group_id: Mapped[int] = mapped_column(
        BigInteger,
        ForeignKey("admin_group.id", ondelete="CASCADE"),
        primary_key=True,
    )
    dispatcher_id: Mapped[int] = mapped_column(
        BigInteger,
        ForeignKey("dispatcher.id", ondelete="CASCADE"),
        primary_key=True,
    )

    admin_group: Mapped[AdminGroup] = relationship("AdminGroup", back_populates="members")
    dispatcher: Mapped[Dispatcher] = relationship("Dispatcher", back_populates="group_links")
