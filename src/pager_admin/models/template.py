"""SQLAlchemy model for reusable message templates."""
from __future__ import annotations

import datetime

from sqlalchemy import BigInteger, Boolean, DateTime, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from pager_admin.db.session import Base
from pager_admin.models.mixins import SearchableMixin


class MessageTemplate(SearchableMixin, Base):
    """Predefined page content an enterprise can send."""

    __tablename__ = "message_template"
    __search_fields__ = ("name", "subject", "body")

    id: Mapped[int] = mapped_column(BigInteger().with_variant(Integer, "sqlite"), primary_key=True)
    enterprise_id: Mapped[int] = mapped_column(BigInteger, nullable=False, index=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    subject: Mapped[str] = mapped_column(Text, nullable=False)
    body: Mapped[str | None] = mapped_column(Text, nullable=True)
    # Replies are stored joined with ";".
    predefined_replies: Mapped[str | None] = mapped_column(Text, nullable=True)
    sync_to_device: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    updated_at: Mapped[datetime.datetime] = mapped_column(
        DateTime,
        nullable=False,
        default=lambda: datetime.datetime.now(datetime.timezone.utc),
    )
