"""initial schema

Revision ID: 5c1e2a9d7b40
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""
from __future__ import annotations

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "5c1e2a9d7b40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

PK = sa.BigInteger().with_variant(sa.Integer(), "sqlite")

PERMISSION_FLAGS = (
    "can_add_group",
    "can_delete_contact",
    "can_edit_contact",
    "can_add_contact",
    "can_add_contact_to_group",
    "can_remove_contact_from_group",
    "can_delete_group",
    "can_edit_group",
    "can_add_escalation",
    "can_edit_escalation",
    "can_view_schedule",
    "can_edit_schedule",
    "can_view_reports",
)


def upgrade() -> None:
    """Create the enterprise, contact, group, template and attachment tables."""
    op.create_table(
        "enterprise",
        sa.Column("id", PK, primary_key=True),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("super_admin_email", sa.String(length=255), nullable=True),
        sa.Column("logout_timeout", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("on_call_reminders", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column(
            "two_factor_authentication", sa.Boolean(), nullable=False, server_default=sa.false()
        ),
    )
    op.create_table(
        "public_api_token",
        sa.Column("id", PK, primary_key=True),
        sa.Column(
            "enterprise_id",
            sa.BigInteger(),
            sa.ForeignKey("enterprise.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("token_hash", sa.String(length=64), nullable=False, unique=True),
        sa.Column("active", sa.Boolean(), nullable=False, server_default=sa.true()),
    )
    op.create_index("ix_public_api_token_enterprise_id", "public_api_token", ["enterprise_id"])

    op.create_table(
        "dispatcher",
        sa.Column("id", PK, primary_key=True),
        sa.Column("enterprise_id", sa.BigInteger(), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False, unique=True),
        sa.Column("password_hash", sa.Text(), nullable=False),
        sa.Column("first_name", sa.String(length=255), nullable=False),
        sa.Column("last_name", sa.String(length=255), nullable=False),
        sa.Column("phone_number", sa.String(length=64), nullable=True),
        sa.Column("admin_type", sa.String(length=32), nullable=False),
        sa.Column("active", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("deleted", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        *[
            sa.Column(flag, sa.Boolean(), nullable=False, server_default=sa.false())
            for flag in PERMISSION_FLAGS
        ],
    )
    op.create_index("ix_dispatcher_enterprise_id", "dispatcher", ["enterprise_id"])

    op.create_table(
        "admin_group",
        sa.Column("id", PK, primary_key=True),
        sa.Column("enterprise_id", sa.BigInteger(), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
    )
    op.create_index("ix_admin_group_enterprise_id", "admin_group", ["enterprise_id"])
    op.create_table(
        "admin_group_member",
        sa.Column(
            "admin_group_id",
            sa.BigInteger(),
            sa.ForeignKey("admin_group.id", ondelete="CASCADE"),
            primary_key=True,
        ),
        sa.Column(
            "dispatcher_id",
            sa.BigInteger(),
            sa.ForeignKey("dispatcher.id", ondelete="CASCADE"),
            primary_key=True,
        ),
    )

    op.create_table(
        "account",
        sa.Column("id", PK, primary_key=True),
        sa.Column("enterprise_id", sa.BigInteger(), nullable=False),
        sa.Column("pager_number", sa.String(length=255), nullable=False),
        sa.Column("alternative_pager_number", sa.String(length=255), nullable=False, unique=True),
        sa.Column("email", sa.String(length=255), nullable=False, unique=True),
        sa.Column("password_hash", sa.Text(), nullable=False),
        sa.Column("first_name", sa.String(length=255), nullable=False),
        sa.Column("last_name", sa.String(length=255), nullable=False),
        sa.Column("phone_number", sa.String(length=64), nullable=True),
        sa.Column("active", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("deleted", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("created_at", sa.DateTime(), nullable=False),
    )
    op.create_index("ix_account_enterprise_id", "account", ["enterprise_id"])
    op.create_table(
        "device",
        sa.Column("id", PK, primary_key=True),
        sa.Column(
            "account_id",
            sa.BigInteger(),
            sa.ForeignKey("account.id", ondelete="CASCADE"),
            nullable=False,
            unique=True,
        ),
        sa.Column("pager_on", sa.Boolean(), nullable=False, server_default=sa.true()),
    )

    op.create_table(
        "pager_group",
        sa.Column("id", PK, primary_key=True),
        sa.Column("enterprise_id", sa.BigInteger(), nullable=False),
        sa.Column("name", sa.String(length=250), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("pager_number", sa.String(length=255), nullable=False),
        sa.Column("alternative_pager_number", sa.String(length=255), nullable=False, unique=True),
        sa.Column("escalation", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("escalation_interval", sa.SmallInteger(), nullable=True),
        sa.Column("escalation_factor", sa.SmallInteger(), nullable=True),
        sa.Column("fail_over_opids", sa.Text(), nullable=True),
        sa.Column("fail_over_group_opids", sa.Text(), nullable=True),
        sa.Column("fail_report_email", sa.Text(), nullable=True),
        sa.Column(
            "fail_over_include_original", sa.Boolean(), nullable=False, server_default=sa.false()
        ),
        sa.Column("latest_revision", sa.DateTime(), nullable=False),
    )
    op.create_index("ix_pager_group_enterprise_id", "pager_group", ["enterprise_id"])
    op.create_table(
        "pager_group_member",
        sa.Column(
            "group_id",
            sa.BigInteger(),
            sa.ForeignKey("pager_group.id", ondelete="CASCADE"),
            primary_key=True,
        ),
        sa.Column(
            "account_id",
            sa.BigInteger(),
            sa.ForeignKey("account.id", ondelete="CASCADE"),
            primary_key=True,
        ),
        sa.Column("escalation_order", sa.SmallInteger(), nullable=True),
    )

    op.create_table(
        "message_template",
        sa.Column("id", PK, primary_key=True),
        sa.Column("enterprise_id", sa.BigInteger(), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("subject", sa.Text(), nullable=False),
        sa.Column("body", sa.Text(), nullable=True),
        sa.Column("predefined_replies", sa.Text(), nullable=True),
        sa.Column("sync_to_device", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
    )
    op.create_index("ix_message_template_enterprise_id", "message_template", ["enterprise_id"])

    op.create_table(
        "attachment",
        sa.Column("id", PK, primary_key=True),
        sa.Column("file_id", sa.String(length=36), nullable=False, unique=True),
        sa.Column("file_name", sa.String(length=255), nullable=False),
        sa.Column("file_size", sa.Integer(), nullable=False),
        sa.Column("file_type", sa.SmallInteger(), nullable=False),
        sa.Column("mime_type", sa.String(length=255), nullable=False),
        sa.Column("file_data", sa.LargeBinary(), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
    )


def downgrade() -> None:
    """Drop every table created by :func:`upgrade`."""
    op.drop_table("attachment")
    op.drop_index("ix_message_template_enterprise_id", table_name="message_template")
    op.drop_table("message_template")
    op.drop_table("pager_group_member")
    op.drop_index("ix_pager_group_enterprise_id", table_name="pager_group")
    op.drop_table("pager_group")
    op.drop_table("device")
    op.drop_index("ix_account_enterprise_id", table_name="account")
    op.drop_table("account")
    op.drop_table("admin_group_member")
    op.drop_index("ix_admin_group_enterprise_id", table_name="admin_group")
    op.drop_table("admin_group")
    op.drop_index("ix_dispatcher_enterprise_id", table_name="dispatcher")
    op.drop_table("dispatcher")
    op.drop_index("ix_public_api_token_enterprise_id", table_name="public_api_token")
    op.drop_table("public_api_token")
    op.drop_table("enterprise")
