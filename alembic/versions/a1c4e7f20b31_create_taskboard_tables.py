"""create follow-up, enquiry, member and staff tables

Revision ID: a1c4e7f20b31
Revises:
Create Date: 2026-10-01 09:00:00.000000

"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op
from sqlalchemy.dialects import postgresql

from app.core.constants import (
    CALL_STATUS_CHECK_CLAUSE,
    CALL_TYPE_CHECK_CLAUSE,
    ENTITY_TYPE_CHECK_CLAUSE,
    FOLLOW_UP_STATUS_CHECK_CLAUSE,
    FOLLOW_UP_TYPE_CHECK_CLAUSE,
    PRIORITY_CHECK_CLAUSE,
)

# revision identifiers, used by Alembic.
revision: str = "a1c4e7f20b31"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _uuid_pk(name: str) -> sa.Column:
    return sa.Column(
        name,
        postgresql.UUID(as_uuid=True),
        primary_key=True,
        server_default=sa.text("gen_random_uuid()"),
    )


def _timestamp(name: str) -> sa.Column:
    return sa.Column(
        name, sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True
    )


def upgrade() -> None:
    op.create_table(
        "staff",
        _uuid_pk("staff_id"),
        sa.Column("organization_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("first_name", sa.String(100), nullable=False),
        sa.Column("last_name", sa.String(100)),
        sa.Column("email", sa.String(255), unique=True),
        _timestamp("created_at"),
    )
    op.create_index("ix_staff_organization_id", "staff", ["organization_id"])

    op.create_table(
        "members",
        _uuid_pk("member_id"),
        sa.Column("organization_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("member_code", sa.String(30)),
        sa.Column("first_name", sa.String(100), nullable=False),
        sa.Column("last_name", sa.String(100)),
        sa.Column("phone", sa.String(20)),
        _timestamp("created_at"),
    )
    op.create_index("ix_members_organization_id", "members", ["organization_id"])

    op.create_table(
        "enquiries",
        _uuid_pk("enquiry_id"),
        sa.Column("organization_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("branch_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("enquiry_code", sa.String(30), nullable=False, unique=True),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("phone", sa.String(20), nullable=False),
        sa.Column("email", sa.String(255)),
        sa.Column("assigned_staff", postgresql.UUID(as_uuid=True)),
        sa.Column("follow_up_date", sa.DateTime(timezone=True)),
        sa.Column("last_call_status", sa.String(30)),
        sa.Column(
            "is_archived", sa.Boolean(), nullable=False, server_default=sa.false()
        ),
        _timestamp("created_at"),
        _timestamp("updated_at"),
    )

    op.create_table(
        "follow_ups",
        _uuid_pk("follow_up_id"),
        sa.Column("organization_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("branch_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("type", sa.String(30), nullable=False),
        sa.Column(
            "call_type",
            sa.String(30),
            nullable=False,
            server_default="follow-up-call",
        ),
        sa.Column(
            "call_status", sa.String(20), nullable=False, server_default="scheduled"
        ),
        sa.Column("title", sa.String(200), nullable=False),
        sa.Column("description", sa.Text()),
        sa.Column("scheduled_time", sa.DateTime(timezone=True)),
        sa.Column("due_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("related_entity_type", sa.String(20), nullable=False),
        sa.Column(
            "related_entity_id", postgresql.UUID(as_uuid=True), nullable=False
        ),
        sa.Column("assigned_to", postgresql.UUID(as_uuid=True)),
        sa.Column("status", sa.String(20), nullable=False, server_default="pending"),
        sa.Column("priority", sa.String(20), nullable=False, server_default="medium"),
        sa.Column("attempted_at", sa.DateTime(timezone=True)),
        sa.Column("contacted_at", sa.DateTime(timezone=True)),
        sa.Column("completed_at", sa.DateTime(timezone=True)),
        sa.Column("notes", sa.Text()),
        sa.Column("created_by", postgresql.UUID(as_uuid=True)),
        _timestamp("created_at"),
        _timestamp("updated_at"),
        sa.CheckConstraint(FOLLOW_UP_TYPE_CHECK_CLAUSE, name="ck_follow_up_type"),
        sa.CheckConstraint(CALL_TYPE_CHECK_CLAUSE, name="ck_follow_up_call_type"),
        sa.CheckConstraint(CALL_STATUS_CHECK_CLAUSE, name="ck_follow_up_call_status"),
        sa.CheckConstraint(FOLLOW_UP_STATUS_CHECK_CLAUSE, name="ck_follow_up_status"),
        sa.CheckConstraint(PRIORITY_CHECK_CLAUSE, name="ck_follow_up_priority"),
        sa.CheckConstraint(ENTITY_TYPE_CHECK_CLAUSE, name="ck_follow_up_entity_type"),
    )


def downgrade() -> None:
    op.drop_table("follow_ups")
    op.drop_table("enquiries")
    op.drop_index("ix_members_organization_id", table_name="members")
    op.drop_table("members")
    op.drop_index("ix_staff_organization_id", table_name="staff")
    op.drop_table("staff")
