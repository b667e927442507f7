"""add taskboard query indexes

Revision ID: b7d2f9a41c08
Revises: a1c4e7f20b31
Create Date: 2026-10-01 09:05:00.000000

"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = "b7d2f9a41c08"
down_revision: Union[str, None] = "a1c4e7f20b31"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # follow_ups: taskboard date scoping (scheduled_time, falling back to due_date)
    op.create_index(
        "ix_follow_ups_org_scheduled",
        "follow_ups",
        ["organization_id", "scheduled_time"],
    )
    op.create_index(
        "ix_follow_ups_org_due_date",
        "follow_ups",
        ["organization_id", "due_date"],
    )
    # follow_ups: tab / status filters and stats grouping
    op.create_index(
        "ix_follow_ups_org_call_status",
        "follow_ups",
        ["organization_id", "call_status"],
    )
    op.create_index("ix_follow_ups_assigned_to", "follow_ups", ["assigned_to"])

    # enquiries: only live leads with a call-back date reach the taskboard
    op.create_index(
        "ix_enquiries_org_follow_up_date",
        "enquiries",
        ["organization_id", "follow_up_date"],
        postgresql_where=sa.text("is_archived = false"),
    )
    op.create_index("ix_enquiries_assigned_staff", "enquiries", ["assigned_staff"])


def downgrade() -> None:
    op.drop_index("ix_enquiries_assigned_staff", table_name="enquiries")
    op.drop_index("ix_enquiries_org_follow_up_date", table_name="enquiries")
    op.drop_index("ix_follow_ups_assigned_to", table_name="follow_ups")
    op.drop_index("ix_follow_ups_org_call_status", table_name="follow_ups")
    op.drop_index("ix_follow_ups_org_due_date", table_name="follow_ups")
    op.drop_index("ix_follow_ups_org_scheduled", table_name="follow_ups")
