from sqlalchemy import Column, String, Text, DateTime, CheckConstraint, Index
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.sql import func

from app.core.constants import (
    CALL_STATUS_CHECK_CLAUSE,
    CALL_TYPE_CHECK_CLAUSE,
    ENTITY_TYPE_CHECK_CLAUSE,
    FOLLOW_UP_STATUS_CHECK_CLAUSE,
    FOLLOW_UP_TYPE_CHECK_CLAUSE,
    PRIORITY_CHECK_CLAUSE,
)
from app.models.base import Base


class FollowUp(Base):
    """A call or reminder a staff member owes to a member, enquiry or colleague.

    Two independent state fields live here: ``call_status`` tracks the
    outcome of the phone call and ``status`` the lifecycle of the task
    itself.  ``scheduled_time`` is optional; when it is missing the task
    is placed in time by ``due_date``.
    """

    __tablename__ = "follow_ups"
    follow_up_id = Column(
        UUID(as_uuid=True), primary_key=True, server_default=func.gen_random_uuid()
    )
    organization_id = Column(UUID(as_uuid=True), nullable=False)
    branch_id = Column(UUID(as_uuid=True), nullable=False)
    type = Column(String(30), nullable=False)
    call_type = Column(String(30), nullable=False, server_default="follow-up-call")
    call_status = Column(String(20), nullable=False, server_default="scheduled")
    title = Column(String(200), nullable=False)
    description = Column(Text)
    scheduled_time = Column(DateTime(timezone=True))
    due_date = Column(DateTime(timezone=True), nullable=False)
    related_entity_type = Column(String(20), nullable=False)
    related_entity_id = Column(UUID(as_uuid=True), nullable=False)
    assigned_to = Column(UUID(as_uuid=True))
    status = Column(String(20), nullable=False, server_default="pending")
    priority = Column(String(20), nullable=False, server_default="medium")
    attempted_at = Column(DateTime(timezone=True))
    contacted_at = Column(DateTime(timezone=True))
    completed_at = Column(DateTime(timezone=True))
    notes = Column(Text)
    created_by = Column(UUID(as_uuid=True))
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    __table_args__ = (
        Index("ix_follow_ups_org_scheduled", "organization_id", "scheduled_time"),
        Index("ix_follow_ups_org_due_date", "organization_id", "due_date"),
        Index("ix_follow_ups_org_call_status", "organization_id", "call_status"),
        Index("ix_follow_ups_assigned_to", "assigned_to"),
        CheckConstraint(FOLLOW_UP_TYPE_CHECK_CLAUSE, name="ck_follow_up_type"),
        CheckConstraint(CALL_TYPE_CHECK_CLAUSE, name="ck_follow_up_call_type"),
        CheckConstraint(CALL_STATUS_CHECK_CLAUSE, name="ck_follow_up_call_status"),
        CheckConstraint(FOLLOW_UP_STATUS_CHECK_CLAUSE, name="ck_follow_up_status"),
        CheckConstraint(PRIORITY_CHECK_CLAUSE, name="ck_follow_up_priority"),
        CheckConstraint(ENTITY_TYPE_CHECK_CLAUSE, name="ck_follow_up_entity_type"),
    )
