from sqlalchemy import Boolean, Column, String, DateTime, Index, text
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.sql import func

from app.models.base import Base


class Enquiry(Base):
    """Walk-in, phone or online lead owned by the enquiry desk.

    The taskboard only reads this table.  ``follow_up_date`` is the next
    time somebody should call the lead and ``last_call_status`` uses the
    enquiry desk's own vocabulary, not the canonical call statuses.
    """

    __tablename__ = "enquiries"
    enquiry_id = Column(
        UUID(as_uuid=True), primary_key=True, server_default=func.gen_random_uuid()
    )
    organization_id = Column(UUID(as_uuid=True), nullable=False)
    branch_id = Column(UUID(as_uuid=True), nullable=False)
    enquiry_code = Column(String(30), unique=True, nullable=False)
    name = Column(String(200), nullable=False)
    phone = Column(String(20), nullable=False)
    email = Column(String(255))
    assigned_staff = Column(UUID(as_uuid=True))
    follow_up_date = Column(DateTime(timezone=True))
    last_call_status = Column(String(30))
    is_archived = Column(Boolean, nullable=False, server_default=text("false"))
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    __table_args__ = (
        Index(
            "ix_enquiries_org_follow_up_date",
            "organization_id",
            "follow_up_date",
            postgresql_where=text("is_archived = false"),
        ),
        Index("ix_enquiries_assigned_staff", "assigned_staff"),
    )
