from enum import Enum

from pydantic import BaseModel


class CallStatus(str, Enum):
    """Canonical call status shared by follow-ups and enquiry-derived tasks."""

    scheduled = "scheduled"
    attempted = "attempted"
    contacted = "contacted"
    not_contacted = "not-contacted"
    missed = "missed"


class CallType(str, Enum):
    renewal_call = "renewal-call"
    assessment_call = "assessment-call"
    follow_up_call = "follow-up-call"
    enquiry_call = "enquiry-call"
    other = "other"


class FollowUpType(str, Enum):
    follow_up = "follow-up"
    appointment = "appointment"
    service_expiry = "service-expiry"
    upgrade = "upgrade"
    client_birthday = "client-birthday"
    staff_birthday = "staff-birthday"


class FollowUpStatus(str, Enum):
    pending = "pending"
    completed = "completed"
    cancelled = "cancelled"


class Priority(str, Enum):
    low = "low"
    medium = "medium"
    high = "high"


class EntityType(str, Enum):
    member = "member"
    enquiry = "enquiry"
    staff = "staff"


class EnquiryCallStatus(str, Enum):
    """Native call-outcome vocabulary recorded by the enquiry desk."""

    answered = "answered"
    not_called = "not-called"
    missed = "missed"
    no_answer = "no-answer"
    busy = "busy"
    enquiry = "enquiry"
    future_prospect = "future-prospect"
    not_interested = "not-interested"


class TaskSource(str, Enum):
    follow_up = "follow-up"
    enquiry = "enquiry"


class TaskTab(str, Enum):
    upcoming = "upcoming"
    attempted = "attempted"


class DateFilter(str, Enum):
    today = "today"
    last_7_days = "last7days"
    last_30_days = "last30days"


class SuccessResponse(BaseModel):
    """Generic success response base."""

    success: bool = True
