from typing import Dict, FrozenSet, Tuple

from app.schemas.common import (
    CallStatus,
    CallType,
    EnquiryCallStatus,
    EntityType,
    FollowUpStatus,
    FollowUpType,
    Priority,
    TaskTab,
)


def _check_clause(column: str, values) -> str:
    return f"{column} IN ({', '.join(repr(v) for v in sorted(values))})"


CALL_STATUSES: FrozenSet[str] = frozenset(s.value for s in CallStatus)
CALL_TYPES: FrozenSet[str] = frozenset(t.value for t in CallType)
FOLLOW_UP_TYPES: FrozenSet[str] = frozenset(t.value for t in FollowUpType)
FOLLOW_UP_STATUSES: FrozenSet[str] = frozenset(s.value for s in FollowUpStatus)
PRIORITIES: FrozenSet[str] = frozenset(p.value for p in Priority)
ENTITY_TYPES: FrozenSet[str] = frozenset(e.value for e in EntityType)

DEFAULT_CALL_STATUS: CallStatus = CallStatus.scheduled
DEFAULT_CALL_TYPE: CallType = CallType.follow_up_call

# Enquiry desk vocabulary -> canonical call status.  Anything absent or
# not listed here maps to DEFAULT_CALL_STATUS.
ENQUIRY_CALL_STATUS_MAP: Dict[str, CallStatus] = {
    EnquiryCallStatus.answered.value: CallStatus.contacted,
    EnquiryCallStatus.not_called.value: CallStatus.scheduled,
    EnquiryCallStatus.missed.value: CallStatus.missed,
    EnquiryCallStatus.no_answer.value: CallStatus.missed,
    EnquiryCallStatus.busy.value: CallStatus.attempted,
    EnquiryCallStatus.enquiry.value: CallStatus.not_contacted,
    EnquiryCallStatus.future_prospect.value: CallStatus.not_contacted,
    EnquiryCallStatus.not_interested.value: CallStatus.not_contacted,
}

TAB_STATUSES: Dict[TaskTab, FrozenSet[CallStatus]] = {
    TaskTab.upcoming: frozenset(
        {CallStatus.scheduled, CallStatus.missed, CallStatus.not_contacted}
    ),
    TaskTab.attempted: frozenset({CallStatus.attempted, CallStatus.contacted}),
}
DEFAULT_TAB: TaskTab = TaskTab.upcoming

# Enquiry-derived tasks are always typed as enquiry calls
ENQUIRY_TASK_CALL_TYPE: CallType = CallType.enquiry_call

NOT_AVAILABLE: str = "N/A"
UNASSIGNED: str = "Unassigned"

DATE_LABEL_FORMAT: str = "%d/%m/%Y"
TIME_LABEL_FORMAT: str = "%I:%M %p"

# Header text is consumed verbatim by spreadsheet imports downstream
EXPORT_HEADERS: Tuple[str, ...] = (
    "S.No",
    "Date",
    "Time",
    "Call Type",
    "Member Name",
    "Member Mobile",
    "Call Status",
    "Staff Name",
)
EXPORT_FILENAME_PREFIX: str = "taskboard"

CALL_STATUS_CHECK_CLAUSE: str = _check_clause("call_status", CALL_STATUSES)
CALL_TYPE_CHECK_CLAUSE: str = _check_clause("call_type", CALL_TYPES)
FOLLOW_UP_TYPE_CHECK_CLAUSE: str = _check_clause("type", FOLLOW_UP_TYPES)
FOLLOW_UP_STATUS_CHECK_CLAUSE: str = _check_clause("status", FOLLOW_UP_STATUSES)
PRIORITY_CHECK_CLAUSE: str = _check_clause("priority", PRIORITIES)
ENTITY_TYPE_CHECK_CLAUSE: str = _check_clause("related_entity_type", ENTITY_TYPES)
