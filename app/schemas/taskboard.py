from dataclasses import dataclass
from datetime import datetime
from typing import FrozenSet, List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from app.schemas.common import (
    CallStatus,
    CallType,
    EntityType,
    SuccessResponse,
    TaskSource,
)


class CamelModel(BaseModel):
    """Base for response bodies: snake_case in Python, camelCase on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


@dataclass(frozen=True)
class TaskCriteria:
    """Storage-level filters shared by the follow-up and enquiry queries.

    ``statuses`` is ``None`` when every canonical status is wanted.
    """

    organization_id: UUID
    start: datetime
    end: datetime
    staff_id: Optional[UUID] = None
    call_type: Optional[CallType] = None
    statuses: Optional[FrozenSet[CallStatus]] = None


class TaskboardParams(BaseModel):
    """Raw taskboard query parameters, exactly as the client sent them."""

    from_date: Optional[str] = None
    to_date: Optional[str] = None
    date_filter: Optional[str] = None
    staff_id: Optional[str] = None
    call_type: Optional[str] = None
    call_status: Optional[str] = None
    tab: Optional[str] = None


class TaskRef(CamelModel):
    """Identity of a taskboard row: which collection it came from plus its id."""

    model_config = ConfigDict(frozen=True)

    source: TaskSource
    native_id: UUID


class UnifiedTask(CamelModel):
    """One taskboard row, projected from either a follow-up or an enquiry."""

    id: TaskRef
    is_enquiry: bool
    call_type: CallType
    member_name: str
    member_mobile: str
    member_code: str
    call_status: CallStatus
    staff_name: str
    scheduled_time: Optional[datetime] = None
    due_date: Optional[datetime] = None
    effective_scheduled_time: Optional[datetime] = None
    date_label: Optional[str] = None
    time_label: str
    entity_type: EntityType
    entity_id: Optional[UUID] = None
    s_no: Optional[int] = None


class TaskboardListResponse(SuccessResponse, CamelModel):
    follow_ups: List[UnifiedTask] = Field(default_factory=list)
    total: int = Field(0, description="Number of rows matching the filters")


class StatusCount(CamelModel):
    count: int = 0
    percent: int = 0


class TaskboardStats(CamelModel):
    scheduled: StatusCount = Field(default_factory=StatusCount)
    attempted: StatusCount = Field(default_factory=StatusCount)
    contacted: StatusCount = Field(default_factory=StatusCount)
    not_contacted: StatusCount = Field(default_factory=StatusCount)
    missed: StatusCount = Field(default_factory=StatusCount)
    total: int = 0


class TaskboardStatsResponse(SuccessResponse, CamelModel):
    stats: TaskboardStats


class CallStatusUpdate(BaseModel):
    """Body of the status-update endpoint."""

    call_status: CallStatus = Field(..., alias="callStatus")


class FollowUpOut(CamelModel):
    """A persisted follow-up as returned after a status change."""

    model_config = ConfigDict(from_attributes=True)

    follow_up_id: UUID
    organization_id: UUID
    branch_id: UUID
    type: str
    call_type: str
    call_status: str
    title: str
    scheduled_time: Optional[datetime] = None
    due_date: datetime
    related_entity_type: str
    related_entity_id: UUID
    assigned_to: Optional[UUID] = None
    status: str
    priority: Optional[str] = None
    attempted_at: Optional[datetime] = None
    contacted_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None
    notes: Optional[str] = None
    updated_at: Optional[datetime] = None


class FollowUpStatusResponse(SuccessResponse, CamelModel):
    follow_up: FollowUpOut
