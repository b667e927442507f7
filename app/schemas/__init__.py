"""Pydantic schemas package: re-exports for convenience."""

# Common enums
from app.schemas.common import (
    CallStatus as CallStatus,
    CallType as CallType,
    FollowUpType as FollowUpType,
    FollowUpStatus as FollowUpStatus,
    Priority as Priority,
    EntityType as EntityType,
    EnquiryCallStatus as EnquiryCallStatus,
    TaskSource as TaskSource,
    TaskTab as TaskTab,
    DateFilter as DateFilter,
    SuccessResponse as SuccessResponse,
)

# Taskboard schemas
from app.schemas.taskboard import (
    TaskCriteria as TaskCriteria,
    TaskboardParams as TaskboardParams,
    TaskRef as TaskRef,
    UnifiedTask as UnifiedTask,
    TaskboardListResponse as TaskboardListResponse,
    StatusCount as StatusCount,
    TaskboardStats as TaskboardStats,
    TaskboardStatsResponse as TaskboardStatsResponse,
    CallStatusUpdate as CallStatusUpdate,
    FollowUpOut as FollowUpOut,
    FollowUpStatusResponse as FollowUpStatusResponse,
)
