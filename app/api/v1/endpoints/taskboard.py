from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import Response

from app.core.config import settings
from app.core.rate_limit import limiter
from app.schemas.taskboard import (
    CallStatusUpdate,
    FollowUpOut,
    FollowUpStatusResponse,
    TaskboardListResponse,
    TaskboardParams,
    TaskboardStatsResponse,
)
from app.services.status_transition import StatusTransitionHandler
from app.services.taskboard_service import TaskboardService
from app.repositories.follow_up_repository import FollowUpRepository
from app.repositories.enquiry_repository import EnquiryRepository
from app.repositories.directory_repository import DirectoryRepository
from app.api.deps import (
    get_organization_id,
    get_taskboard_service,
    get_status_transition_handler,
    get_follow_up_repo,
    get_enquiry_repo,
    get_directory_repo,
)

router = APIRouter(prefix="/followups", tags=["Taskboard"])


async def scope_params(
    from_date: Optional[str] = Query(None, alias="fromDate", description="ISO date"),
    to_date: Optional[str] = Query(None, alias="toDate", description="ISO date"),
    date_filter: Optional[str] = Query(
        None,
        alias="dateFilter",
        description="today | last7days | last30days; ignored when both dates are set",
    ),
    staff_id: Optional[str] = Query(None, alias="staffId", description="'all' or id"),
    call_type: Optional[str] = Query(None, alias="callType", description="'all' or type"),
) -> TaskboardParams:
    """Filters shared by every taskboard read endpoint."""
    return TaskboardParams(
        from_date=from_date,
        to_date=to_date,
        date_filter=date_filter,
        staff_id=staff_id,
        call_type=call_type,
    )


async def export_params(
    base: TaskboardParams = Depends(scope_params),
    call_status: Optional[str] = Query(None, alias="callStatus"),
) -> TaskboardParams:
    return base.model_copy(update={"call_status": call_status})


async def list_params(
    base: TaskboardParams = Depends(export_params),
    tab: Optional[str] = Query("upcoming", description="upcoming | attempted"),
) -> TaskboardParams:
    return base.model_copy(update={"tab": tab})


@router.get(
    "/taskboard",
    response_model=TaskboardListResponse,
    response_model_by_alias=True,
)
async def get_taskboard(
    params: TaskboardParams = Depends(list_params),
    skip: int = Query(0, ge=0, description="Number of rows to skip"),
    limit: Optional[int] = Query(
        None, ge=1, le=settings.TASKBOARD_MAX_LIMIT, description="Max rows to return"
    ),
    organization_id: UUID = Depends(get_organization_id),
    service: TaskboardService = Depends(get_taskboard_service),
    follow_up_repo: FollowUpRepository = Depends(get_follow_up_repo),
    enquiry_repo: EnquiryRepository = Depends(get_enquiry_repo),
    directory_repo: DirectoryRepository = Depends(get_directory_repo),
) -> TaskboardListResponse:
    """Merged, time-ordered worklist of follow-ups and enquiry call-backs."""
    result = await service.list_tasks(
        organization_id,
        params,
        follow_up_repo=follow_up_repo,
        enquiry_repo=enquiry_repo,
        directory_repo=directory_repo,
        skip=skip,
        limit=limit,
    )
    return TaskboardListResponse(**result)


@router.get(
    "/taskboard/stats",
    response_model=TaskboardStatsResponse,
    response_model_by_alias=True,
)
async def get_taskboard_stats(
    params: TaskboardParams = Depends(scope_params),
    organization_id: UUID = Depends(get_organization_id),
    service: TaskboardService = Depends(get_taskboard_service),
    follow_up_repo: FollowUpRepository = Depends(get_follow_up_repo),
    enquiry_repo: EnquiryRepository = Depends(get_enquiry_repo),
) -> TaskboardStatsResponse:
    """Call-status counts and percentages across the whole date range."""
    stats = await service.get_stats(
        organization_id,
        params,
        follow_up_repo=follow_up_repo,
        enquiry_repo=enquiry_repo,
    )
    return TaskboardStatsResponse(stats=stats)


@router.get("/taskboard/export")
@limiter.limit(settings.EXPORT_RATE_LIMIT)
async def export_taskboard(
    request: Request,
    params: TaskboardParams = Depends(export_params),
    organization_id: UUID = Depends(get_organization_id),
    service: TaskboardService = Depends(get_taskboard_service),
    follow_up_repo: FollowUpRepository = Depends(get_follow_up_repo),
    enquiry_repo: EnquiryRepository = Depends(get_enquiry_repo),
    directory_repo: DirectoryRepository = Depends(get_directory_repo),
) -> Response:
    """CSV download of the filtered taskboard.

    Rate-limited per IP (``EXPORT_RATE_LIMIT``).
    """
    filename, payload = await service.export_csv(
        organization_id,
        params,
        follow_up_repo=follow_up_repo,
        enquiry_repo=enquiry_repo,
        directory_repo=directory_repo,
    )
    return Response(
        content=payload,
        media_type="text/csv",
        headers={
            "Content-Disposition": f'attachment; filename="{filename}"',
            "Cache-Control": "no-cache",
        },
    )


@router.put(
    "/taskboard/{follow_up_id}/status",
    response_model=FollowUpStatusResponse,
    response_model_by_alias=True,
)
async def update_follow_up_status(
    follow_up_id: UUID,
    body: CallStatusUpdate,
    organization_id: UUID = Depends(get_organization_id),
    handler: StatusTransitionHandler = Depends(get_status_transition_handler),
    follow_up_repo: FollowUpRepository = Depends(get_follow_up_repo),
) -> FollowUpStatusResponse:
    """Record the outcome of a follow-up call."""
    follow_up = await handler.apply(
        follow_up_id,
        organization_id,
        body.call_status,
        follow_up_repo=follow_up_repo,
    )
    return FollowUpStatusResponse(follow_up=FollowUpOut.model_validate(follow_up))
