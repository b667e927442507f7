import logging
from datetime import timezone, tzinfo
from typing import Any, Dict, Optional, Tuple
from uuid import UUID

from app.core.clock import Clock, utc_now
from app.repositories.directory_repository import DirectoryRepository
from app.repositories.enquiry_repository import EnquiryRepository
from app.repositories.follow_up_repository import FollowUpRepository
from app.schemas.common import CallType
from app.schemas.taskboard import TaskboardParams, TaskboardStats, TaskCriteria
from app.services.call_status import resolve_status_scope
from app.services.date_range import resolve_date_range
from app.services.task_aggregator import TaskAggregator
from app.services.task_sorter import arrange, paginate
from app.services.taskboard_export import export_filename, render_csv
from app.services.taskboard_stats import build_stats

logger = logging.getLogger(__name__)


def _parse_staff_id(value: Optional[str]) -> Optional[UUID]:
    if not value or value == "all":
        return None
    try:
        return UUID(value)
    except ValueError:
        logger.warning("Ignoring malformed staffId filter %r", value)
        return None


def _parse_call_type(value: Optional[str]) -> Optional[CallType]:
    if not value or value == "all":
        return None
    try:
        return CallType(value)
    except ValueError:
        logger.warning("Ignoring unknown callType filter %r", value)
        return None


class TaskboardService:
    """Read side of the taskboard: list, stats and CSV export.

    Stateless apart from the injected clock and reference time zone;
    every call recomputes the merged view from both sources.
    """

    def __init__(self, clock: Clock = utc_now, tz: tzinfo = timezone.utc) -> None:
        self._clock = clock
        self._tz = tz

    def build_criteria(
        self,
        organization_id: UUID,
        params: TaskboardParams,
        *,
        apply_status: bool = True,
        apply_tab: bool = True,
    ) -> TaskCriteria:
        """Resolve raw query parameters into storage-level criteria.

        Malformed values are logged and replaced by their defaults.
        """
        interval = resolve_date_range(
            params.from_date,
            params.to_date,
            params.date_filter,
            now=self._clock(),
            tz=self._tz,
        )
        statuses = None
        if apply_status:
            statuses = resolve_status_scope(
                params.call_status, params.tab, apply_tab=apply_tab
            )
        return TaskCriteria(
            organization_id=organization_id,
            start=interval.start,
            end=interval.end,
            staff_id=_parse_staff_id(params.staff_id),
            call_type=_parse_call_type(params.call_type),
            statuses=statuses,
        )

    async def list_tasks(
        self,
        organization_id: UUID,
        params: TaskboardParams,
        follow_up_repo: FollowUpRepository,
        enquiry_repo: EnquiryRepository,
        directory_repo: DirectoryRepository,
        *,
        skip: int = 0,
        limit: Optional[int] = None,
    ) -> Dict[str, Any]:
        """Return ``{"follow_ups": [...], "total": n}`` for the list view.

        ``total`` counts every matching row; *skip*/*limit* only slice
        the returned page.
        """
        criteria = self.build_criteria(organization_id, params)
        aggregator = TaskAggregator(
            follow_up_repo, enquiry_repo, directory_repo, tz=self._tz
        )
        follow_up_tasks, enquiry_tasks = await aggregator.collect(criteria)
        tasks = arrange(follow_up_tasks, enquiry_tasks)
        return {
            "follow_ups": paginate(tasks, skip=skip, limit=limit),
            "total": len(tasks),
        }

    async def get_stats(
        self,
        organization_id: UUID,
        params: TaskboardParams,
        follow_up_repo: FollowUpRepository,
        enquiry_repo: EnquiryRepository,
    ) -> TaskboardStats:
        """Per-status counts over the whole date-scoped set (no tab, no status)."""
        criteria = self.build_criteria(organization_id, params, apply_status=False)
        aggregator = TaskAggregator(follow_up_repo, enquiry_repo, tz=self._tz)
        counts = await aggregator.count_statuses(criteria)
        return build_stats(counts)

    async def export_csv(
        self,
        organization_id: UUID,
        params: TaskboardParams,
        follow_up_repo: FollowUpRepository,
        enquiry_repo: EnquiryRepository,
        directory_repo: DirectoryRepository,
    ) -> Tuple[str, str]:
        """Return ``(filename, csv_text)`` for the filtered set, tab ignored.

        All queries finish before rendering starts, so a failing store
        aborts the export instead of producing a truncated file.
        """
        criteria = self.build_criteria(organization_id, params, apply_tab=False)
        aggregator = TaskAggregator(
            follow_up_repo, enquiry_repo, directory_repo, tz=self._tz
        )
        follow_up_tasks, enquiry_tasks = await aggregator.collect(criteria)
        tasks = arrange(follow_up_tasks, enquiry_tasks)
        filename = export_filename(self._clock().astimezone(self._tz))
        logger.info("Exporting %d taskboard row(s) as %s", len(tasks), filename)
        return filename, render_csv(tasks)
