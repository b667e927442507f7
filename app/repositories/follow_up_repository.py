from collections import Counter
from typing import Any, Dict, List, Optional
from uuid import UUID

from sqlalchemy import and_, func, or_, select

from app.models.follow_up import FollowUp
from app.repositories.base import BaseRepository
from app.schemas.taskboard import TaskCriteria


class FollowUpRepository(BaseRepository):
    """Encapsulates queries against the ``follow_ups`` table."""

    @staticmethod
    def build_filters(criteria: TaskCriteria) -> list:
        """Translate taskboard criteria into column-level filter expressions.

        A follow-up is in range when its ``scheduled_time`` falls inside
        the interval, or when it has no ``scheduled_time`` and its
        ``due_date`` falls inside the interval.
        """
        filters: List[Any] = [
            FollowUp.organization_id == criteria.organization_id,
            or_(
                and_(
                    FollowUp.scheduled_time.isnot(None),
                    FollowUp.scheduled_time.between(criteria.start, criteria.end),
                ),
                and_(
                    FollowUp.scheduled_time.is_(None),
                    FollowUp.due_date.between(criteria.start, criteria.end),
                ),
            ),
        ]
        if criteria.staff_id is not None:
            filters.append(FollowUp.assigned_to == criteria.staff_id)
        if criteria.call_type is not None:
            filters.append(FollowUp.call_type == criteria.call_type.value)
        if criteria.statuses is not None:
            filters.append(
                FollowUp.call_status.in_(sorted(s.value for s in criteria.statuses))
            )
        return filters

    async def list_for_taskboard(self, criteria: TaskCriteria) -> List[FollowUp]:
        """Return matching follow-ups ordered by their effective time."""
        query = (
            select(FollowUp)
            .where(and_(*self.build_filters(criteria)))
            .order_by(
                func.coalesce(FollowUp.scheduled_time, FollowUp.due_date).asc(),
                FollowUp.created_at.asc(),
                FollowUp.follow_up_id.asc(),
            )
        )
        result = await self._db.execute(query)
        return list(result.scalars().all())

    async def count_by_call_status(
        self, criteria: TaskCriteria
    ) -> Dict[Optional[str], int]:
        """Return ``{call_status: count}`` for follow-ups matching *criteria*."""
        query = (
            select(FollowUp.call_status, func.count(FollowUp.follow_up_id))
            .where(and_(*self.build_filters(criteria)))
            .group_by(FollowUp.call_status)
        )
        rows = await self._db.execute(query)
        counts: Counter = Counter()
        for call_status, count in rows:
            counts[call_status] += count
        return dict(counts)

    async def get_for_organization(
        self, follow_up_id: UUID, organization_id: UUID
    ) -> Optional[FollowUp]:
        """Return the follow-up if it belongs to *organization_id*, else ``None``."""
        result = await self._db.execute(
            select(FollowUp).where(
                FollowUp.follow_up_id == follow_up_id,
                FollowUp.organization_id == organization_id,
            )
        )
        return result.scalar_one_or_none()
