from collections import Counter
from typing import Any, Dict, List, Optional

from sqlalchemy import and_, false, func, or_, select

from app.core.constants import DEFAULT_CALL_STATUS, ENQUIRY_CALL_STATUS_MAP
from app.models.enquiry import Enquiry
from app.repositories.base import BaseRepository
from app.schemas.taskboard import TaskCriteria


class EnquiryRepository(BaseRepository):
    """Read-only queries against the ``enquiries`` table."""

    @staticmethod
    def build_status_filter(statuses) -> Any:
        """Express a set of canonical statuses in the enquiry vocabulary.

        Uses the same table as the status normalizer, read backwards.
        ``scheduled`` also matches rows whose native status is missing or
        outside the known vocabulary.
        """
        natives = sorted(
            native
            for native, canonical in ENQUIRY_CALL_STATUS_MAP.items()
            if canonical in statuses
        )
        clauses = []
        if natives:
            clauses.append(Enquiry.last_call_status.in_(natives))
        if DEFAULT_CALL_STATUS in statuses:
            clauses.append(Enquiry.last_call_status.is_(None))
            clauses.append(
                Enquiry.last_call_status.notin_(sorted(ENQUIRY_CALL_STATUS_MAP))
            )
        if not clauses:
            return false()
        return or_(*clauses)

    @classmethod
    def build_filters(cls, criteria: TaskCriteria) -> list:
        """Translate taskboard criteria into column-level filter expressions.

        ``criteria.call_type`` is not applied here: whether enquiries take
        part at all is decided by the caller.
        """
        filters: List[Any] = [
            Enquiry.organization_id == criteria.organization_id,
            Enquiry.is_archived.is_(False),
            Enquiry.follow_up_date.isnot(None),
            Enquiry.follow_up_date.between(criteria.start, criteria.end),
        ]
        if criteria.staff_id is not None:
            filters.append(Enquiry.assigned_staff == criteria.staff_id)
        if criteria.statuses is not None:
            filters.append(cls.build_status_filter(criteria.statuses))
        return filters

    async def list_for_taskboard(self, criteria: TaskCriteria) -> List[Enquiry]:
        """Return matching enquiries ordered by their next follow-up date."""
        query = (
            select(Enquiry)
            .where(and_(*self.build_filters(criteria)))
            .order_by(
                Enquiry.follow_up_date.asc(),
                Enquiry.created_at.asc(),
                Enquiry.enquiry_id.asc(),
            )
        )
        result = await self._db.execute(query)
        return list(result.scalars().all())

    async def count_by_last_call_status(
        self, criteria: TaskCriteria
    ) -> Dict[Optional[str], int]:
        """Return ``{native last_call_status: count}`` for matching enquiries."""
        query = (
            select(Enquiry.last_call_status, func.count(Enquiry.enquiry_id))
            .where(and_(*self.build_filters(criteria)))
            .group_by(Enquiry.last_call_status)
        )
        rows = await self._db.execute(query)
        counts: Counter = Counter()
        for last_call_status, count in rows:
            counts[last_call_status] += count
        return dict(counts)
