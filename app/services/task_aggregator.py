import logging
from collections import Counter
from dataclasses import dataclass, field
from datetime import timezone, tzinfo
from typing import Any, Dict, Iterable, List, Optional, Tuple
from uuid import UUID

from app.core.constants import (
    DEFAULT_CALL_TYPE,
    ENQUIRY_TASK_CALL_TYPE,
    NOT_AVAILABLE,
    UNASSIGNED,
)
from app.core.exceptions import UpstreamLookupError
from app.models.enquiry import Enquiry
from app.models.follow_up import FollowUp
from app.repositories.directory_repository import DirectoryRepository
from app.repositories.enquiry_repository import EnquiryRepository
from app.repositories.follow_up_repository import FollowUpRepository
from app.schemas.common import CallType, EntityType, TaskSource
from app.schemas.taskboard import TaskCriteria, TaskRef, UnifiedTask
from app.services.call_status import (
    normalize_enquiry_status,
    normalize_follow_up_status,
)
from app.services.effective_time import (
    enquiry_effective_time,
    follow_up_effective_time,
    format_date_label,
    format_time_label,
)
from app.services.taskboard_stats import tally_native_counts

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ContactCard:
    name: str = NOT_AVAILABLE
    phone: str = NOT_AVAILABLE
    code: str = NOT_AVAILABLE


def _or_na(value: Optional[str]) -> str:
    text = (value or "").strip()
    return text or NOT_AVAILABLE


def _full_name(first_name: Optional[str], last_name: Optional[str]) -> str:
    return f"{first_name or ''} {last_name or ''}".strip()


@dataclass
class Directory:
    """People referenced by one batch of taskboard rows, keyed by id."""

    members: Dict[UUID, Any] = field(default_factory=dict)
    enquiries: Dict[UUID, Any] = field(default_factory=dict)
    staff: Dict[UUID, Any] = field(default_factory=dict)

    def lookup_contact(self, entity_type: str, entity_id: Optional[UUID]) -> ContactCard:
        """Return the contact card or raise :class:`UpstreamLookupError`."""
        if entity_type == EntityType.member.value and entity_id in self.members:
            member = self.members[entity_id]
            return ContactCard(
                name=_or_na(_full_name(member.first_name, member.last_name)),
                phone=_or_na(member.phone),
                code=_or_na(member.member_code),
            )
        if entity_type == EntityType.enquiry.value and entity_id in self.enquiries:
            enquiry = self.enquiries[entity_id]
            return ContactCard(
                name=_or_na(enquiry.name),
                phone=_or_na(enquiry.phone),
                code=_or_na(enquiry.enquiry_code),
            )
        if entity_type == EntityType.staff.value and entity_id in self.staff:
            staff = self.staff[entity_id]
            return ContactCard(name=_or_na(_full_name(staff.first_name, staff.last_name)))
        raise UpstreamLookupError(f"{entity_type} {entity_id} not found")

    def contact_for(self, entity_type: str, entity_id: Optional[UUID]) -> ContactCard:
        try:
            return self.lookup_contact(entity_type, entity_id)
        except UpstreamLookupError as exc:
            logger.debug("Contact lookup degraded to N/A: %s", exc.detail)
            return ContactCard()

    def staff_name(self, staff_id: Optional[UUID]) -> str:
        if staff_id is None:
            return UNASSIGNED
        staff = self.staff.get(staff_id)
        if staff is None:
            logger.debug("Staff %s not found; rendering N/A", staff_id)
            return NOT_AVAILABLE
        return _or_na(_full_name(staff.first_name, staff.last_name))


class FollowUpAdapter:
    """Projects a persisted follow-up onto a taskboard row."""

    def __init__(self, directory: Directory, tz: tzinfo = timezone.utc) -> None:
        self._directory = directory
        self._tz = tz

    def to_task(self, follow_up: FollowUp) -> UnifiedTask:
        effective = follow_up_effective_time(
            follow_up.scheduled_time, follow_up.due_date, self._tz
        )
        contact = self._directory.contact_for(
            follow_up.related_entity_type, follow_up.related_entity_id
        )
        return UnifiedTask(
            id=TaskRef(source=TaskSource.follow_up, native_id=follow_up.follow_up_id),
            is_enquiry=False,
            call_type=CallType(follow_up.call_type or DEFAULT_CALL_TYPE.value),
            member_name=contact.name,
            member_mobile=contact.phone,
            member_code=contact.code,
            call_status=normalize_follow_up_status(follow_up.call_status),
            staff_name=self._directory.staff_name(follow_up.assigned_to),
            scheduled_time=follow_up.scheduled_time,
            due_date=follow_up.due_date,
            effective_scheduled_time=effective,
            date_label=format_date_label(effective, self._tz),
            time_label=format_time_label(effective, self._tz),
            entity_type=EntityType(follow_up.related_entity_type),
            entity_id=follow_up.related_entity_id,
        )


class EnquiryAdapter:
    """Projects an enquiry's next follow-up onto a taskboard row."""

    def __init__(self, directory: Directory, tz: tzinfo = timezone.utc) -> None:
        self._directory = directory
        self._tz = tz

    def to_task(self, enquiry: Enquiry) -> UnifiedTask:
        effective = enquiry_effective_time(enquiry.follow_up_date, self._tz)
        return UnifiedTask(
            id=TaskRef(source=TaskSource.enquiry, native_id=enquiry.enquiry_id),
            is_enquiry=True,
            call_type=ENQUIRY_TASK_CALL_TYPE,
            member_name=_or_na(enquiry.name),
            member_mobile=_or_na(enquiry.phone),
            member_code=_or_na(enquiry.enquiry_code),
            call_status=normalize_enquiry_status(enquiry.last_call_status),
            staff_name=self._directory.staff_name(enquiry.assigned_staff),
            scheduled_time=enquiry.follow_up_date,
            effective_scheduled_time=effective,
            date_label=format_date_label(effective, self._tz),
            time_label=format_time_label(effective, self._tz),
            entity_type=EntityType.enquiry,
            entity_id=enquiry.enquiry_id,
        )


class TaskAggregator:
    """Reads both sources and converts them into taskboard rows.

    The two sources are queried independently with the same criteria and
    are only combined by the caller (see ``task_sorter.arrange``).
    """

    def __init__(
        self,
        follow_up_repo: FollowUpRepository,
        enquiry_repo: EnquiryRepository,
        directory_repo: Optional[DirectoryRepository] = None,
        tz: tzinfo = timezone.utc,
    ) -> None:
        self._follow_up_repo = follow_up_repo
        self._enquiry_repo = enquiry_repo
        self._directory_repo = directory_repo
        self._tz = tz

    @staticmethod
    def includes_enquiries(call_type: Optional[CallType]) -> bool:
        """Enquiry rows are typed ``enquiry-call`` and drop out under any other type."""
        return call_type is None or call_type == ENQUIRY_TASK_CALL_TYPE

    async def collect(
        self, criteria: TaskCriteria
    ) -> Tuple[List[UnifiedTask], List[UnifiedTask]]:
        """Return ``(follow_up_tasks, enquiry_tasks)`` matching *criteria*."""
        follow_ups = await self._follow_up_repo.list_for_taskboard(criteria)
        enquiries: List[Enquiry] = []
        if self.includes_enquiries(criteria.call_type):
            enquiries = await self._enquiry_repo.list_for_taskboard(criteria)

        directory = await self._load_directory(
            criteria.organization_id, follow_ups, enquiries
        )
        follow_up_adapter = FollowUpAdapter(directory, self._tz)
        enquiry_adapter = EnquiryAdapter(directory, self._tz)
        follow_up_tasks = [follow_up_adapter.to_task(f) for f in follow_ups]
        enquiry_tasks = [enquiry_adapter.to_task(e) for e in enquiries]

        if criteria.statuses is not None:
            follow_up_tasks = [
                t for t in follow_up_tasks if t.call_status in criteria.statuses
            ]
            enquiry_tasks = [t for t in enquiry_tasks if t.call_status in criteria.statuses]

        logger.info(
            "Taskboard collected %d follow-up(s) and %d enquiry row(s) for org %s",
            len(follow_up_tasks),
            len(enquiry_tasks),
            criteria.organization_id,
        )
        return follow_up_tasks, enquiry_tasks

    async def count_statuses(self, criteria: TaskCriteria) -> Counter:
        """Canonical status counts over both sources, computed in the database."""
        follow_up_counts = await self._follow_up_repo.count_by_call_status(criteria)
        enquiry_counts: Dict[Optional[str], int] = {}
        if self.includes_enquiries(criteria.call_type):
            enquiry_counts = await self._enquiry_repo.count_by_last_call_status(
                criteria
            )
        return tally_native_counts(follow_up_counts, enquiry_counts)

    async def _load_directory(
        self,
        organization_id: UUID,
        follow_ups: Iterable[FollowUp],
        enquiries: Iterable[Enquiry],
    ) -> Directory:
        """One batched, organization-scoped lookup per entity kind."""
        if self._directory_repo is None:
            return Directory()

        member_ids, enquiry_ids, staff_ids = set(), set(), set()
        for follow_up in follow_ups:
            if follow_up.assigned_to is not None:
                staff_ids.add(follow_up.assigned_to)
            if follow_up.related_entity_id is None:
                continue
            if follow_up.related_entity_type == EntityType.member.value:
                member_ids.add(follow_up.related_entity_id)
            elif follow_up.related_entity_type == EntityType.enquiry.value:
                enquiry_ids.add(follow_up.related_entity_id)
            elif follow_up.related_entity_type == EntityType.staff.value:
                staff_ids.add(follow_up.related_entity_id)
        for enquiry in enquiries:
            if enquiry.assigned_staff is not None:
                staff_ids.add(enquiry.assigned_staff)

        return Directory(
            members=await self._directory_repo.get_members(member_ids, organization_id),
            enquiries=await self._directory_repo.get_enquiries(enquiry_ids, organization_id),
            staff=await self._directory_repo.get_staff(staff_ids, organization_id),
        )
