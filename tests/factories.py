"""Record builders and in-memory repository doubles shared by the tests.

The fakes apply the same filtering contract as the SQL repositories so
service-level tests can exercise date, staff, call-type and status
scoping without a database.  ``TestAgainstPostgres`` in
``test_repositories.py`` checks the real queries against PostgreSQL.
"""

from collections import Counter
from datetime import datetime, timezone
from typing import Dict, Iterable, List, Optional
from uuid import UUID, uuid4

from app.models.enquiry import Enquiry
from app.models.follow_up import FollowUp
from app.models.member import Member
from app.models.staff import Staff
from app.schemas.taskboard import TaskCriteria
from app.services.call_status import normalize_enquiry_status

ORG_ID = UUID("6f1c2b1e-0000-4000-8000-000000000001")
OTHER_ORG_ID = UUID("6f1c2b1e-0000-4000-8000-000000000002")
BRANCH_ID = UUID("6f1c2b1e-0000-4000-8000-0000000000b1")


def utc(year, month, day, hour=0, minute=0) -> datetime:
    return datetime(year, month, day, hour, minute, tzinfo=timezone.utc)


def fixed_clock(instant: datetime):
    return lambda: instant


def make_member(**overrides) -> Member:
    defaults = {
        "member_id": uuid4(),
        "organization_id": ORG_ID,
        "member_code": "MEM-0001",
        "first_name": "Priya",
        "last_name": "Sharma",
        "phone": "9876543210",
    }
    defaults.update(overrides)
    return Member(**defaults)


def make_staff(**overrides) -> Staff:
    defaults = {
        "staff_id": uuid4(),
        "organization_id": ORG_ID,
        "first_name": "Rahul",
        "last_name": "Verma",
    }
    defaults.update(overrides)
    return Staff(**defaults)


def make_enquiry(**overrides) -> Enquiry:
    defaults = {
        "enquiry_id": uuid4(),
        "organization_id": ORG_ID,
        "branch_id": BRANCH_ID,
        "enquiry_code": f"ENQ-{uuid4().hex[:6]}",
        "name": "Anita Rao",
        "phone": "9123456780",
        "assigned_staff": None,
        "follow_up_date": utc(2024, 3, 10, 9),
        "last_call_status": None,
        "is_archived": False,
    }
    defaults.update(overrides)
    return Enquiry(**defaults)


def make_follow_up(**overrides) -> FollowUp:
    defaults = {
        "follow_up_id": uuid4(),
        "organization_id": ORG_ID,
        "branch_id": BRANCH_ID,
        "type": "follow-up",
        "call_type": "follow-up-call",
        "call_status": "scheduled",
        "title": "Membership follow-up",
        "scheduled_time": None,
        "due_date": utc(2024, 3, 10),
        "related_entity_type": "member",
        "related_entity_id": uuid4(),
        "assigned_to": None,
        "status": "pending",
        "priority": "medium",
    }
    defaults.update(overrides)
    return FollowUp(**defaults)


class FakeFollowUpRepository:
    def __init__(self, follow_ups: Iterable[FollowUp] = ()) -> None:
        self.rows: List[FollowUp] = list(follow_ups)
        self.commits = 0

    @staticmethod
    def matches(follow_up: FollowUp, criteria: TaskCriteria) -> bool:
        if follow_up.organization_id != criteria.organization_id:
            return False
        anchor = follow_up.scheduled_time
        if anchor is None:
            anchor = follow_up.due_date
        if not criteria.start <= anchor <= criteria.end:
            return False
        if criteria.staff_id is not None and follow_up.assigned_to != criteria.staff_id:
            return False
        if criteria.call_type is not None and follow_up.call_type != criteria.call_type.value:
            return False
        if criteria.statuses is not None and follow_up.call_status not in {
            s.value for s in criteria.statuses
        }:
            return False
        return True

    async def list_for_taskboard(self, criteria: TaskCriteria) -> List[FollowUp]:
        matched = [f for f in self.rows if self.matches(f, criteria)]
        return sorted(matched, key=lambda f: f.scheduled_time or f.due_date)

    async def count_by_call_status(self, criteria: TaskCriteria) -> Dict[Optional[str], int]:
        return dict(
            Counter(f.call_status for f in self.rows if self.matches(f, criteria))
        )

    async def get_for_organization(
        self, follow_up_id: UUID, organization_id: UUID
    ) -> Optional[FollowUp]:
        for follow_up in self.rows:
            if (
                follow_up.follow_up_id == follow_up_id
                and follow_up.organization_id == organization_id
            ):
                return follow_up
        return None

    async def commit(self) -> None:
        self.commits += 1


class FakeEnquiryRepository:
    def __init__(self, enquiries: Iterable[Enquiry] = ()) -> None:
        self.rows: List[Enquiry] = list(enquiries)
        self.list_calls = 0

    @staticmethod
    def matches(enquiry: Enquiry, criteria: TaskCriteria) -> bool:
        if enquiry.organization_id != criteria.organization_id or enquiry.is_archived:
            return False
        if enquiry.follow_up_date is None:
            return False
        if not criteria.start <= enquiry.follow_up_date <= criteria.end:
            return False
        if criteria.staff_id is not None and enquiry.assigned_staff != criteria.staff_id:
            return False
        if (
            criteria.statuses is not None
            and normalize_enquiry_status(enquiry.last_call_status) not in criteria.statuses
        ):
            return False
        return True

    async def list_for_taskboard(self, criteria: TaskCriteria) -> List[Enquiry]:
        self.list_calls += 1
        matched = [e for e in self.rows if self.matches(e, criteria)]
        return sorted(matched, key=lambda e: e.follow_up_date)

    async def count_by_last_call_status(
        self, criteria: TaskCriteria
    ) -> Dict[Optional[str], int]:
        return dict(
            Counter(e.last_call_status for e in self.rows if self.matches(e, criteria))
        )


class FakeDirectoryRepository:
    """Keeps the id sets each batch lookup was asked for."""

    def __init__(
        self,
        members: Iterable[Member] = (),
        enquiries: Iterable[Enquiry] = (),
        staff: Iterable[Staff] = (),
    ) -> None:
        self._members = {m.member_id: m for m in members}
        self._enquiries = {e.enquiry_id: e for e in enquiries}
        self._staff = {s.staff_id: s for s in staff}
        self.requests: Dict[str, List[set]] = {"members": [], "enquiries": [], "staff": []}

    @staticmethod
    def _scoped(records, ids, organization_id):
        return {
            i: records[i]
            for i in ids
            if i in records and records[i].organization_id == organization_id
        }

    async def get_members(self, member_ids, organization_id):
        ids = set(member_ids)
        self.requests["members"].append(ids)
        return self._scoped(self._members, ids, organization_id)

    async def get_enquiries(self, enquiry_ids, organization_id):
        ids = set(enquiry_ids)
        self.requests["enquiries"].append(ids)
        return self._scoped(self._enquiries, ids, organization_id)

    async def get_staff(self, staff_ids, organization_id):
        ids = set(staff_ids)
        self.requests["staff"].append(ids)
        return self._scoped(self._staff, ids, organization_id)
