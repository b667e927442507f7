from typing import Dict, Iterable
from uuid import UUID

from sqlalchemy import select

from app.models.enquiry import Enquiry
from app.models.member import Member
from app.models.staff import Staff
from app.repositories.base import BaseRepository


class DirectoryRepository(BaseRepository):
    """Batch lookups of the people a taskboard row refers to.

    Each method issues at most one query for the whole set of ids, so
    resolving names for N rows costs one round-trip per entity kind
    rather than one per row.  Records outside *organization_id* are
    never returned.
    """

    async def get_members(
        self, member_ids: Iterable[UUID], organization_id: UUID
    ) -> Dict[UUID, Member]:
        ids = set(member_ids)
        if not ids:
            return {}
        result = await self._db.execute(
            select(Member).where(
                Member.member_id.in_(ids),
                Member.organization_id == organization_id,
            )
        )
        return {m.member_id: m for m in result.scalars().all()}

    async def get_enquiries(
        self, enquiry_ids: Iterable[UUID], organization_id: UUID
    ) -> Dict[UUID, Enquiry]:
        ids = set(enquiry_ids)
        if not ids:
            return {}
        result = await self._db.execute(
            select(Enquiry).where(
                Enquiry.enquiry_id.in_(ids),
                Enquiry.organization_id == organization_id,
            )
        )
        return {e.enquiry_id: e for e in result.scalars().all()}

    async def get_staff(
        self, staff_ids: Iterable[UUID], organization_id: UUID
    ) -> Dict[UUID, Staff]:
        ids = set(staff_ids)
        if not ids:
            return {}
        result = await self._db.execute(
            select(Staff).where(
                Staff.staff_id.in_(ids),
                Staff.organization_id == organization_id,
            )
        )
        return {s.staff_id: s for s in result.scalars().all()}
