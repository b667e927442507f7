import logging
from uuid import UUID

from fastapi import Depends, Header
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.clock import Clock, utc_now
from app.core.config import settings
from app.core.database import get_db
from app.services.status_transition import StatusTransitionHandler
from app.services.taskboard_service import TaskboardService

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Request context
# ---------------------------------------------------------------------------


async def get_organization_id(
    x_organization_id: UUID = Header(
        ..., description="Organization whose records the caller may see"
    ),
) -> UUID:
    """Caller's organization, as established by the authentication layer."""
    return x_organization_id


def get_clock() -> Clock:
    return utc_now


# ---------------------------------------------------------------------------
# Repository factory functions (one per repository, each gets the shared db)
# ---------------------------------------------------------------------------


async def get_follow_up_repo(
    db: AsyncSession = Depends(get_db),
):
    from app.repositories.follow_up_repository import FollowUpRepository

    return FollowUpRepository(db)


async def get_enquiry_repo(
    db: AsyncSession = Depends(get_db),
):
    from app.repositories.enquiry_repository import EnquiryRepository

    return EnquiryRepository(db)


async def get_directory_repo(
    db: AsyncSession = Depends(get_db),
):
    from app.repositories.directory_repository import DirectoryRepository

    return DirectoryRepository(db)


# ---------------------------------------------------------------------------
# Service factory functions
# ---------------------------------------------------------------------------


async def get_taskboard_service(
    clock: Clock = Depends(get_clock),
) -> TaskboardService:
    """Build a :class:`TaskboardService` bound to the reference time zone."""
    return TaskboardService(clock=clock, tz=settings.reference_tz)


async def get_status_transition_handler(
    clock: Clock = Depends(get_clock),
) -> StatusTransitionHandler:
    return StatusTransitionHandler(clock=clock)
