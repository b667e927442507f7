import logging
from uuid import UUID

from app.core.clock import Clock, utc_now
from app.core.exceptions import FollowUpNotFoundError
from app.models.follow_up import FollowUp
from app.repositories.follow_up_repository import FollowUpRepository
from app.schemas.common import CallStatus, FollowUpStatus

logger = logging.getLogger(__name__)


class StatusTransitionHandler:
    """Applies a call-status change to one follow-up.

    Any canonical status may be requested from any other.  Side effects:
    ``attempted`` stamps ``attempted_at``; ``contacted`` stamps
    ``contacted_at`` and completes the task, stamping ``completed_at``.
    Repeating a transition refreshes the timestamps.  Enquiries are never written here.

    Concurrent transitions of the same follow-up are last-write-wins.
    """

    def __init__(self, clock: Clock = utc_now) -> None:
        self._clock = clock

    async def apply(
        self,
        follow_up_id: UUID,
        organization_id: UUID,
        target: CallStatus,
        follow_up_repo: FollowUpRepository,
    ) -> FollowUp:
        follow_up = await follow_up_repo.get_for_organization(
            follow_up_id, organization_id
        )
        if follow_up is None:
            raise FollowUpNotFoundError(f"Follow-up {follow_up_id} not found")

        now = self._clock()
        previous = follow_up.call_status
        follow_up.call_status = target.value
        if target == CallStatus.attempted:
            follow_up.attempted_at = now
        elif target == CallStatus.contacted:
            follow_up.contacted_at = now
            follow_up.status = FollowUpStatus.completed.value
            follow_up.completed_at = now

        await follow_up_repo.commit()
        logger.info(
            "Follow-up %s call status %s -> %s", follow_up_id, previous, target.value
        )
        return follow_up
