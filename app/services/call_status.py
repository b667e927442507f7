import logging
from typing import FrozenSet, Optional

from app.core.constants import (
    DEFAULT_CALL_STATUS,
    DEFAULT_TAB,
    ENQUIRY_CALL_STATUS_MAP,
    TAB_STATUSES,
)
from app.schemas.common import CallStatus, TaskTab

logger = logging.getLogger(__name__)


def normalize_follow_up_status(value: Optional[str]) -> CallStatus:
    """Follow-ups already speak the canonical vocabulary; default when unset."""
    if value is None:
        return DEFAULT_CALL_STATUS
    try:
        return CallStatus(value)
    except ValueError:
        return DEFAULT_CALL_STATUS


def normalize_enquiry_status(value: Optional[str]) -> CallStatus:
    """Translate an enquiry's ``last_call_status`` to the canonical status."""
    if value is None:
        return DEFAULT_CALL_STATUS
    return ENQUIRY_CALL_STATUS_MAP.get(value, DEFAULT_CALL_STATUS)


def parse_tab(tab: Optional[str]) -> TaskTab:
    if tab:
        try:
            return TaskTab(tab.strip().lower())
        except ValueError:
            logger.warning("Unknown taskboard tab %r; using %s", tab, DEFAULT_TAB.value)
    return DEFAULT_TAB


def resolve_status_scope(
    call_status: Optional[str], tab: Optional[str], *, apply_tab: bool = True
) -> Optional[FrozenSet[CallStatus]]:
    """Return the canonical statuses a query should match.

    An explicit *call_status* (anything but ``"all"``) wins.  Otherwise,
    when *apply_tab* is set, the tab decides; without a tab every status
    matches and ``None`` is returned.
    """
    if call_status and call_status != "all":
        try:
            return frozenset({CallStatus(call_status)})
        except ValueError:
            logger.warning("Ignoring unknown callStatus filter %r", call_status)
    if not apply_tab:
        return None
    return TAB_STATUSES[parse_tab(tab)]
