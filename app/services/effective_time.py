from datetime import datetime, timezone, tzinfo
from typing import Any, Optional

from app.core.constants import DATE_LABEL_FORMAT, NOT_AVAILABLE, TIME_LABEL_FORMAT
from app.services.date_range import parse_instant


def follow_up_effective_time(
    scheduled_time: Any, due_date: Any, tz: tzinfo = timezone.utc
) -> Optional[datetime]:
    """``scheduled_time`` when it parses, else ``due_date``."""
    scheduled = parse_instant(scheduled_time, tz)
    if scheduled is not None:
        return scheduled
    return parse_instant(due_date, tz)


def enquiry_effective_time(
    follow_up_date: Any, tz: tzinfo = timezone.utc
) -> Optional[datetime]:
    """An enquiry is placed by its next follow-up date, or not at all."""
    return parse_instant(follow_up_date, tz)


def format_date_label(
    instant: Optional[datetime], tz: tzinfo = timezone.utc
) -> Optional[str]:
    if instant is None:
        return None
    return instant.astimezone(tz).strftime(DATE_LABEL_FORMAT)


def format_time_label(instant: Optional[datetime], tz: tzinfo = timezone.utc) -> str:
    if instant is None:
        return NOT_AVAILABLE
    return instant.astimezone(tz).strftime(TIME_LABEL_FORMAT)
