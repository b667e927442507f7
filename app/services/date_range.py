"""Date handling for the taskboard filters.

Two entry points:

* :func:`parse_instant` turns whatever a record or a query string holds
  into an aware ``datetime`` (or ``None``), accepting ISO-8601 as well as
  the ``DD-MM-YYYY`` / ``YYYY/MM/DD`` spellings staff type by hand.
* :func:`resolve_date_range` turns the list/stats/export filters into a
  closed ``[start, end]`` interval covering whole calendar days.

Neither function raises for bad input; malformed values fall back to the
defaults.
"""

import logging
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta, timezone, tzinfo
from typing import Any, Dict, Optional

from app.core.exceptions import InvalidFilterError
from app.schemas.common import DateFilter

logger = logging.getLogger(__name__)

END_OF_DAY = time(23, 59, 59, 999000)

_KEYWORD_LOOKBACK_DAYS: Dict[str, int] = {
    DateFilter.today.value: 0,
    DateFilter.last_7_days.value: 7,
    DateFilter.last_30_days.value: 30,
}


@dataclass(frozen=True)
class DateInterval:
    """Closed interval of instants; ``start <= end`` always holds."""

    start: datetime
    end: datetime

    def __contains__(self, instant: datetime) -> bool:
        return self.start <= instant <= self.end


def parse_day_month_year(text: str) -> date:
    """Parse a three-part numeric date whose year position varies.

    ``/`` is treated like ``-``.  A 4-digit first part means Y-M-D;
    otherwise the last 4-digit part is the year and the other two parts,
    in order, are day and month.  No 4-digit part, a month outside 1-12,
    a day outside 1-31 or an impossible calendar date raises
    :class:`InvalidFilterError`.
    """
    parts = text.strip().replace("/", "-").split("-")
    if len(parts) != 3 or not all(p.isdecimal() for p in parts):
        raise InvalidFilterError(f"Unrecognised date: {text!r}")

    if len(parts[0]) == 4:
        year, month, day = parts
    else:
        year_positions = [i for i, part in enumerate(parts) if len(part) == 4]
        if not year_positions:
            raise InvalidFilterError(f"No 4-digit year in date: {text!r}")
        year = parts[year_positions[-1]]
        day, month = (p for i, p in enumerate(parts) if i != year_positions[-1])

    y, m, d = int(year), int(month), int(day)
    if not 1 <= m <= 12:
        raise InvalidFilterError(f"Month out of range in date: {text!r}")
    if not 1 <= d <= 31:
        raise InvalidFilterError(f"Day out of range in date: {text!r}")
    try:
        return date(y, m, d)
    except ValueError as exc:
        raise InvalidFilterError(f"Impossible date: {text!r}") from exc


def _parse_iso(text: str) -> Optional[datetime]:
    if text[-1] in "Zz":
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        return None


def parse_instant(value: Any, tz: tzinfo = timezone.utc) -> Optional[datetime]:
    """Return *value* as an aware ``datetime``, or ``None`` if it is not one.

    Naive values are taken to be in *tz*; bare dates map to midnight.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value if value.tzinfo is not None else value.replace(tzinfo=tz)
    if isinstance(value, date):
        return datetime.combine(value, time.min, tzinfo=tz)
    if not isinstance(value, str) or not value.strip():
        return None

    text = value.strip()
    parsed = _parse_iso(text)
    if parsed is not None:
        return parsed if parsed.tzinfo is not None else parsed.replace(tzinfo=tz)

    try:
        return datetime.combine(parse_day_month_year(text), time.min, tzinfo=tz)
    except InvalidFilterError as exc:
        logger.debug("Discarding unparseable instant: %s", exc.detail)
        return None


def day_span(first: date, last: date, tz: tzinfo = timezone.utc) -> DateInterval:
    """Interval from the first instant of *first* to the last of *last*."""
    return DateInterval(
        start=datetime.combine(first, time.min, tzinfo=tz),
        end=datetime.combine(last, END_OF_DAY, tzinfo=tz),
    )


def normalize_keyword(keyword: Optional[str]) -> str:
    """Fold ``last-7-days`` / ``Last_7_Days`` style spellings to ``last7days``."""
    if not keyword:
        return DateFilter.today.value
    return keyword.strip().lower().replace("-", "").replace("_", "")


def resolve_date_range(
    from_date: Any = None,
    to_date: Any = None,
    keyword: Optional[str] = None,
    *,
    now: datetime,
    tz: tzinfo = timezone.utc,
) -> DateInterval:
    """Resolve the taskboard date filters into a whole-day interval.

    Explicit bounds win when both are present and parseable (reversed
    bounds are swapped).  Otherwise *keyword* applies: ``today``,
    ``last7days`` or ``last30days``; anything unrecognised means today.
    """
    today = now.astimezone(tz).date()

    if from_date and to_date:
        start_at = parse_instant(from_date, tz)
        end_at = parse_instant(to_date, tz)
        if start_at is not None and end_at is not None:
            first = start_at.astimezone(tz).date()
            last = end_at.astimezone(tz).date()
            if first > last:
                first, last = last, first
            return day_span(first, last, tz)
        logger.warning(
            "Ignoring unparseable date bounds fromDate=%r toDate=%r",
            from_date,
            to_date,
        )
    elif from_date or to_date:
        logger.warning(
            "Ignoring half-open date range fromDate=%r toDate=%r",
            from_date,
            to_date,
        )

    normalized = normalize_keyword(keyword)
    lookback = _KEYWORD_LOOKBACK_DAYS.get(normalized)
    if lookback is None:
        logger.warning("Unknown date filter %r; using today", keyword)
        lookback = 0
    return day_span(today - timedelta(days=lookback), today, tz)
