from collections import Counter
from typing import Mapping, Optional

from app.schemas.common import CallStatus
from app.schemas.taskboard import StatusCount, TaskboardStats
from app.services.call_status import (
    normalize_enquiry_status,
    normalize_follow_up_status,
)


def percent_of(count: int, total: int) -> int:
    """``round(100 * count / total)`` with halves rounded up; 0 for an empty set."""
    if total <= 0:
        return 0
    return (200 * count + total) // (2 * total)


def tally_native_counts(
    follow_up_counts: Mapping[Optional[str], int],
    enquiry_counts: Mapping[Optional[str], int],
) -> Counter:
    """Fold per-source native status counts into canonical status counts."""
    counts: Counter = Counter()
    for native, count in follow_up_counts.items():
        counts[normalize_follow_up_status(native)] += count
    for native, count in enquiry_counts.items():
        counts[normalize_enquiry_status(native)] += count
    return counts


def build_stats(counts: Mapping[CallStatus, int]) -> TaskboardStats:
    """Return every canonical status with its count and percentage."""
    total = sum(counts.get(status, 0) for status in CallStatus)

    def entry(status: CallStatus) -> StatusCount:
        count = counts.get(status, 0)
        return StatusCount(count=count, percent=percent_of(count, total))

    return TaskboardStats(
        scheduled=entry(CallStatus.scheduled),
        attempted=entry(CallStatus.attempted),
        contacted=entry(CallStatus.contacted),
        not_contacted=entry(CallStatus.not_contacted),
        missed=entry(CallStatus.missed),
        total=total,
    )
