from datetime import datetime, timezone
from itertools import chain
from typing import Iterable, List, Optional

from app.schemas.taskboard import UnifiedTask

# Rows without an effective time compare as the latest possible instant
NO_TIME_SENTINEL = datetime.max.replace(tzinfo=timezone.utc)


def sort_key(task: UnifiedTask) -> datetime:
    return task.effective_scheduled_time or NO_TIME_SENTINEL


def merge_tasks(*sources: Iterable[UnifiedTask]) -> List[UnifiedTask]:
    """Concatenate the per-source lists; this order breaks sort ties."""
    return list(chain.from_iterable(sources))


def sort_tasks(tasks: Iterable[UnifiedTask]) -> List[UnifiedTask]:
    """Order by effective time, untimed rows last.  ``sorted`` is stable."""
    return sorted(tasks, key=sort_key)


def assign_sequence(tasks: Iterable[UnifiedTask]) -> List[UnifiedTask]:
    """Number rows 1..N in their current order (display only)."""
    return [
        task.model_copy(update={"s_no": position})
        for position, task in enumerate(tasks, start=1)
    ]


def arrange(*sources: Iterable[UnifiedTask]) -> List[UnifiedTask]:
    """Merge, sort and sequence in one go."""
    return assign_sequence(sort_tasks(merge_tasks(*sources)))


def paginate(
    tasks: List[UnifiedTask], skip: int = 0, limit: Optional[int] = None
) -> List[UnifiedTask]:
    """Slice an already sequenced list; sequence numbers stay global."""
    if limit is None:
        return tasks[skip:]
    return tasks[skip : skip + limit]
