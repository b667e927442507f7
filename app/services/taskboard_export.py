import csv
from datetime import datetime
from io import StringIO
from typing import Iterable, List, Optional

from app.core.constants import EXPORT_FILENAME_PREFIX, EXPORT_HEADERS, NOT_AVAILABLE
from app.schemas.taskboard import UnifiedTask


def _cell(value: Optional[object]) -> str:
    if value is None or value == "":
        return NOT_AVAILABLE
    return str(value)


def export_row(task: UnifiedTask) -> List[str]:
    """Cells for one task, in ``EXPORT_HEADERS`` order."""
    return [
        _cell(task.s_no),
        _cell(task.date_label),
        _cell(task.time_label),
        _cell(task.call_type.value),
        _cell(task.member_name),
        _cell(task.member_mobile),
        _cell(task.call_status.value),
        _cell(task.staff_name),
    ]


def render_csv(tasks: Iterable[UnifiedTask]) -> str:
    """Render sequenced tasks as CSV with every field quoted."""
    output = StringIO()
    writer = csv.writer(output, quoting=csv.QUOTE_ALL, lineterminator="\n")
    writer.writerow(EXPORT_HEADERS)
    for task in tasks:
        writer.writerow(export_row(task))
    return output.getvalue()


def export_filename(generated_at: datetime) -> str:
    return f"{EXPORT_FILENAME_PREFIX}-{generated_at.strftime('%Y%m%d%H%M%S')}.csv"
