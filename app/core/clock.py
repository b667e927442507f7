from datetime import datetime, timezone
from typing import Callable

# Injected wherever "now" matters (date-range defaults, transition
# timestamps, export filenames) so tests can pin time.
Clock = Callable[[], datetime]


def utc_now() -> datetime:
    """Return the current instant as an aware UTC ``datetime``."""
    return datetime.now(timezone.utc)
