from slowapi import Limiter
from slowapi.util import get_remote_address

from app.core.config import settings

# Keyed on client IP.  The storage URI decides whether counters live in
# process memory or in Redis.
limiter = Limiter(
    key_func=get_remote_address,
    storage_uri=settings.RATE_LIMIT_STORAGE_URI,
)
