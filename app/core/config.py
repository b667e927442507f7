from datetime import timezone, tzinfo
from zoneinfo import ZoneInfo

from pydantic import ConfigDict
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = ConfigDict(env_file=".env", case_sensitive=True)

    DATABASE_URL: str
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Reference zone used for calendar-day boundaries and display labels
    TIMEZONE: str = "UTC"

    # slowapi storage backend; "redis://host:6379/1" shares limits across workers
    RATE_LIMIT_STORAGE_URI: str = "memory://"
    EXPORT_RATE_LIMIT: str = "10/minute"

    # Upper bound for the ?limit= query parameter on the taskboard list
    TASKBOARD_MAX_LIMIT: int = 500

    # CORS configuration: comma-separated origins
    CORS_ORIGINS: str = "http://localhost:3000,http://localhost:5173"

    @property
    def reference_tz(self) -> tzinfo:
        """Return the ``tzinfo`` for :attr:`TIMEZONE`."""
        if self.TIMEZONE.upper() == "UTC":
            return timezone.utc
        return ZoneInfo(self.TIMEZONE)


settings = Settings()
