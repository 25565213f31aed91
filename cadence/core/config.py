"""
Application configuration using Pydantic Settings.

Loads configuration from environment variables (.env file).
"""

import datetime
from typing import List, Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Project Info
    PROJECT_NAME: str = "Cadence Training Scheduler"
    VERSION: str = "0.1.0"
    DEBUG: bool = False

    # Database
    DATABASE_USER: str = "postgres"
    DATABASE_PASSWORD: str = "postgres"
    DATABASE_HOST: str = "localhost"
    DATABASE_PORT: int = 5432
    DATABASE_DBNAME: str = "cadence"
    # Full URL override (takes precedence over the parts above)
    DATABASE_URL_OVERRIDE: Optional[str] = None

    # Scheduling
    DEFAULT_TRAINING_DAYS: List[int] = [1, 2, 4, 5]  # Mon/Tue/Thu/Fri, 0 = Sunday
    DEFAULT_TIMEZONE: str = "UTC"
    MAX_PROGRAM_WORKOUTS: int = 366
    SWAP_SENTINEL_DATE: datetime.date = datetime.date(2099, 12, 31)

    # Notifications
    NOTIFICATIONS_ENABLED: bool = True
    NOTIFICATION_WEBHOOK_URL: str = ""
    NOTIFICATION_TIMEOUT_SECONDS: float = 5.0

    # Logging
    LOG_JSON: bool = True

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

    @field_validator("DEFAULT_TRAINING_DAYS")
    @classmethod
    def _weekdays(cls, value: List[int]) -> List[int]:
        if not value or any(not 0 <= day <= 6 for day in value):
            raise ValueError("DEFAULT_TRAINING_DAYS must be a non-empty list of weekdays 0-6 (0 = Sunday)")
        return sorted(set(value))

    @property
    def DATABASE_URL(self) -> str:
        if self.DATABASE_URL_OVERRIDE:
            return self.DATABASE_URL_OVERRIDE
        return (f"postgresql://{self.DATABASE_USER}:{self.DATABASE_PASSWORD}@{self.DATABASE_HOST}"
                f":{self.DATABASE_PORT}/{self.DATABASE_DBNAME}")


# Global settings instance
settings = Settings()
