from datetime import timedelta
from pathlib import Path

from pydantic import ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from habitfield.core.errors import ConfigError


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    DATABASE_URL: str = f"sqlite:///{Path.home() / '.habitfield.db'}"
    LOG_LEVEL: str = "WARNING"

    # A gap longer than this between two records restarts the streak.
    # Exactly this long still counts as a continuation.
    STREAK_RESET_HOURS: int = 48

    @field_validator("STREAK_RESET_HOURS")
    @classmethod
    def positive_hours(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("STREAK_RESET_HOURS must be greater than zero")
        return v

    @field_validator("LOG_LEVEL")
    @classmethod
    def upper_level(cls, v: str) -> str:
        return v.strip().upper()

    @property
    def streak_reset_after(self) -> timedelta:
        return timedelta(hours=self.STREAK_RESET_HOURS)


def get_settings() -> Settings:
    """Fresh settings read. Invalid values surface as ConfigError."""
    try:
        return Settings()
    except ValidationError as exc:
        raise ConfigError(exc.errors()) from exc
