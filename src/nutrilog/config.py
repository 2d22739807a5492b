"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

from nutrilog.domain.goals import ProgressThresholds

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str
    supabase_service_key: str
    default_timezone: str = "UTC"
    summary_default_days: int = 30
    summary_max_days: int = 366
    progress_on_target_min_percent: float = 80.0
    progress_on_target_max_percent: float = 100.0
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    def progress_thresholds(self) -> ProgressThresholds:
        """Return the on-target band used for goal status."""
        return ProgressThresholds(
            on_target_min=self.progress_on_target_min_percent,
            on_target_max=self.progress_on_target_max_percent,
        )
