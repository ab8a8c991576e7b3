"""Application configuration."""

from typing import Literal
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from workout_progress.models.metrics import Timeline, UnitSystem


class Settings(BaseSettings):
    """Application settings.

    Read from ``WORKOUT_PROGRESS_*`` environment variables or a ``.env`` file.
    The aggregation core never reads these directly; services and the CLI
    pass them down as explicit arguments.
    """

    model_config = SettingsConfigDict(
        env_prefix="WORKOUT_PROGRESS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Allow extra env vars without error
    )

    # Display
    unit_system: UnitSystem = Field(
        default=UnitSystem.KG,
        description="Unit system for body weight: kg or lb",
    )
    default_timeline: Timeline = Field(
        default=Timeline.WEEK,
        description="Timeline used when none is requested: week, month or year",
    )
    height_cm: float | None = Field(
        default=None,
        description="User height in centimetres, required for BMI series",
    )

    # Calendar
    timezone: str | None = Field(
        default=None,
        description="IANA timezone for calendar buckets (None = system local zone)",
    )

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Log level",
    )
    log_json: bool = Field(
        default=False,
        description="Render logs as JSON instead of console output",
    )

    @field_validator("timezone")
    @classmethod
    def _validate_timezone(cls, value: str | None) -> str | None:
        if value is None or value == "":
            return None
        try:
            ZoneInfo(value)
        except ZoneInfoNotFoundError as e:
            raise ValueError(f"Unknown timezone: {value}") from e
        return value

    def get_tzinfo(self) -> ZoneInfo | None:
        """Get the configured timezone.

        Returns:
            ZoneInfo for the configured name, or None for the system local zone
        """
        if self.timezone is None:
            return None
        return ZoneInfo(self.timezone)


# Global settings instance
settings = Settings()
