"""
Application Settings
Load from environment variables
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from app.utils.time import resolve_timezone


class Settings(BaseSettings):
    """Application settings from environment"""

    # ======================
    # Application
    # ======================
    APP_ENV: str = "development"
    LOG_LEVEL: str = "INFO"

    # ======================
    # Timezone
    # ======================
    # Display only, stored values stay UTC
    DISPLAY_TIMEZONE: str = "UTC"

    # ======================
    # Pydantic v2 config
    # ======================
    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="forbid",
    )

    @field_validator("DISPLAY_TIMEZONE")
    @classmethod
    def _validate_display_timezone(cls, value: str) -> str:
        return resolve_timezone(value).value

    @field_validator("LOG_LEVEL")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        return value.upper()


settings = Settings()
