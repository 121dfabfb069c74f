"""Application configuration management."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

BASE_DIR = Path(__file__).resolve().parents[3]
ENV_FILE = BASE_DIR / ".env"

# Load environment variables early to support tools that do not rely on Pydantic directly.
if ENV_FILE.exists():
    load_dotenv(ENV_FILE)
else:
    load_dotenv()


class Settings(BaseSettings):
    """Defines environment-driven application settings."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE,
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    environment: str = Field(default="development", alias="APP_ENV")
    debug: bool = Field(default=False, alias="APP_DEBUG")

    app_name: str = Field(default="Periodic Notifier", alias="APP_NAME")
    app_version: str = Field(default="0.1.0", alias="APP_VERSION")

    host: str = Field(default="127.0.0.1", alias="APP_HOST")
    port: int = Field(default=8000, alias="APP_PORT")

    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    notifier_schedule: str = Field(default="every 5 seconds", alias="NOTIFIER_SCHEDULE")
    notifier_message_prefix: str = Field(
        default="Logging an event at", alias="NOTIFIER_MESSAGE_PREFIX"
    )
    notifier_run_on_startup: bool = Field(default=False, alias="NOTIFIER_RUN_ON_STARTUP")


@lru_cache
def get_settings() -> Settings:
    """Return a cached settings instance."""

    return Settings()
