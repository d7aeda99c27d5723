"""Pydantic Settings model for application configuration."""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

from resume_sync.utils.constants import DEFAULT_GIT_BRANCH, DEFAULT_GIT_REMOTE, DEFAULT_LOCK_TIMEOUT, DEFAULT_VERCEL_BIN


class Settings(BaseSettings):
    """Environment variable settings for the application."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
    )

    # Generic application-wide settings
    DEBUG: bool = False

    # File locations
    SOURCE_FILE: Path | None = None
    DEST_FILE: Path | None = None
    PROJECT_DIR: Path | None = None
    LOG_FILE: Path | None = None

    # Git settings
    ENABLE_GIT: bool = True
    GIT_BRANCH: str = DEFAULT_GIT_BRANCH
    GIT_REMOTE: str = DEFAULT_GIT_REMOTE
    COMMIT_MESSAGE_TEMPLATE: str | None = None

    # Vercel settings
    ENABLE_VERCEL: bool = True
    VERCEL_BIN: str = DEFAULT_VERCEL_BIN
    NVM_DIR: Path | None = None

    # Notification settings
    ENABLE_NOTIFICATIONS: bool = True

    # Run lock settings
    ENABLE_LOCK: bool = True
    LOCK_FILE: Path | None = None
    LOCK_TIMEOUT: float = DEFAULT_LOCK_TIMEOUT


settings = Settings()


def reload_settings() -> Settings:
    """Re-read settings from the environment, e.g. after loading an extra .env file."""
    global settings
    settings = Settings()
    return settings
