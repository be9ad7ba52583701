"""Pydantic Settings model for application configuration."""

from pydantic_settings import BaseSettings, SettingsConfigDict

from vivaldi_build_trigger.utils.constants import (
    DEFAULT_GITHUB_API_URL,
    DEFAULT_REPO,
    DEFAULT_TEST_DATA_URL,
    DEFAULT_WORKFLOW_FILE,
    DEFAULT_WORKFLOW_REF,
)


class Settings(BaseSettings):
    """Environment variable settings for the application."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Generic application-wide settings
    DEBUG: bool = False

    # GitHub API settings
    GITHUB_API_URL: str = DEFAULT_GITHUB_API_URL
    GITHUB_ACCESS_TOKEN: str | None = None
    REPO: str = DEFAULT_REPO
    WORKFLOW_FILE: str = DEFAULT_WORKFLOW_FILE
    WORKFLOW_REF: str = DEFAULT_WORKFLOW_REF

    # Vivaldi version sources
    TEST_DATA_URL: str = DEFAULT_TEST_DATA_URL


settings = Settings()
