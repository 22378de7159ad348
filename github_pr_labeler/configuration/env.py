"""Pydantic Settings model for application configuration."""

from pathlib import Path

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Environment variable settings, mostly provided by the GitHub Actions runner."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Generic application-wide settings
    DEBUG: bool = False

    # GitHub API settings
    GITHUB_API_URL: str = "https://api.github.com"
    GITHUB_REPOSITORY: str | None = None

    # Workflow run settings
    GITHUB_EVENT_NAME: str | None = None
    GITHUB_EVENT_PATH: Path | None = None
    GITHUB_OUTPUT: Path | None = None

    # Token settings; the action's `token` input arrives as INPUT_TOKEN
    GITHUB_PAT_TOKEN: str | None = Field(default=None, validation_alias=AliasChoices("INPUT_TOKEN", "GITHUB_PAT_TOKEN", "GITHUB_TOKEN"))

    # GitHub App settings
    GITHUB_APP_ID: int | None = None
    GITHUB_APP_PRIVATE_KEY_PATH: Path | None = None
    GITHUB_APP_INSTALLATION_ID: int | None = None
