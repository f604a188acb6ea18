"""Application settings using pydantic-settings.

Settings are loaded from environment variables with defaults matching the
standard locations of the local account database.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AccountSourceSettings(BaseSettings):
    """Locations of the two account database files.

    Environment variables:
        UNIX_ACCOUNTS_GROUP_PATH: Group file path (default: /etc/group)
        UNIX_ACCOUNTS_PASSWD_PATH: User file path (default: /etc/passwd)
    """

    model_config = SettingsConfigDict(
        env_prefix="UNIX_ACCOUNTS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    group_path: str = Field(default="/etc/group", description="Group file path")
    passwd_path: str = Field(default="/etc/passwd", description="User file path")

    @field_validator("group_path", "passwd_path")
    @classmethod
    def validate_path_not_empty(cls, value: str) -> str:
        """Reject empty source paths."""
        if not value.strip():
            raise ValueError("account source path must not be empty")
        return value


class LoggingSettings(BaseSettings):
    """Logging settings.

    Environment variables:
        UNIX_ACCOUNTS_LOG_LEVEL: Minimum level to emit (default: info)
        UNIX_ACCOUNTS_LOG_FORCE_JSON: Always render JSON, even on a TTY (default: false)
    """

    model_config = SettingsConfigDict(
        env_prefix="UNIX_ACCOUNTS_LOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    level: Literal["debug", "info", "warning", "error", "critical"] = Field(
        default="info",
        description="Minimum log level",
    )
    force_json: bool = Field(default=False, description="Always render JSON logs")


@lru_cache
def get_account_source_settings() -> AccountSourceSettings:
    """Get cached account source settings.

    Uses lru_cache to ensure settings are only loaded once.
    Called by the application entry point, never by library code.
    """
    return AccountSourceSettings()


@lru_cache
def get_logging_settings() -> LoggingSettings:
    """Get cached logging settings.

    Uses lru_cache to ensure settings are only loaded once.
    Called by the application entry point, never by library code.
    """
    return LoggingSettings()
