"""
Configuration settings for the Gerrit groups client.
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class GerritSettings(BaseSettings):
    """
    Connection settings for a Gerrit server.

    Settings are loaded from environment variables with GERRIT_ prefix.
    Example: GERRIT_URL, GERRIT_USERNAME, GERRIT_PASSWORD.
    """

    model_config = SettingsConfigDict(
        env_prefix="GERRIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    url: str = Field(
        default="http://localhost:8080",
        description="Gerrit server URL"
    )

    # HTTP credentials; without them requests are anonymous
    username: Optional[str] = Field(
        default=None,
        description="Account username for HTTP basic authentication"
    )
    password: Optional[str] = Field(
        default=None,
        description="HTTP password generated in the account settings"
    )

    timeout: float = Field(
        default=30.0,
        description="HTTP request timeout in seconds"
    )


@lru_cache
def get_gerrit_settings() -> GerritSettings:
    """
    Get Gerrit settings singleton.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return GerritSettings()


def configure_gerrit_settings(
    url: Optional[str] = None,
    username: Optional[str] = None,
    password: Optional[str] = None,
    **kwargs,
) -> GerritSettings:
    """
    Build settings programmatically.

    Explicit arguments override environment variables; ``None`` values are
    ignored.

    Returns:
        Configured GerritSettings instance
    """
    settings_dict = {
        k: v for k, v in {
            "url": url,
            "username": username,
            "password": password,
            **kwargs,
        }.items() if v is not None
    }
    return GerritSettings(**settings_dict)


def reset_gerrit_settings() -> None:
    """Reload settings from the environment on next access."""
    get_gerrit_settings.cache_clear()
