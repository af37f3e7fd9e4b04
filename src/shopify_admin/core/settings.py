"""Client settings and configuration.

This module defines the configuration options for the Admin API client.
Settings are loaded from environment variables with sensible defaults.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from shopify_admin.__version__ import __version__


class Settings(BaseSettings):
    """Client settings loaded from environment variables.

    Settings can be overridden via environment variables or .env files.
    """

    # Shop identity and authentication
    shop_name: str | None = Field(default=None, alias="SHOPIFY_SHOP_NAME")
    access_token: str | None = Field(default=None, alias="SHOPIFY_ACCESS_TOKEN")

    # API version segment, e.g. "2024-01"; unset uses the unversioned prefix
    api_version: str | None = Field(default=None, alias="SHOPIFY_API_VERSION")

    # HTTP behaviour
    http_timeout_seconds: float = Field(
        default=10.0,
        alias="SHOPIFY_HTTP_TIMEOUT_SECONDS",
    )
    user_agent: str = Field(
        default=f"shopify-admin/{__version__}",
        alias="SHOPIFY_USER_AGENT",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        validate_assignment=True,
        extra="ignore",
    )


settings = Settings()
