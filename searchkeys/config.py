"""
searchkeys configuration management.

Loads configuration from environment variables or .env file.
"""

from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class SearchKeysConfig(BaseSettings):
    """
    searchkeys configuration settings.

    Can be loaded from:
    1. Environment variables (SEARCHKEYS_HOST, SEARCHKEYS_API_KEY, etc.)
    2. .env file in project root
    3. Direct instantiation with kwargs

    Example:
        ```python
        # From environment
        config = SearchKeysConfig()

        # Direct instantiation
        config = SearchKeysConfig(
            host="http://localhost:7700",
            api_key="masterKey"
        )
        ```
    """

    model_config = SettingsConfigDict(
        env_prefix="SEARCHKEYS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Search service connection
    host: str = Field(
        default="http://localhost:7700",
        description="Base URL of the search service (e.g., http://localhost:7700)",
    )

    api_key: Optional[str] = Field(
        default=None,
        description="Master or admin key used to manage keys",
    )

    timeout: float = Field(
        default=30.0,
        description="Request timeout in seconds",
    )

    # Debug
    debug: bool = Field(
        default=False,
        description="Enable debug logging",
    )

    @field_validator("host")
    @classmethod
    def validate_host(cls, v: str) -> str:
        """Ensure the host is an http(s) URL."""
        if not v.startswith(("http://", "https://")):
            raise ValueError("host must start with http:// or https://")
        return v.rstrip("/")

    @field_validator("timeout")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("timeout must be positive")
        return v


def load_config(**kwargs) -> SearchKeysConfig:
    """
    Load searchkeys configuration.

    Priority order:
    1. Keyword arguments
    2. Environment variables (SEARCHKEYS_*)
    3. .env file

    Args:
        **kwargs: Override configuration values

    Returns:
        SearchKeysConfig instance

    Raises:
        ValidationError: If a value is invalid

    Example:
        ```python
        config = load_config(debug=True)
        ```
    """
    return SearchKeysConfig(**kwargs)
