"""
Configuration schema definition using Pydantic.

This module defines the declarative configuration schema that serves as
the single source of truth for all configuration in the application.
"""

from typing import Optional, Any
from pydantic import BaseModel, Field, field_validator

from ..constants import DEFAULT_ARTIST_NAME, DEFAULT_BASE_URL


class ConfigSchema(BaseModel):
    """
    Declarative configuration schema.

    Each field can be set via environment variables or CLI arguments.
    """

    phishnet_api_key: str = Field(
        ...,
        description="Phish.net API key attached to every request",
        json_schema_extra={
            "env_var": "PHISHNET_API_KEY",
            "cli_arg": "api_key",
            "sensitive": True,
        }
    )

    phishnet_base_url: str = Field(
        DEFAULT_BASE_URL,
        description="Base URL of the Phish.net v5 API",
        json_schema_extra={
            "env_var": "PHISHNET_BASE_URL",
            "cli_arg": "base_url",
        }
    )

    artist_name: str = Field(
        DEFAULT_ARTIST_NAME,
        min_length=1,
        description="Artist whose shows are kept (case-insensitive match)",
        json_schema_extra={
            "env_var": "PHISHNET_ARTIST",
            "cli_arg": "artist",
        }
    )

    request_timeout: Optional[float] = Field(
        None,
        gt=0,
        description="Transport timeout in seconds (transport default when unset)",
        json_schema_extra={
            "env_var": "PHISHNET_TIMEOUT",
            "cli_arg": "timeout",
        }
    )

    @field_validator("phishnet_api_key", mode="before")
    @classmethod
    def reject_blank_key(cls, v: Any) -> Any:
        """An API key made only of whitespace counts as missing."""
        if isinstance(v, str) and not v.strip():
            raise ValueError("API key must not be empty")
        return v

    @field_validator("phishnet_base_url")
    @classmethod
    def check_base_url(cls, v: str) -> str:
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"Base URL must start with http:// or https://: {v}")
        return v.rstrip("/")

    model_config = {
        "validate_assignment": True,
        "extra": "forbid"
    }
