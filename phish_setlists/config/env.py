"""
Environment configuration management module.

This module provides a centralized Environment manager class that loads,
validates, and serves all configuration values for the application.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from ..constants import DEFAULT_ARTIST_NAME, DEFAULT_BASE_URL
from .schema import ConfigSchema
from .loader import ConfigLoader

logger = logging.getLogger(__name__)

# Module-level singleton instance
_ENV: Optional["Env"] = None


class ConfigError(Exception):
    """Raised when configuration is missing or invalid, or a request cannot be formed."""
    pass


@dataclass(frozen=True)
class Env:
    """Immutable configuration container built from the validated schema."""

    PHISHNET_API_KEY: str
    PHISHNET_BASE_URL: str = DEFAULT_BASE_URL
    PHISHNET_ARTIST: str = DEFAULT_ARTIST_NAME
    PHISHNET_TIMEOUT: Optional[float] = None

    @staticmethod
    def load(
        cli_args: Optional[Any] = None,
        cli_overrides: Optional[Mapping[str, str]] = None,
    ) -> "Env":
        """
        Load configuration from all sources with precedence handling.

        Args:
            cli_args: Optional parsed argparse namespace
            cli_overrides: Optional mapping of env var name to value

        Returns:
            Configured Env instance

        Raises:
            ConfigError: If required fields are missing or invalid
        """
        global _ENV

        try:
            config = ConfigLoader.load(
                schema=ConfigSchema,
                cli_args=cli_args,
                cli_overrides=cli_overrides,
            )
        except ValueError as e:
            raise ConfigError(str(e)) from e

        _ENV = Env.from_schema(config)
        logger.debug(f"Environment configuration loaded: {_ENV.mask()}")
        return _ENV

    @staticmethod
    def current() -> "Env":
        """
        Return the globally-initialized Env instance.

        Raises:
            ConfigError: If Env.load() has not been called yet
        """
        if _ENV is None:
            raise ConfigError("Environment not initialized. Call Env.load() first.")
        return _ENV

    @classmethod
    def from_schema(cls, config: ConfigSchema) -> "Env":
        return cls(
            PHISHNET_API_KEY=config.phishnet_api_key,
            PHISHNET_BASE_URL=config.phishnet_base_url,
            PHISHNET_ARTIST=config.artist_name,
            PHISHNET_TIMEOUT=config.request_timeout,
        )

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, str]) -> "Env":
        """
        Create Env instance from mapping (useful for testing).

        Args:
            mapping: Dictionary of configuration values keyed by env var name

        Returns:
            Env instance

        Raises:
            ConfigError: If required fields are missing or invalid
        """
        api_key = (mapping.get("PHISHNET_API_KEY") or "").strip()
        if not api_key:
            raise ConfigError("Missing required configuration: PHISHNET_API_KEY")

        timeout = mapping.get("PHISHNET_TIMEOUT")
        try:
            timeout = float(timeout) if timeout else None
        except (TypeError, ValueError) as e:
            raise ConfigError(f"PHISHNET_TIMEOUT must be a number: {timeout}") from e

        return cls(
            PHISHNET_API_KEY=api_key,
            PHISHNET_BASE_URL=(mapping.get("PHISHNET_BASE_URL") or DEFAULT_BASE_URL).rstrip("/"),
            PHISHNET_ARTIST=mapping.get("PHISHNET_ARTIST") or DEFAULT_ARTIST_NAME,
            PHISHNET_TIMEOUT=timeout,
        )

    def to_dict(self) -> dict:
        return {
            "PHISHNET_API_KEY": self.PHISHNET_API_KEY,
            "PHISHNET_BASE_URL": self.PHISHNET_BASE_URL,
            "PHISHNET_ARTIST": self.PHISHNET_ARTIST,
            "PHISHNET_TIMEOUT": self.PHISHNET_TIMEOUT,
        }

    def mask(self) -> dict:
        """Return masked version for safe logging (hides the API key)."""
        masked = self.to_dict()
        masked["PHISHNET_API_KEY"] = "***" if self.PHISHNET_API_KEY else None
        return masked
