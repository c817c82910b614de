"""
Schema-driven configuration loader.

This module provides a ConfigLoader that uses the configuration schema
to automatically load, validate, and merge configuration from multiple sources.
"""

import logging
import os
import typing
from typing import Dict, Any, Optional, Mapping
from argparse import ArgumentParser, Namespace

from dotenv import load_dotenv
from pydantic import ValidationError

from .schema import ConfigSchema


logger = logging.getLogger(__name__)

DOTENV_FILE = ".env.local"


class ConfigLoader:
    """Loads and validates configuration using a schema-driven approach."""

    @staticmethod
    def load(
        schema: type[ConfigSchema] = ConfigSchema,
        cli_args: Optional[Namespace] = None,
        cli_overrides: Optional[Mapping[str, Any]] = None,
    ) -> ConfigSchema:
        """
        Load configuration from all sources with precedence handling.

        Loading order (lowest to highest priority):
        1. Schema defaults
        2. .env.local file (if it exists)
        3. OS environment variables
        4. CLI arguments, then explicit overrides keyed by env var name

        Args:
            schema: The configuration schema class to use
            cli_args: Parsed CLI arguments (if available)
            cli_overrides: Mapping of env var name to value

        Returns:
            Validated configuration instance

        Raises:
            ValueError: If configuration validation fails
        """
        config_dict: Dict[str, Any] = {}

        _load_from_dotenv_file()

        for field_name, extra in _field_extras(schema):
            env_var = extra.get("env_var")
            if env_var:
                env_value = os.getenv(env_var)
                if env_value is not None and env_value.strip():
                    config_dict[field_name] = env_value.strip()

        if cli_args:
            for field_name, extra in _field_extras(schema):
                cli_arg = extra.get("cli_arg")
                if cli_arg and hasattr(cli_args, cli_arg):
                    _apply_override(config_dict, field_name, getattr(cli_args, cli_arg))

        if cli_overrides:
            for field_name, extra in _field_extras(schema):
                env_var = extra.get("env_var")
                if env_var in cli_overrides:
                    _apply_override(config_dict, field_name, cli_overrides[env_var])

        try:
            config = schema(**config_dict)
            logger.debug("Configuration loaded and validated successfully")
            return config
        except ValidationError as e:
            errors = []
            for error in e.errors():
                field = error["loc"][0] if error["loc"] else "config"
                extra = _extra_for(schema, field)
                env_var = extra.get("env_var", str(field).upper())
                errors.append(f"{env_var}: {error['msg']}")

            error_msg = "Configuration validation failed:\n" + "\n".join(f"  - {err}" for err in errors)
            raise ValueError(error_msg) from e

    @staticmethod
    def add_schema_arguments(
        parser: ArgumentParser,
        schema: type[ConfigSchema] = ConfigSchema,
    ) -> ArgumentParser:
        """
        Add one ``--option`` per schema field that declares a ``cli_arg``.

        Defaults are left as None so the loader can tell "not given" apart
        from a value and fall back to the environment.
        """
        for field_name, field_info in schema.model_fields.items():
            extra = field_info.json_schema_extra or {}
            cli_arg = extra.get("cli_arg")
            if not cli_arg:
                continue

            kwargs = {
                "dest": cli_arg,
                "help": field_info.description or f"Override {extra.get('env_var', field_name.upper())} env var",
                "default": None,
            }

            field_type = field_info.annotation
            if typing.get_origin(field_type) is typing.Union:
                non_none_args = [arg for arg in typing.get_args(field_type) if arg is not type(None)]
                if len(non_none_args) == 1:
                    field_type = non_none_args[0]

            if field_type == int:
                kwargs["type"] = int
            elif field_type == float:
                kwargs["type"] = float

            parser.add_argument(f"--{cli_arg.replace('_', '-')}", **kwargs)

        return parser


def _field_extras(schema: type[ConfigSchema]):
    for field_name, field_info in schema.model_fields.items():
        yield field_name, field_info.json_schema_extra or {}


def _extra_for(schema: type[ConfigSchema], field: Any) -> dict:
    field_info = schema.model_fields.get(field)
    if field_info and field_info.json_schema_extra:
        return field_info.json_schema_extra
    return {}


def _apply_override(config_dict: Dict[str, Any], field_name: str, value: Any) -> None:
    if value is None:
        return
    if isinstance(value, str):
        stripped = value.strip()
        # Explicit empty string clears the value
        config_dict[field_name] = stripped if stripped else None
    else:
        config_dict[field_name] = value


def _load_from_dotenv_file() -> None:
    """Load values from .env.local without overriding the real environment."""
    if os.path.exists(DOTENV_FILE):
        load_dotenv(DOTENV_FILE, override=False)
        logger.debug(f"Loaded configuration from {DOTENV_FILE} file")
    else:
        logger.debug(f"{DOTENV_FILE} file not found, skipping")
