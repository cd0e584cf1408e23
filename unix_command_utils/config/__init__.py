"""Module de configuration."""

from unix_command_utils.config.loader import (
    ConfigLoader,
    ConfigFileLoader,
    FileConfigLoader,
    validate_with_schema,
)

__all__ = [
    "ConfigLoader",
    "ConfigFileLoader",
    "FileConfigLoader",
    "validate_with_schema",
]
