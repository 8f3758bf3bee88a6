"""Configuration exports."""

from .config_scaffold_builder import (
    DEFAULT_SETTINGS_FILENAME,
    build_placeholder_settings,
    write_placeholder_settings,
)
from .loader import ConfigurationError, load_settings, parse_settings

__all__ = [
    "ConfigurationError",
    "DEFAULT_SETTINGS_FILENAME",
    "build_placeholder_settings",
    "load_settings",
    "parse_settings",
    "write_placeholder_settings",
]
