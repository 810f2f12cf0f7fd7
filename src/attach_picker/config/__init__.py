"""Shared configuration helpers."""

from .errors import ConfigurationError
from .runtime import (
    env_bool,
    env_float,
    env_list,
    env_str,
    parse_bool,
    reset_default_values,
)
from .settings import flatten_settings, load_settings

__all__ = [
    "ConfigurationError",
    "env_bool",
    "env_float",
    "env_list",
    "env_str",
    "flatten_settings",
    "load_settings",
    "parse_bool",
    "reset_default_values",
]
