"""Configuration errors raised while reading environment defaults and settings files."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Union

from ..exceptions import ConfigurationError as _BaseConfigurationError


class ConfigurationError(_BaseConfigurationError, RuntimeError):
    """A configuration source is unreadable or holds a value of the wrong shape."""

    @classmethod
    def missing_variable(cls, name: str) -> "ConfigurationError":
        return cls(f"Required environment variable {name!r} is not set", name=name)

    @classmethod
    def invalid_variable(cls, name: str, raw: str, expected: str) -> "ConfigurationError":
        return cls(f"Environment variable {name!r} must be {expected} (got {raw!r})", name=name)

    @classmethod
    def invalid_setting(cls, key: str, value: Any, expected: str) -> "ConfigurationError":
        """Setting *key* parsed, but its value is not usable as *expected*."""
        return cls(f"Setting {key!r} must be {expected} (got {value!r})", name=key)

    @classmethod
    def unreadable_file(cls, kind: str, path: Union[str, Path]) -> "ConfigurationError":
        return cls(f"Could not read {kind} {path}", path=str(path))

    @classmethod
    def malformed_file(cls, kind: str, path: Union[str, Path], expected: str) -> "ConfigurationError":
        return cls(f"{kind.capitalize()} {path} must contain {expected}", path=str(path))


__all__ = ["ConfigurationError"]
