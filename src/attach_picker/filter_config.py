"""
Filter configuration for process selection.

A FilterConfig is built once by the caller (from the environment, an editor
settings file, or directly) and passed into the filter and selector. It is
frozen; nothing in the package mutates it.

Environment variables:
    ATTACH_FILTER_BY_ENGINE_TYPE        keep only engine processes (default false)
    ATTACH_AUTO_ATTACH_SINGLE_PROCESS   skip the prompt for a single match (default true)
    ATTACH_ENGINE_PROCESS_NAMES         comma separated engine name substrings
    ATTACH_BLACKLIST                    comma separated exclusion substrings
    ATTACH_HELPER_ENCODING              helper output encoding (default cp936)
    ATTACH_HELPER_TIMEOUT_SECONDS       helper run limit (default 10)
"""

from __future__ import annotations

import codecs
import math
from dataclasses import dataclass
from typing import Any, Iterable, Mapping

from .config import ConfigurationError, env_bool, env_float, env_list, env_str, parse_bool
from .config.runtime_helpers import PatternNormalizer

DEFAULT_HELPER_ENCODING = "cp936"
DEFAULT_HELPER_TIMEOUT_SECONDS = 10.0

ENV_FILTER_BY_ENGINE_TYPE = "ATTACH_FILTER_BY_ENGINE_TYPE"
ENV_AUTO_ATTACH_SINGLE_PROCESS = "ATTACH_AUTO_ATTACH_SINGLE_PROCESS"
ENV_ENGINE_PROCESS_NAMES = "ATTACH_ENGINE_PROCESS_NAMES"
ENV_BLACKLIST = "ATTACH_BLACKLIST"
ENV_HELPER_ENCODING = "ATTACH_HELPER_ENCODING"
ENV_HELPER_TIMEOUT_SECONDS = "ATTACH_HELPER_TIMEOUT_SECONDS"

SETTING_FILTER_BY_ENGINE_TYPE = "emmylua.debug.filterUEProcesses"
SETTING_AUTO_ATTACH_SINGLE_PROCESS = "emmylua.debug.autoAttachSingleProcess"
SETTING_ENGINE_PROCESS_NAMES = "emmylua.debug.ueProcessNames"
SETTING_BLACKLIST = "emmylua.debug.threadFilterBlacklist"
SETTING_HELPER_ENCODING = "emmylua.debug.helperEncoding"
SETTING_HELPER_TIMEOUT_SECONDS = "emmylua.debug.helperTimeoutSeconds"


@dataclass(frozen=True)
class FilterConfig:
    """Named, independently toggleable filtering options."""

    filter_by_engine_type: bool = False
    auto_attach_single_process: bool = True
    engine_process_name_patterns: tuple[str, ...] = ()
    blacklist_patterns: tuple[str, ...] = ()
    helper_encoding: str = DEFAULT_HELPER_ENCODING
    helper_timeout_seconds: float = DEFAULT_HELPER_TIMEOUT_SECONDS

    def __post_init__(self) -> None:
        object.__setattr__(self, "engine_process_name_patterns", _ordered_patterns(self.engine_process_name_patterns))
        object.__setattr__(self, "blacklist_patterns", _ordered_patterns(self.blacklist_patterns))
        if not math.isfinite(self.helper_timeout_seconds) or self.helper_timeout_seconds <= 0:
            raise ConfigurationError.invalid_setting("helper_timeout_seconds", self.helper_timeout_seconds, "a finite positive number")
        try:
            codecs.lookup(self.helper_encoding)
        except LookupError as exc:
            raise ConfigurationError.invalid_setting("helper_encoding", self.helper_encoding, "a known codec name") from exc

    @classmethod
    def from_env(cls) -> "FilterConfig":
        """Build a config from ``ATTACH_*`` environment variables and .env defaults."""
        return cls(
            filter_by_engine_type=bool(env_bool(ENV_FILTER_BY_ENGINE_TYPE, or_value=False)),
            auto_attach_single_process=bool(env_bool(ENV_AUTO_ATTACH_SINGLE_PROCESS, or_value=True)),
            engine_process_name_patterns=env_list(ENV_ENGINE_PROCESS_NAMES, or_value=()) or (),
            blacklist_patterns=env_list(ENV_BLACKLIST, or_value=()) or (),
            helper_encoding=env_str(ENV_HELPER_ENCODING, or_value=DEFAULT_HELPER_ENCODING) or DEFAULT_HELPER_ENCODING,
            helper_timeout_seconds=_pick_float(env_float(ENV_HELPER_TIMEOUT_SECONDS), DEFAULT_HELPER_TIMEOUT_SECONDS),
        )

    @classmethod
    def from_settings(cls, settings: Mapping[str, Any]) -> "FilterConfig":
        """Build a config from flattened editor settings; missing keys keep their defaults."""
        return cls(
            filter_by_engine_type=_setting_bool(settings, SETTING_FILTER_BY_ENGINE_TYPE, False),
            auto_attach_single_process=_setting_bool(settings, SETTING_AUTO_ATTACH_SINGLE_PROCESS, True),
            engine_process_name_patterns=_setting_patterns(settings, SETTING_ENGINE_PROCESS_NAMES),
            blacklist_patterns=_setting_patterns(settings, SETTING_BLACKLIST),
            helper_encoding=_setting_str(settings, SETTING_HELPER_ENCODING, DEFAULT_HELPER_ENCODING),
            helper_timeout_seconds=_setting_float(settings, SETTING_HELPER_TIMEOUT_SECONDS, DEFAULT_HELPER_TIMEOUT_SECONDS),
        )


def _ordered_patterns(patterns: Iterable[str]) -> tuple[str, ...]:
    if isinstance(patterns, str):
        raise ConfigurationError.invalid_setting("patterns", patterns, "a sequence of strings, not a single string")
    return PatternNormalizer.normalize(patterns)


def _pick_float(value: float | None, default: float) -> float:
    if value is None:
        return default
    return value


def _setting_bool(settings: Mapping[str, Any], key: str, default: bool) -> bool:
    value = settings.get(key)
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return parse_bool(key, value)
    raise ConfigurationError.invalid_setting(key, value, "a boolean")


def _setting_patterns(settings: Mapping[str, Any], key: str) -> tuple[str, ...]:
    value = settings.get(key)
    if value is None:
        return ()
    if isinstance(value, str):
        return tuple(PatternNormalizer.split(value))
    if isinstance(value, (list, tuple)) and all(isinstance(item, str) for item in value):
        return tuple(value)
    raise ConfigurationError.invalid_setting(key, value, "a list of strings")


def _setting_str(settings: Mapping[str, Any], key: str, default: str) -> str:
    value = settings.get(key)
    if value is None or value == "":
        return default
    if not isinstance(value, str):
        raise ConfigurationError.invalid_setting(key, value, "a string")
    return value


def _setting_float(settings: Mapping[str, Any], key: str, default: float) -> float:
    value = settings.get(key)
    if value is None:
        return default
    if isinstance(value, bool):
        raise ConfigurationError.invalid_setting(key, value, "a number")
    try:
        return float(value)
    except (TypeError, ValueError) as exc:
        raise ConfigurationError.invalid_setting(key, value, "a number") from exc


__all__ = ["DEFAULT_HELPER_ENCODING", "DEFAULT_HELPER_TIMEOUT_SECONDS", "FilterConfig"]
