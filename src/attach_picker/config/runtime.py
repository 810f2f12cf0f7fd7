"""Environment-backed configuration lookups.

Every ``env_*`` helper reads ``os.environ`` first. A variable that is unset or
blank falls back to file defaults, loaded once from the first of:

- ``.env`` in the working directory, then ``~/.env``
- ``config/attach_env.json``, then ``~/.attach_picker.json``

Earlier files win over later ones for the same key.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional, Sequence

from .errors import ConfigurationError

_TRUE_VALUES = frozenset({"1", "true", "t", "yes", "y", "on"})
_FALSE_VALUES = frozenset({"0", "false", "f", "no", "n", "off"})

_DOTENV_CANDIDATES = (Path(".env"), Path.home() / ".env")
_JSON_ENV_CANDIDATES = (Path("config/attach_env.json"), Path.home() / ".attach_picker.json")

_DEFAULT_VALUES: dict[str, str] | None = None


def _load_default_values() -> dict[str, str]:
    from .runtime_helpers import DotenvLoader, JsonConfigLoader

    global _DEFAULT_VALUES
    if _DEFAULT_VALUES is None:
        defaults: dict[str, str] = {}
        sources = [(DotenvLoader, path) for path in _DOTENV_CANDIDATES]
        sources += [(JsonConfigLoader, path) for path in _JSON_ENV_CANDIDATES]
        for loader, path in sources:
            for key, value in loader.load_from_file(path).items():
                defaults.setdefault(key, value)
        _DEFAULT_VALUES = defaults
    return _DEFAULT_VALUES


def reset_default_values() -> None:
    """Forget cached file defaults so the next lookup reloads them."""
    global _DEFAULT_VALUES
    _DEFAULT_VALUES = None


def _lookup(name: str, *, strip: bool = True, allow_blank: bool = False) -> Optional[str]:
    for raw in (os.getenv(name), _load_default_values().get(name)):
        if raw is None:
            continue
        value = raw.strip() if strip else raw
        if value or allow_blank:
            return value
    return None


def env_str(
    name: str,
    or_value: str | None = None,
    *,
    required: bool = False,
    strip: bool = True,
    allow_blank: bool = False,
) -> str | None:
    """Return the variable's text, *or_value* when unset."""
    value = _lookup(name, strip=strip, allow_blank=allow_blank)
    if value is not None:
        return value
    if required:
        raise ConfigurationError.missing_variable(name)
    return or_value


def env_float(name: str, or_value: float | None = None, *, required: bool = False) -> float | None:
    raw = _lookup(name)
    if raw is None:
        if required and or_value is None:
            raise ConfigurationError.missing_variable(name)
        return or_value
    try:
        return float(raw)
    except ValueError as exc:
        raise ConfigurationError.invalid_variable(name, raw, "a number") from exc


def parse_bool(name: str, raw: str) -> bool:
    """Accept the usual on/off spellings, case-insensitively."""
    lowered = raw.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ConfigurationError.invalid_variable(name, raw, f"one of {sorted(_TRUE_VALUES | _FALSE_VALUES)}")


def env_bool(name: str, or_value: bool | None = None, *, required: bool = False) -> bool | None:
    raw = _lookup(name)
    if raw is None:
        if required and or_value is None:
            raise ConfigurationError.missing_variable(name)
        return or_value
    return parse_bool(name, raw)


def env_list(
    name: str,
    *,
    or_value: Sequence[str] | None = None,
    separator: str = ",",
    required: bool = False,
) -> tuple[str, ...] | None:
    """
    Return a comma-separated variable as a tuple of unique, stripped entries.

    Blank entries are dropped. An unset variable yields *or_value* as a tuple
    (or ``None``).
    """
    from .runtime_helpers import PatternNormalizer

    raw = _lookup(name)
    if raw is None:
        if required and not or_value:
            raise ConfigurationError.missing_variable(name)
        return None if or_value is None else tuple(or_value)

    items = PatternNormalizer.unique(PatternNormalizer.split(raw, separator))
    if required and not items:
        raise ConfigurationError.invalid_variable(name, raw, "a non-empty list")
    return items
