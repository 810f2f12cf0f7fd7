"""Editor settings file loading.

Settings files hold the editor-side debug preferences either as flat dotted
keys (``"emmylua.debug.filterUEProcesses": true``) or as nested objects
(``{"emmylua": {"debug": {...}}}``). Both shapes flatten to dotted keys.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Mapping

import orjson

from .errors import ConfigurationError

logger = logging.getLogger(__name__)


def load_settings(path: Path) -> Dict[str, Any]:
    """Read a JSON settings file and return its flattened key/value pairs."""
    try:
        payload = orjson.loads(path.read_bytes())
    except OSError as exc:
        raise ConfigurationError.unreadable_file("settings file", path) from exc
    except orjson.JSONDecodeError as exc:
        raise ConfigurationError.malformed_file("settings file", path, "valid JSON") from exc

    if not isinstance(payload, dict):
        raise ConfigurationError.malformed_file("settings file", path, "an object at the top level")

    flattened = flatten_settings(payload)
    logger.debug("Loaded %d settings from %s", len(flattened), path)
    return flattened


def flatten_settings(payload: Mapping[str, Any], prefix: str = "") -> Dict[str, Any]:
    """Collapse nested objects into dotted keys; leaves keep their JSON type."""
    flattened: Dict[str, Any] = {}
    for key, value in payload.items():
        dotted = f"{prefix}.{key}" if prefix else str(key)
        if isinstance(value, Mapping):
            flattened.update(flatten_settings(value, dotted))
        else:
            flattened[dotted] = value
    return flattened


__all__ = ["flatten_settings", "load_settings"]
