"""JSON defaults file loading.

The file maps environment variable names to scalars or lists, e.g.
``{"ATTACH_AUTO_ATTACH_SINGLE_PROCESS": false, "ATTACH_BLACKLIST": ["CrashReporter"]}``.
Values are rendered as the text the matching ``env_*`` helper parses.
"""

import json
from pathlib import Path
from typing import Any, Dict

from ..errors import ConfigurationError

_KIND = "JSON defaults"


class JsonConfigLoader:
    @staticmethod
    def load_from_file(path: Path) -> Dict[str, str]:
        """
        Return the defaults in *path* as strings, or an empty dict when it does not exist.

        Raises:
            ConfigurationError: If the file is unreadable, is not a JSON object, or nests objects
        """
        if not path.is_file():
            return {}
        try:
            payload = json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise ConfigurationError.malformed_file(_KIND, path, "valid JSON") from exc
        except OSError as exc:
            raise ConfigurationError.unreadable_file(_KIND, path) from exc

        if not isinstance(payload, dict):
            raise ConfigurationError.malformed_file(_KIND, path, "an object at the top level")
        return {str(key): _as_env_text(path, key, value) for key, value in payload.items()}


def _as_env_text(path: Path, key: str, value: Any) -> str:
    if isinstance(value, dict):
        raise ConfigurationError.malformed_file(_KIND, path, f"scalar values only (nested object under {key!r})")
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, list):
        return ",".join(str(item) for item in value)
    return str(value)
