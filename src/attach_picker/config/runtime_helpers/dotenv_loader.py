"""``.env`` file parsing for ``ATTACH_*`` defaults."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Iterator, Tuple

from ..errors import ConfigurationError

_EXPORT_PREFIX = "export "
_QUOTES = "'\""


class DotenvLoader:
    """Reads ``KEY=value`` lines; ``export`` prefixes and surrounding quotes are tolerated."""

    @staticmethod
    def load_from_file(path: Path) -> Dict[str, str]:
        """
        Return the assignments in *path*, or an empty dict when it does not exist.

        Raises:
            ConfigurationError: If the file exists but is unreadable or not UTF-8
        """
        if not path.is_file():
            return {}
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise ConfigurationError.unreadable_file("dotenv defaults", path) from exc
        return dict(_assignments(text))


def _assignments(text: str) -> Iterator[Tuple[str, str]]:
    for line in text.splitlines():
        line = line.strip()
        if line.startswith("#") or "=" not in line:
            continue
        key, _, value = line.partition("=")
        key = key.strip()
        if key.startswith(_EXPORT_PREFIX):
            key = key[len(_EXPORT_PREFIX) :].strip()
        if key:
            yield key, value.strip().strip(_QUOTES)
