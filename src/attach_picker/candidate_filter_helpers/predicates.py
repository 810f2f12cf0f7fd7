"""Independent inclusion and exclusion checks for a single candidate."""

from __future__ import annotations

from typing import Sequence

from ..process_models import Candidate


def matches_name_hint(candidate: Candidate, name_hint: str) -> bool:
    """Case-sensitive substring match of the hint against title or short name; empty hint matches all."""
    if not name_hint:
        return True
    return name_hint in candidate.title or name_hint in candidate.name


def is_engine_process(candidate: Candidate, engine_patterns: Sequence[str]) -> bool:
    """True when the lower-cased short name contains any lower-cased engine pattern."""
    lower_name = candidate.name.lower()
    return any(pattern.lower() in lower_name for pattern in engine_patterns)


def is_blacklisted(candidate: Candidate, blacklist_patterns: Sequence[str]) -> bool:
    """True when short name, title or path contains any blacklist pattern, ignoring case."""
    fields = (candidate.name.lower(), candidate.title.lower(), candidate.path.lower())
    for pattern in blacklist_patterns:
        lowered = pattern.lower()
        if any(lowered in field for field in fields):
            return True
    return False
