"""Reduce parsed process records to attach candidates.

Each record must pass three checks: name hint match, engine classification
(only when engine filtering is enabled) and blacklist exclusion. The blacklist
is checked on its own and always wins. Output keeps listing order and does not
drop duplicate pids.
"""

from __future__ import annotations

import logging
from typing import Iterable, List

from .candidate_filter_helpers import is_blacklisted, is_engine_process, matches_name_hint
from .filter_config import FilterConfig
from .process_models import Candidate, ProcessRecord

logger = logging.getLogger(__name__)


def filter_candidates(records: Iterable[ProcessRecord], name_hint: str, config: FilterConfig) -> List[Candidate]:
    candidates: List[Candidate] = []
    for record in records:
        candidate = Candidate.from_record(record)
        if _should_include(candidate, name_hint, config):
            candidates.append(candidate)
    logger.debug("Filter kept %d candidates for hint %r", len(candidates), name_hint)
    return candidates


def _should_include(candidate: Candidate, name_hint: str, config: FilterConfig) -> bool:
    if is_blacklisted(candidate, config.blacklist_patterns):
        logger.debug("Excluding blacklisted process %s", candidate.label)
        return False
    if not matches_name_hint(candidate, name_hint):
        return False
    if config.filter_by_engine_type and not is_engine_process(candidate, config.engine_process_name_patterns):
        return False
    return True


__all__ = ["filter_candidates"]
