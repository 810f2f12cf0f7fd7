"""Parse the listing helper's text output into process records.

The helper prints four lines per process: pid, window title, executable path
and a reserved line that is never read. There is no header, footer or escaping;
a field that itself contains the line terminator shifts every following record.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from .process_models import ProcessRecord

logger = logging.getLogger(__name__)

LINES_PER_RECORD = 4
DEFAULT_LINE_TERMINATOR = "\r\n"

_PID_OFFSET = 0
_TITLE_OFFSET = 1
_PATH_OFFSET = 2


def parse_records(text: str, *, line_terminator: str = DEFAULT_LINE_TERMINATOR) -> List[ProcessRecord]:
    """Return the records in helper order, skipping any whose pid is not a positive integer."""
    if not text:
        return []

    lines = text.split(line_terminator)
    record_count = len(lines) // LINES_PER_RECORD
    records: List[ProcessRecord] = []

    for index in range(record_count):
        offset = index * LINES_PER_RECORD
        pid = _parse_pid(lines[offset + _PID_OFFSET])
        if pid is None:
            logger.debug("Dropping process record %d with invalid pid %r", index, lines[offset + _PID_OFFSET])
            continue
        records.append(
            ProcessRecord(
                pid=pid,
                title=lines[offset + _TITLE_OFFSET],
                path=lines[offset + _PATH_OFFSET],
            )
        )

    logger.debug("Parsed %d process records from %d lines", len(records), len(lines))
    return records


def _parse_pid(raw: str) -> Optional[int]:
    candidate = raw.strip()
    if not candidate.isascii() or not candidate.isdigit():
        return None
    pid = int(candidate)
    if pid <= 0:
        return None
    return pid


__all__ = ["DEFAULT_LINE_TERMINATOR", "LINES_PER_RECORD", "parse_records"]
