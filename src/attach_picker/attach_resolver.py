"""Fill in the pid of an attach request, asking the selector only when needed."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Any, Mapping

from .process_selector import ProcessSelector

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AttachRequest:
    """The parts of an attach launch configuration this package reads."""

    pid: int = 0
    process_name: str = ""

    @classmethod
    def from_configuration(cls, configuration: Mapping[str, Any]) -> "AttachRequest":
        """Read ``pid`` and ``processName``; a missing or non-numeric pid means "pick one"."""
        process_name = configuration.get("processName")
        return cls(
            pid=_coerce_pid(configuration.get("pid")),
            process_name=process_name if isinstance(process_name, str) else "",
        )


def _coerce_pid(value: Any) -> int:
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.strip().isdigit():
        return int(value.strip())
    return 0


async def resolve_attach_request(request: AttachRequest, selector: ProcessSelector) -> AttachRequest:
    """
    Return *request* with a positive pid.

    Raises:
        HelperExecutionError, NoCandidatesError, SelectionCancelledError: From the selector
    """
    if request.pid > 0:
        logger.debug("Attach request already targets pid %d", request.pid)
        return request

    pid = await selector.resolve_pid(request.process_name)
    return replace(request, pid=pid)


__all__ = ["AttachRequest", "resolve_attach_request"]
