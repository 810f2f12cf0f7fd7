"""
Process selection for debugger attach.

One call to ``ProcessSelector.select`` walks the whole decision:

    Start -> Listed -> Filtered -> AutoResolved | AwaitingChoice -> Resolved | Failed

- A helper failure ends the request as ``HELPER_FAILURE``.
- An empty candidate list is reported to the host and ends as ``NO_CANDIDATES``.
- A single candidate resolves immediately when auto-attach is enabled.
- Otherwise the host is asked to choose; dismissal ends as ``CANCELLED``.

The selector keeps no state between calls, so independent requests may run
concurrently against the same instance.
"""

from __future__ import annotations

import logging
from typing import List

from .candidate_filter import filter_candidates
from .exceptions import HelperExecutionError
from .filter_config import FilterConfig
from .process_lister import ProcessLister, ProcessListing
from .process_lister_helpers import HelperCommand
from .process_models import Candidate, FailureReason, SelectionResult
from .record_parser import parse_records
from .selection_host import SELECT_PROCESS_PLACEHOLDER, SelectionHost

logger = logging.getLogger(__name__)

NO_PROCESS_MESSAGE = "No process for attach"
CANCELLED_MESSAGE = "Process selection cancelled"


class ProcessSelector:
    """Resolves a process-name hint to a single pid."""

    def __init__(self, lister: ProcessListing, host: SelectionHost, config: FilterConfig):
        self.lister = lister
        self.host = host
        self.config = config

    @classmethod
    def from_config(cls, command: HelperCommand, host: SelectionHost, config: FilterConfig) -> "ProcessSelector":
        return cls(ProcessLister.from_config(command, config), host, config)

    async def select(self, name_hint: str = "") -> SelectionResult:
        """Run one selection request; taxonomy failures come back as results, not exceptions."""
        try:
            text = await self.lister.list_processes()
        except HelperExecutionError as exc:
            logger.error("Process listing failed: %s", exc)
            return SelectionResult.failed(FailureReason.HELPER_FAILURE, str(exc))

        candidates = filter_candidates(parse_records(text), name_hint, self.config)
        return await self._choose(candidates)

    async def resolve_pid(self, name_hint: str = "") -> int:
        """
        Return the selected pid.

        Raises:
            HelperExecutionError: If the process listing helper failed
            NoCandidatesError: If no process survived filtering
            SelectionCancelledError: If the choice was dismissed
        """
        result = await self.select(name_hint)
        return result.unwrap()

    async def _choose(self, candidates: List[Candidate]) -> SelectionResult:
        if not candidates:
            logger.info(NO_PROCESS_MESSAGE)
            self.host.report_error(NO_PROCESS_MESSAGE)
            return SelectionResult.failed(FailureReason.NO_CANDIDATES, NO_PROCESS_MESSAGE)

        if len(candidates) == 1 and self.config.auto_attach_single_process:
            logger.info("Auto-attaching to %s", candidates[0].label)
            return SelectionResult.resolved(candidates[0].pid)

        choice = await self.host.present_choice(candidates, SELECT_PROCESS_PLACEHOLDER)
        if choice is None:
            logger.info(CANCELLED_MESSAGE)
            return SelectionResult.failed(FailureReason.CANCELLED, CANCELLED_MESSAGE)

        logger.info("Selected %s", choice.label)
        return SelectionResult.resolved(choice.pid)


__all__ = ["CANCELLED_MESSAGE", "NO_PROCESS_MESSAGE", "ProcessSelector"]
