"""
Process listing via the external helper tool.

Each call spawns the helper once with the ``list_processes`` subcommand, waits
for it under a timeout, and decodes its stdout with the configured console
encoding. No handle to the helper outlives the call.

Usage:
    from attach_picker.process_lister import ProcessLister

    lister = ProcessLister.from_config(HelperCommand("C:/tools/emmy_tool.exe"), FilterConfig())
    text = await lister.list_processes()
"""

from __future__ import annotations

import logging
from typing import Protocol

from .filter_config import DEFAULT_HELPER_ENCODING, DEFAULT_HELPER_TIMEOUT_SECONDS, FilterConfig
from .process_lister_helpers import HelperCommand, decode_helper_output, run_helper

logger = logging.getLogger(__name__)


class ProcessListing(Protocol):
    """Anything that can produce the helper's decoded process table."""

    async def list_processes(self) -> str: ...


class ProcessLister:
    """Runs the helper tool and returns its decoded output."""

    def __init__(
        self,
        command: HelperCommand,
        *,
        encoding: str = DEFAULT_HELPER_ENCODING,
        timeout_seconds: float = DEFAULT_HELPER_TIMEOUT_SECONDS,
    ):
        self.command = command
        self.encoding = encoding
        self.timeout_seconds = timeout_seconds

    @classmethod
    def from_config(cls, command: HelperCommand, config: FilterConfig) -> "ProcessLister":
        return cls(command, encoding=config.helper_encoding, timeout_seconds=config.helper_timeout_seconds)

    async def list_processes(self) -> str:
        """
        Return the helper's process table as text.

        Raises:
            HelperExecutionError: If the helper fails, times out, or its output does not decode
        """
        raw = await run_helper(self.command, timeout_seconds=self.timeout_seconds)
        text = decode_helper_output(raw, self.encoding)
        logger.debug("Decoded %d characters of process listing using %s", len(text), self.encoding)
        return text


__all__ = ["ProcessLister", "ProcessListing"]
