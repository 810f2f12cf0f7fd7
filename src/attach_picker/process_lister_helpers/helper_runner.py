"""Run the listing helper once and capture its stdout bytes."""

from __future__ import annotations

import asyncio
import logging

from ..exceptions import HelperExecutionError
from .helper_command import HelperCommand
from .helper_terminator import terminate_helper

logger = logging.getLogger(__name__)


async def run_helper(command: HelperCommand, *, timeout_seconds: float) -> bytes:
    """
    Spawn the helper, wait for it to exit and return its raw stdout.

    Raises:
        HelperExecutionError: If the helper cannot start, exits non-zero, or
                              overruns *timeout_seconds*

    A cancelled caller still waits for the helper tree to be terminated
    before ``CancelledError`` propagates.
    """
    argv = command.argv()
    logger.debug("Running process helper: %s", argv)
    try:
        process = await asyncio.create_subprocess_exec(
            *argv,
            stdin=asyncio.subprocess.DEVNULL,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
    except (FileNotFoundError, PermissionError, NotADirectoryError) as exc:
        raise HelperExecutionError.not_found(command.helper_path) from exc
    except OSError as exc:
        raise HelperExecutionError.spawn_failed(command.helper_path, str(exc)) from exc

    try:
        stdout, stderr = await asyncio.wait_for(process.communicate(), timeout=timeout_seconds)
    except asyncio.TimeoutError as exc:
        await terminate_helper(process)
        raise HelperExecutionError.timed_out(command.helper_path, timeout_seconds) from exc
    except asyncio.CancelledError:
        logger.debug("Helper request cancelled; terminating pid %d", process.pid)
        await terminate_helper(process)
        raise

    if process.returncode != 0:
        raise HelperExecutionError.exited_with_error(
            command.helper_path,
            process.returncode if process.returncode is not None else -1,
            stderr.decode("utf-8", errors="replace"),
        )

    logger.debug("Process helper returned %d bytes", len(stdout))
    return stdout
