"""Stop a helper run that overran its timeout or whose request was cancelled.

The helper and any children it spawned are asked to terminate, given a short
grace period, then killed. The asyncio process handle is reaped last so no
zombie is left behind.
"""

from __future__ import annotations

import asyncio
import logging
from typing import List

import psutil

logger = logging.getLogger(__name__)

GRACEFUL_SHUTDOWN_TIMEOUT_SECONDS = 1.0
FORCE_KILL_TIMEOUT_SECONDS = 1.0


async def terminate_helper(
    process: asyncio.subprocess.Process,
    *,
    graceful_timeout: float = GRACEFUL_SHUTDOWN_TIMEOUT_SECONDS,
    force_timeout: float = FORCE_KILL_TIMEOUT_SECONDS,
) -> None:
    if process.returncode is not None:
        return

    tree = _collect_process_tree(process.pid)
    for proc in tree:
        _signal(proc, terminate=True)

    _gone, alive = await asyncio.to_thread(psutil.wait_procs, tree, timeout=graceful_timeout)
    if alive:
        logger.warning("Helper process tree %s did not exit within %ss; killing", process.pid, graceful_timeout)
        for proc in alive:
            _signal(proc, terminate=False)
        await asyncio.to_thread(psutil.wait_procs, alive, timeout=force_timeout)

    try:
        await asyncio.wait_for(process.wait(), timeout=force_timeout)
    except asyncio.TimeoutError:
        logger.error("Helper process %s still running after force kill", process.pid)


def _collect_process_tree(pid: int) -> List[psutil.Process]:
    try:
        parent = psutil.Process(pid)
    except psutil.NoSuchProcess:
        logger.debug("Helper process %s exited before termination", pid)
        return []
    try:
        children = parent.children(recursive=True)
    except (psutil.NoSuchProcess, psutil.AccessDenied) as exc:
        logger.warning("Could not list children of helper process %s: %s", pid, exc)
        children = []
    return children + [parent]


def _signal(proc: psutil.Process, *, terminate: bool) -> None:
    try:
        if terminate:
            proc.terminate()
        else:
            proc.kill()
    except psutil.NoSuchProcess:
        logger.debug("Helper process %s already exited", proc.pid)
    except psutil.AccessDenied:
        logger.warning("Access denied signalling helper process %s", proc.pid)
