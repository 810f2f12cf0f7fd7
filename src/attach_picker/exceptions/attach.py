"""Process selection exceptions."""

from __future__ import annotations

from typing import Any

from . import ApplicationError

_STDERR_PREVIEW_CHARS = 200


class AttachError(ApplicationError):
    """Base process selection error."""

    pass


class HelperExecutionError(AttachError):
    """Process listing helper could not be run or produced unusable output."""

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        if not message:
            message = "Process listing helper failed"
        super().__init__(message, **kwargs)

    @classmethod
    def not_found(cls, helper: str) -> "HelperExecutionError":
        """Create error for a helper that cannot be started."""
        return cls(f"Process listing helper not found or not executable: {helper}", helper=helper)

    @classmethod
    def spawn_failed(cls, helper: str, reason: str) -> "HelperExecutionError":
        """Create error for an OS-level spawn failure."""
        return cls(f"Failed to start process listing helper {helper}: {reason}", helper=helper)

    @classmethod
    def exited_with_error(cls, helper: str, returncode: int, stderr: str = "") -> "HelperExecutionError":
        """Create error for a non-zero helper exit."""
        msg = f"Process listing helper {helper} exited with code {returncode}"
        preview = stderr.strip()[:_STDERR_PREVIEW_CHARS]
        if preview:
            msg += f": {preview}"
        return cls(msg, helper=helper, returncode=returncode)

    @classmethod
    def timed_out(cls, helper: str, timeout_seconds: float) -> "HelperExecutionError":
        """Create error for a helper that did not finish in time."""
        return cls(
            f"Process listing helper {helper} did not finish within {timeout_seconds}s",
            helper=helper,
            timeout_seconds=timeout_seconds,
        )

    @classmethod
    def undecodable(cls, encoding: str, reason: str) -> "HelperExecutionError":
        """Create error for helper output that does not decode."""
        return cls(f"Process listing output is not valid {encoding}: {reason}", encoding=encoding)

    @classmethod
    def unknown_encoding(cls, encoding: str) -> "HelperExecutionError":
        """Create error for an encoding name the codec registry does not know."""
        return cls(f"Unknown process listing encoding {encoding!r}", encoding=encoding)


class NoCandidatesError(AttachError):
    """No process matched the attach filters."""

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        if not message:
            message = "No process for attach"
        super().__init__(message, **kwargs)


class SelectionCancelledError(AttachError):
    """Process selection was dismissed without a choice."""

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        if not message:
            message = "Process selection cancelled"
        super().__init__(message, **kwargs)


__all__ = [
    "AttachError",
    "HelperExecutionError",
    "NoCandidatesError",
    "SelectionCancelledError",
]
