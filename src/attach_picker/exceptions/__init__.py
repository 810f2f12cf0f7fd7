"""Exception hierarchy for the attach picker.

Every error derives from ApplicationError. Keyword arguments passed to an
error become attributes, e.g. ``HelperExecutionError(helper="x", returncode=1).returncode``.
"""

from typing import Any


class ApplicationError(Exception):
    """Base exception for all application errors.

    Supports keyword arguments that are stored as attributes for debugging.
    """

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        if not message:
            message = self.__class__.__doc__ or "Application error occurred"
        super().__init__(message)
        for key, value in kwargs.items():
            setattr(self, key, value)


class ConfigurationError(ApplicationError):
    """Configuration is invalid or missing."""

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        if not message:
            message = "Configuration is invalid or missing"
        super().__init__(message, **kwargs)


from .attach import (  # noqa: E402
    AttachError,
    HelperExecutionError,
    NoCandidatesError,
    SelectionCancelledError,
)

__all__ = [
    "ApplicationError",
    "AttachError",
    "ConfigurationError",
    "HelperExecutionError",
    "NoCandidatesError",
    "SelectionCancelledError",
]
