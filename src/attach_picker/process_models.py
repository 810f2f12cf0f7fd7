"""Process records, attach candidates and selection results."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, cast

from .exceptions import (
    AttachError,
    HelperExecutionError,
    NoCandidatesError,
    SelectionCancelledError,
)


@dataclass(frozen=True)
class ProcessRecord:
    """One process as reported by the listing helper."""

    pid: int
    title: str
    path: str


def short_name(path: str) -> str:
    """Return the executable name of *path*, treating ``\\`` and ``/`` as separators."""
    return path.replace("\\", "/").rsplit("/", 1)[-1]


@dataclass(frozen=True)
class Candidate:
    """A process record that is eligible for attachment."""

    record: ProcessRecord
    name: str

    @classmethod
    def from_record(cls, record: ProcessRecord) -> "Candidate":
        return cls(record=record, name=short_name(record.path))

    @property
    def pid(self) -> int:
        return self.record.pid

    @property
    def title(self) -> str:
        return self.record.title

    @property
    def path(self) -> str:
        return self.record.path

    @property
    def label(self) -> str:
        return f"{self.pid} : {self.name}"

    @property
    def description(self) -> str:
        return self.record.title

    @property
    def detail(self) -> str:
        return self.record.path


class FailureReason(Enum):
    CANCELLED = "cancelled"
    NO_CANDIDATES = "no_candidates"
    HELPER_FAILURE = "helper_failure"


_FAILURE_ERRORS: dict[FailureReason, type[AttachError]] = {
    FailureReason.CANCELLED: SelectionCancelledError,
    FailureReason.NO_CANDIDATES: NoCandidatesError,
    FailureReason.HELPER_FAILURE: HelperExecutionError,
}


@dataclass(frozen=True)
class SelectionResult:
    """Terminal outcome of one selection request: a pid or a failure reason."""

    pid: Optional[int] = None
    failure: Optional[FailureReason] = None
    message: str = ""

    def __post_init__(self) -> None:
        if (self.pid is None) == (self.failure is None):
            raise ValueError("SelectionResult needs exactly one of pid or failure")
        if self.pid is not None and self.pid <= 0:
            raise ValueError(f"Resolved pid must be positive (got {self.pid})")

    @classmethod
    def resolved(cls, pid: int) -> "SelectionResult":
        return cls(pid=pid)

    @classmethod
    def failed(cls, reason: FailureReason, message: str = "") -> "SelectionResult":
        return cls(failure=reason, message=message)

    @property
    def is_resolved(self) -> bool:
        return self.pid is not None

    def unwrap(self) -> int:
        """Return the resolved pid or raise the error matching the failure reason."""
        if self.pid is not None:
            return self.pid
        raise _FAILURE_ERRORS[cast(FailureReason, self.failure)](self.message)


__all__ = [
    "Candidate",
    "FailureReason",
    "ProcessRecord",
    "SelectionResult",
    "short_name",
]
