"""Debugger attach process picker.

Lists running processes through the bundled helper tool, filters them by name
hint, engine type and blacklist, and resolves the one to attach to.
"""

from .attach_resolver import AttachRequest, resolve_attach_request
from .candidate_filter import filter_candidates
from .exceptions import (
    ApplicationError,
    AttachError,
    ConfigurationError,
    HelperExecutionError,
    NoCandidatesError,
    SelectionCancelledError,
)
from .filter_config import FilterConfig
from .process_lister import ProcessLister, ProcessListing
from .process_lister_helpers import HelperCommand
from .process_models import Candidate, FailureReason, ProcessRecord, SelectionResult
from .process_selector import ProcessSelector
from .record_parser import parse_records
from .selection_host import ConsoleSelectionHost, SelectionHost

__all__ = [
    "ApplicationError",
    "AttachError",
    "AttachRequest",
    "Candidate",
    "ConfigurationError",
    "ConsoleSelectionHost",
    "FailureReason",
    "FilterConfig",
    "HelperCommand",
    "HelperExecutionError",
    "NoCandidatesError",
    "ProcessLister",
    "ProcessListing",
    "ProcessRecord",
    "ProcessSelector",
    "SelectionCancelledError",
    "SelectionHost",
    "SelectionResult",
    "filter_candidates",
    "parse_records",
    "resolve_attach_request",
]
