"""Helpers for running and decoding the process listing tool."""

from .helper_command import HELPER_SUBCOMMAND, HelperCommand
from .helper_runner import run_helper
from .helper_terminator import terminate_helper
from .output_decoder import decode_helper_output

__all__ = [
    "HELPER_SUBCOMMAND",
    "HelperCommand",
    "decode_helper_output",
    "run_helper",
    "terminate_helper",
]
