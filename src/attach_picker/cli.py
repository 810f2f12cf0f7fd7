"""Command line entry point: print the pid of the process to attach to.

Usage:
    python -m attach_picker [hint] --extension-root ~/.vscode/extensions/emmylua
    python -m attach_picker Game --helper C:/tools/emmy_tool.exe --no-auto-attach

Exit codes: 0 resolved, 1 helper failure or no matching process, 2 cancelled.
"""

from __future__ import annotations

import argparse
import asyncio
import dataclasses
import logging
from pathlib import Path
from typing import Optional, Sequence

from .config import ConfigurationError, load_settings
from .filter_config import FilterConfig
from .logging_config import setup_logging
from .process_lister_helpers import HelperCommand
from .process_lister_helpers.helper_command import DEFAULT_ARCH
from .process_models import FailureReason, SelectionResult
from .process_selector import ProcessSelector
from .selection_host import ConsoleSelectionHost

logger = logging.getLogger(__name__)

EXIT_RESOLVED = 0
EXIT_FAILED = 1
EXIT_CANCELLED = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="attach_picker", description="Pick a running process to attach a debugger to")
    parser.add_argument("hint", nargs="?", default="", help="Substring of the process title or executable name")
    helper = parser.add_mutually_exclusive_group(required=True)
    helper.add_argument("--helper", help="Path to the process listing helper executable")
    helper.add_argument("--extension-root", type=Path, help="Extension directory that bundles the helper")
    parser.add_argument("--arch", default=DEFAULT_ARCH, help=f"Helper architecture under --extension-root (default: {DEFAULT_ARCH})")
    parser.add_argument("--settings", type=Path, help="JSON editor settings file holding emmylua.debug.* keys")
    parser.add_argument("--encoding", help="Encoding of the helper output (overrides configuration)")
    parser.add_argument("--timeout", type=float, help="Seconds to wait for the helper (overrides configuration)")
    parser.add_argument("--no-auto-attach", action="store_true", help="Confirm even when a single process matches")
    parser.add_argument("--filter-engine", action="store_true", help="Keep only processes matching engine name patterns")
    parser.add_argument("--verbose", action="store_true", help="Log debug output to stderr")
    return parser


def load_filter_config(args: argparse.Namespace) -> FilterConfig:
    """Settings file when given, else environment; command line flags win."""
    config = FilterConfig.from_settings(load_settings(args.settings)) if args.settings else FilterConfig.from_env()

    overrides = {}
    if args.encoding:
        overrides["helper_encoding"] = args.encoding
    if args.timeout is not None:
        overrides["helper_timeout_seconds"] = args.timeout
    if args.no_auto_attach:
        overrides["auto_attach_single_process"] = False
    if args.filter_engine:
        overrides["filter_by_engine_type"] = True
    if overrides:
        config = dataclasses.replace(config, **overrides)
    return config


def _helper_command(args: argparse.Namespace) -> HelperCommand:
    if args.helper:
        return HelperCommand(helper_path=args.helper)
    return HelperCommand.from_extension_root(args.extension_root, args.arch)


def _exit_code(result: SelectionResult) -> int:
    if result.is_resolved:
        return EXIT_RESOLVED
    if result.failure is FailureReason.CANCELLED:
        return EXIT_CANCELLED
    return EXIT_FAILED


async def run(args: argparse.Namespace) -> int:
    config = load_filter_config(args)
    selector = ProcessSelector.from_config(_helper_command(args), ConsoleSelectionHost(), config)
    result = await selector.select(args.hint)
    # stdout carries the pid only
    if result.is_resolved:
        print(result.pid)
    return _exit_code(result)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(user_friendly=not args.verbose, verbose=args.verbose)
    try:
        return asyncio.run(run(args))
    except ConfigurationError as exc:
        logger.error("Invalid configuration: %s", exc)
        return EXIT_FAILED


__all__ = ["build_parser", "load_filter_config", "main", "run"]
