"""Interactive capabilities the selector needs from its host."""

from __future__ import annotations

import asyncio
import logging
import sys
from typing import Callable, Optional, Protocol, Sequence

from .process_models import Candidate

logger = logging.getLogger(__name__)

SELECT_PROCESS_PLACEHOLDER = "Select the process to attach"


class SelectionHost(Protocol):
    """Minimal UI surface: offer a choice, show an error."""

    async def present_choice(self, candidates: Sequence[Candidate], placeholder: str) -> Optional[Candidate]: ...

    def report_error(self, message: str) -> None: ...


def _print_stderr(message: str) -> None:
    print(message, file=sys.stderr)


def _read_answer(prompt: str) -> str:
    # stdout carries the resolved pid only
    sys.stderr.write(prompt)
    sys.stderr.flush()
    line = sys.stdin.readline()
    if not line:
        raise EOFError
    return line


class ConsoleSelectionHost:
    """Numbered terminal menu.

    A blank answer or end of input is treated as dismissal; anything else that
    is not a menu number asks again. The menu goes to stderr and input is read
    in a worker thread so the event loop stays free while the user decides.
    """

    def __init__(
        self,
        *,
        input_func: Callable[[str], str] = _read_answer,
        output_func: Callable[[str], None] = _print_stderr,
        error_func: Callable[[str], None] = _print_stderr,
    ):
        self._input_func = input_func
        self._output_func = output_func
        self._error_func = error_func

    async def present_choice(self, candidates: Sequence[Candidate], placeholder: str) -> Optional[Candidate]:
        self._output_func(placeholder)
        for index, candidate in enumerate(candidates, start=1):
            self._output_func(f"  {index}) {candidate.label}\t{candidate.description}\t{candidate.detail}")

        prompt = f"[1-{len(candidates)}, blank to cancel]: "
        while True:
            try:
                answer = await asyncio.to_thread(self._input_func, prompt)
            except (EOFError, KeyboardInterrupt):
                logger.debug("Input closed while waiting for process choice")
                return None

            answer = answer.strip()
            if not answer:
                return None
            choice = _pick(candidates, answer)
            if choice is not None:
                return choice
            self._output_func(f"Enter a number from 1 to {len(candidates)}, or leave blank to cancel")

    def report_error(self, message: str) -> None:
        self._error_func(message)


def _pick(candidates: Sequence[Candidate], answer: str) -> Optional[Candidate]:
    if not (answer.isascii() and answer.isdigit()):
        return None
    index = int(answer)
    if not 1 <= index <= len(candidates):
        logger.debug("Choice %d is outside 1..%d", index, len(candidates))
        return None
    return candidates[index - 1]


__all__ = ["ConsoleSelectionHost", "SELECT_PROCESS_PLACEHOLDER", "SelectionHost"]
