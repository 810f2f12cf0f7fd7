from __future__ import annotations

from typing import Iterable, Optional, Sequence

from attach_picker.exceptions import HelperExecutionError
from attach_picker.process_models import Candidate


def helper_output(records: Iterable[tuple[object, str, str]], *, reserved: str = "") -> str:
    """Render records the way the listing helper prints them."""
    lines = []
    for pid, title, path in records:
        lines.extend([str(pid), title, path, reserved])
    return "".join(f"{line}\r\n" for line in lines)


class FakeLister:
    def __init__(self, text: str = "", error: Optional[HelperExecutionError] = None):
        self.text = text
        self.error = error
        self.calls = 0

    async def list_processes(self) -> str:
        self.calls += 1
        if self.error is not None:
            raise self.error
        return self.text


class FakeHost:
    """Records prompts; answers with the candidate at ``choose_index`` or dismisses when None."""

    def __init__(self, choose_index: Optional[int] = 0):
        self.choose_index = choose_index
        self.choices: list[list[Candidate]] = []
        self.placeholders: list[str] = []
        self.errors: list[str] = []

    async def present_choice(self, candidates: Sequence[Candidate], placeholder: str) -> Optional[Candidate]:
        self.choices.append(list(candidates))
        self.placeholders.append(placeholder)
        if self.choose_index is None:
            return None
        return candidates[self.choose_index]

    def report_error(self, message: str) -> None:
        self.errors.append(message)
