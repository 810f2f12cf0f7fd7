"""Location and argument vector of the process listing helper."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Union

HELPER_SUBCOMMAND = "list_processes"
HELPER_EXECUTABLE = "emmy_tool.exe"
DEFAULT_ARCH = "x86"
_HELPER_RELATIVE_DIR = ("debugger", "emmy", "windows")


@dataclass(frozen=True)
class HelperCommand:
    helper_path: str

    @classmethod
    def from_extension_root(cls, extension_root: Union[str, Path], arch: str = DEFAULT_ARCH) -> "HelperCommand":
        """Locate the helper bundled under ``<root>/debugger/emmy/windows/<arch>/``."""
        path = Path(extension_root).joinpath(*_HELPER_RELATIVE_DIR, arch, HELPER_EXECUTABLE)
        return cls(helper_path=str(path))

    def argv(self) -> List[str]:
        return [self.helper_path, HELPER_SUBCOMMAND]
