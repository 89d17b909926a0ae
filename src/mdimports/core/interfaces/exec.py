from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable

from mdimports.core.models import CommandResult


@runtime_checkable
class CommandRunnerProtocol(Protocol):
    def run(self, command: str, cwd: Path) -> CommandResult:
        ...
