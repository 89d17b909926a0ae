from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import Optional

from mdimports.constants import LOG_TAG
from mdimports.core.interfaces.exec import CommandRunnerProtocol
from mdimports.core.models import CommandResult
from mdimports.errors import CommandLaunchError
from mdimports.logging.helpers import get_logger, trace_io


class ShellCommandRunner(CommandRunnerProtocol):
    """Runs `!`cmd`` inlines through /bin/sh in the importing directory.

    A non-zero exit status is reported in the result, not raised; only a
    failure to start the shell is an error.
    """

    def __init__(self, *, logger: Optional[logging.Logger] = None, shell: str = '/bin/sh') -> None:
        self._log = logger or get_logger('imports')
        self._shell = shell

    def run(self, command: str, cwd: Path) -> CommandResult:
        self._log.info('%s Executing: %s', LOG_TAG, command)
        try:
            proc = subprocess.run(
                [self._shell, '-c', command],
                cwd=str(cwd),
                stdin=subprocess.DEVNULL,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                check=False,
            )
        except OSError as exc:
            raise CommandLaunchError(command, str(exc)) from exc

        result = CommandResult(
            stdout=proc.stdout.decode('utf-8', errors='replace'),
            stderr=proc.stderr.decode('utf-8', errors='replace'),
            returncode=proc.returncode,
        )
        trace_io(self._log, 'command finished', command=command, returncode=proc.returncode)
        return result
