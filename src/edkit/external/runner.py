"""Runners that hand external commands to the operating system."""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Callable
from typing import Protocol

from edkit.exceptions import ExternalCommandError
from edkit.external.commands import ExternalCommand

logger = logging.getLogger(__name__)


class CommandRunner(Protocol):
    """Capability for launching an external command without awaiting it."""

    def launch(self, command: ExternalCommand) -> None: ...


class SubprocessRunner:
    """Starts commands detached; output is discarded and the process is not awaited."""

    def launch(self, command: ExternalCommand) -> None:
        logger.debug("Launching %s", command.display())
        try:
            subprocess.Popen(  # noqa: S603
                list(command.argv),
                cwd=command.cwd,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                start_new_session=True,
            )
        except OSError as exc:
            raise ExternalCommandError(f"Cannot launch {command.argv[0]}: {exc}") from exc


class DryRunRunner:
    """Echoes commands instead of running them."""

    def __init__(self, write: Callable[[str], object] = print) -> None:
        self._write = write

    def launch(self, command: ExternalCommand) -> None:
        self._write(command.display())
