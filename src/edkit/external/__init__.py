"""External tool commands and the runners that launch them."""

from __future__ import annotations

from .commands import (
    ExternalCommand,
    browser_command,
    plot_command,
    typeset_command,
    vcs_add_command,
)
from .lookup import find_lookup, lookup_command, lookup_menu, lookup_url
from .runner import CommandRunner, DryRunRunner, SubprocessRunner

__all__ = [
    "CommandRunner",
    "DryRunRunner",
    "ExternalCommand",
    "SubprocessRunner",
    "browser_command",
    "find_lookup",
    "lookup_command",
    "lookup_menu",
    "lookup_url",
    "plot_command",
    "typeset_command",
    "vcs_add_command",
]
