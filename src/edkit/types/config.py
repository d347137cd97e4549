"""Typed configuration structures for Edkit settings."""

from __future__ import annotations

from dataclasses import dataclass

from edkit.constants.config import (
    DEFAULT_BROWSER_COMMAND,
    DEFAULT_PLOT_COMMAND,
    DEFAULT_TYPESET_COMMAND,
    DEFAULT_VCS_ADD_COMMAND,
)


@dataclass(frozen=True)
class LookupEntry:
    """One entry of the web lookup menu."""

    name: str
    label: str
    url_template: str


@dataclass(frozen=True)
class ToolCommands:
    """Argument-vector prefixes for the external tools edkit launches."""

    browser: tuple[str, ...] = DEFAULT_BROWSER_COMMAND
    typeset: tuple[str, ...] = DEFAULT_TYPESET_COMMAND
    plot: tuple[str, ...] = DEFAULT_PLOT_COMMAND
    vcs_add: tuple[str, ...] = DEFAULT_VCS_ADD_COMMAND
