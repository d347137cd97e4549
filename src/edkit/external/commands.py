"""Argument-vector builders for the external tools edkit drives."""

from __future__ import annotations

import shlex
from dataclasses import dataclass
from pathlib import Path

from edkit.config import EdkitConfig


@dataclass(frozen=True)
class ExternalCommand:
    """A fully-formed command line; arguments are never passed through a shell."""

    argv: tuple[str, ...]
    cwd: Path | None = None

    def display(self) -> str:
        """Render the command with shell quoting for echoing to the user."""
        rendered = shlex.join(self.argv)
        if self.cwd is not None:
            return f"(cd {shlex.quote(str(self.cwd))} && {rendered})"
        return rendered


def vcs_add_command(path: Path, config: EdkitConfig, *, root: Path | None = None) -> ExternalCommand:
    """Stage *path*, running from *root* when given."""
    return ExternalCommand(argv=(*config.tools.vcs_add, str(path)), cwd=root)


def typeset_command(path: Path, config: EdkitConfig) -> ExternalCommand:
    """Compile a document in its own directory so auxiliary files land beside it."""
    return ExternalCommand(argv=(*config.tools.typeset, path.name), cwd=path.parent)


def plot_command(path: Path, config: EdkitConfig) -> ExternalCommand:
    """Render a plot script in its own directory."""
    return ExternalCommand(argv=(*config.tools.plot, path.name), cwd=path.parent)


def browser_command(url: str, config: EdkitConfig) -> ExternalCommand:
    return ExternalCommand(argv=(*config.tools.browser, url))
