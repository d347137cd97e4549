"""Config data model for Edkit."""

from __future__ import annotations

from dataclasses import dataclass

from edkit.constants.config import (
    DEFAULT_MAX_ROOT_LEVELS,
    DEFAULT_PLOT_SUFFIXES,
    DEFAULT_ROOT_MARKERS,
)
from edkit.constants.lookup import DEFAULT_LOOKUPS
from edkit.types.config import LookupEntry, ToolCommands


def _default_lookups() -> tuple[LookupEntry, ...]:
    return tuple(LookupEntry(name=name, label=label, url_template=url) for name, label, url in DEFAULT_LOOKUPS)


@dataclass(frozen=True)
class EdkitConfig:
    """Resolved edkit config."""

    root_markers: tuple[str, ...] = DEFAULT_ROOT_MARKERS
    max_root_levels: int = DEFAULT_MAX_ROOT_LEVELS
    author: str = ""
    email: str = ""
    license: str = ""
    guard_prefix: str = ""
    lookups: tuple[LookupEntry, ...] = _default_lookups()
    tools: ToolCommands = ToolCommands()
    plot_suffixes: tuple[str, ...] = DEFAULT_PLOT_SUFFIXES

    @property
    def author_line(self) -> str:
        """Author and e-mail formatted for a file header, empty when unset."""
        if self.author and self.email:
            return f"{self.author} <{self.email}>"
        return self.author or (f"<{self.email}>" if self.email else "")
