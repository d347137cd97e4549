"""Configuration defaults and filenames."""

from __future__ import annotations

CONFIG_FILENAME: str = "edkit.yaml"

DEFAULT_ROOT_MARKERS: tuple[str, ...] = (".git", ".hg", ".svn")
DEFAULT_MAX_ROOT_LEVELS: int = 8

DEFAULT_BROWSER_COMMAND: tuple[str, ...] = ("xdg-open",)
DEFAULT_TYPESET_COMMAND: tuple[str, ...] = ("latexmk", "-pdf", "-interaction=nonstopmode")
DEFAULT_PLOT_COMMAND: tuple[str, ...] = ("gnuplot",)
DEFAULT_VCS_ADD_COMMAND: tuple[str, ...] = ("git", "add", "--")

DEFAULT_PLOT_SUFFIXES: tuple[str, ...] = (".gp", ".gnuplot", ".plt")

CONFIG_TOP_LEVEL_KEYS: frozenset[str] = frozenset(
    {
        "root_markers",
        "max_root_levels",
        "author",
        "email",
        "license",
        "guard_prefix",
        "lookups",
        "browser",
        "typeset",
        "plot",
        "vcs_add",
        "plot_suffixes",
    }
)
CONFIG_LOOKUP_KEYS: frozenset[str] = frozenset({"label", "url"})
