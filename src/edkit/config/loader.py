"""Config loading and normalization for Edkit."""

from __future__ import annotations

import difflib
import logging
from pathlib import Path
from typing import Any

import yaml

from edkit.config.model import EdkitConfig
from edkit.constants.config import (
    CONFIG_FILENAME,
    CONFIG_LOOKUP_KEYS,
    CONFIG_TOP_LEVEL_KEYS,
    DEFAULT_MAX_ROOT_LEVELS,
)
from edkit.constants.lookup import LOOKUP_QUERY_PLACEHOLDER
from edkit.exceptions import ConfigError
from edkit.types.config import LookupEntry, ToolCommands

logger = logging.getLogger(__name__)


def resolve_config_path(root: Path, config_path: Path | None = None) -> Path:
    """Return the config file that ``load_config`` would read."""
    return config_path.resolve() if config_path else (root.resolve() / CONFIG_FILENAME)


def load_config(root: Path, config_path: Path | None = None) -> EdkitConfig:
    """Load and validate edkit config from ``edkit.yaml`` or an explicit path."""
    path = resolve_config_path(root, config_path)
    if not path.exists():
        if config_path is not None:
            raise ConfigError(f"Config file not found: {path}")
        logger.debug("No config at %s, using defaults", path)
        return EdkitConfig()

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML config file at {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file at {path} must be a YAML mapping")

    for key in sorted(str(k) for k in raw):
        if key not in CONFIG_TOP_LEVEL_KEYS:
            hint = _suggest_key(key, CONFIG_TOP_LEVEL_KEYS)
            raise ConfigError(f"Unknown config key `{key}`" + (f" ({hint})" if hint else ""))

    defaults = EdkitConfig()

    max_root_levels = raw.get("max_root_levels", DEFAULT_MAX_ROOT_LEVELS)
    if isinstance(max_root_levels, bool) or not isinstance(max_root_levels, int) or max_root_levels <= 0:
        raise ConfigError("max_root_levels must be a positive integer")

    root_markers = tuple(
        marker.strip()
        for marker in _ensure_string_list(raw.get("root_markers", list(defaults.root_markers)), "root_markers")
        if marker.strip()
    )
    if not root_markers:
        raise ConfigError("root_markers must name at least one marker directory")

    plot_suffixes = tuple(
        suffix if suffix.startswith(".") else f".{suffix}"
        for suffix in (
            s.strip().lower()
            for s in _ensure_string_list(raw.get("plot_suffixes", list(defaults.plot_suffixes)), "plot_suffixes")
        )
        if suffix
    )

    tools = ToolCommands(
        browser=_ensure_command(raw.get("browser"), "browser", defaults.tools.browser),
        typeset=_ensure_command(raw.get("typeset"), "typeset", defaults.tools.typeset),
        plot=_ensure_command(raw.get("plot"), "plot", defaults.tools.plot),
        vcs_add=_ensure_command(raw.get("vcs_add"), "vcs_add", defaults.tools.vcs_add),
    )

    lookups_raw = raw.get("lookups")
    lookups = defaults.lookups if lookups_raw is None else _build_lookups(lookups_raw)

    return EdkitConfig(
        root_markers=root_markers,
        max_root_levels=max_root_levels,
        author=_ensure_string(raw.get("author", ""), "author"),
        email=_ensure_string(raw.get("email", ""), "email"),
        license=_ensure_string(raw.get("license", ""), "license"),
        guard_prefix=_ensure_string(raw.get("guard_prefix", ""), "guard_prefix"),
        lookups=lookups,
        tools=tools,
        plot_suffixes=plot_suffixes,
    )


def _suggest_key(unknown: str, allowed: frozenset[str]) -> str:
    """Return a 'did you mean ...' hint for a close key match, or empty string."""
    matches = difflib.get_close_matches(unknown, sorted(allowed), n=1, cutoff=0.6)
    if matches:
        return f"did you mean `{matches[0]}`?"
    return ""


def _ensure_string(value: Any, key_name: str) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ConfigError(f"{key_name} must be a string")
    return value.strip()


def _ensure_string_list(value: Any, key_name: str) -> list[str]:
    """Coerce a value to a list of strings, raising ConfigError on type mismatch."""
    if value is None:
        return []
    if not isinstance(value, (list, tuple)) or not all(isinstance(item, str) for item in value):
        raise ConfigError(f"{key_name} must be a list of strings")
    return list(value)


def _ensure_command(value: Any, key_name: str, default: tuple[str, ...]) -> tuple[str, ...]:
    """Return an argv prefix; a plain string is split on whitespace."""
    if value is None:
        return default
    if isinstance(value, str):
        value = value.split()
    argv = tuple(arg for arg in _ensure_string_list(value, key_name) if arg)
    if not argv:
        raise ConfigError(f"{key_name} must not be empty")
    return argv


def _build_lookups(raw: Any) -> tuple[LookupEntry, ...]:
    """Build lookup menu entries from the raw ``lookups`` mapping."""
    if not isinstance(raw, dict):
        raise ConfigError("lookups must be a mapping")

    entries: list[LookupEntry] = []
    for name, spec in raw.items():
        name = str(name)
        if isinstance(spec, str):
            spec = {"url": spec}
        if not isinstance(spec, dict):
            raise ConfigError(f"lookups.{name} must be a mapping or a URL string")
        for key in spec:
            if key not in CONFIG_LOOKUP_KEYS:
                raise ConfigError(f"Unknown key `{key}` in lookups.{name}")
        url = spec.get("url")
        if not isinstance(url, str) or LOOKUP_QUERY_PLACEHOLDER not in url:
            raise ConfigError(f"lookups.{name}.url must be a string containing {LOOKUP_QUERY_PLACEHOLDER}")
        label = _ensure_string(spec.get("label", name), f"lookups.{name}.label") or name
        entries.append(LookupEntry(name=name, label=label, url_template=url))
    return tuple(entries)
