"""Web lookup menu: search URLs for a term, opened in the browser."""

from __future__ import annotations

from urllib.parse import quote_plus

from edkit.config import EdkitConfig
from edkit.constants.lookup import LOOKUP_QUERY_PLACEHOLDER
from edkit.exceptions import UnknownLookupError
from edkit.external.commands import ExternalCommand, browser_command
from edkit.types import LookupEntry


def lookup_url(entry: LookupEntry, term: str) -> str:
    """Substitute the URL-quoted *term* into the entry's template."""
    return entry.url_template.replace(LOOKUP_QUERY_PLACEHOLDER, quote_plus(term.strip()))


def find_lookup(config: EdkitConfig, name: str) -> LookupEntry:
    """Return the lookup entry called *name* (case-insensitive) or its 1-based menu index."""
    if name.isdigit():
        index = int(name) - 1
        if 0 <= index < len(config.lookups):
            return config.lookups[index]
    wanted = name.strip().lower()
    for entry in config.lookups:
        if entry.name.lower() == wanted:
            return entry
    available = ", ".join(entry.name for entry in config.lookups) or "none"
    raise UnknownLookupError(f"Unknown lookup `{name}` (available: {available})")


def lookup_menu(config: EdkitConfig) -> list[str]:
    """Render the numbered lookup menu."""
    width = max((len(entry.name) for entry in config.lookups), default=0)
    return [
        f"{index:>2}. {entry.name:<{width}}  {entry.label}" for index, entry in enumerate(config.lookups, start=1)
    ]


def lookup_command(config: EdkitConfig, name: str, term: str) -> ExternalCommand:
    """Build the browser command that searches *term* with lookup *name*."""
    return browser_command(lookup_url(find_lookup(config, name), term), config)
