"""Default web lookup menu entries."""

from __future__ import annotations

LOOKUP_QUERY_PLACEHOLDER: str = "{query}"

DEFAULT_LOOKUPS: tuple[tuple[str, str, str], ...] = (
    ("google", "Google", "https://www.google.com/search?q={query}"),
    ("cppreference", "cppreference", "https://duckduckgo.com/?q=site%3Aen.cppreference.com+{query}"),
    ("wikipedia", "Wikipedia", "https://en.wikipedia.org/w/index.php?search={query}"),
    ("dict", "Dictionary", "https://www.dict.cc/?s={query}"),
    ("ctan", "CTAN", "https://www.ctan.org/search?phrase={query}"),
)
