"""Comment leaders and include-guard patterns for generated file headers."""

from __future__ import annotations

import re
from re import Pattern

DEFAULT_COMMENT_LEADER: str = "#"

COMMENT_LEADERS: dict[str, str] = {
    ".c": "//",
    ".cc": "//",
    ".cpp": "//",
    ".cxx": "//",
    ".h": "//",
    ".hh": "//",
    ".hpp": "//",
    ".hxx": "//",
    ".java": "//",
    ".js": "//",
    ".ts": "//",
    ".rs": "//",
    ".go": "//",
    ".py": "#",
    ".sh": "#",
    ".bash": "#",
    ".cmake": "#",
    ".yaml": "#",
    ".yml": "#",
    ".gp": "#",
    ".gnuplot": "#",
    ".plt": "#",
    ".tex": "%",
    ".sty": "%",
    ".bib": "%",
    ".lua": "--",
    ".sql": "--",
}

SPECIAL_FILENAME_LEADERS: dict[str, str] = {
    "CMakeLists.txt": "#",
    "Makefile": "#",
}

GUARDED_SUFFIXES: frozenset[str] = frozenset({".h", ".hh", ".hpp", ".hxx"})

GUARD_INVALID_CHARS_PATTERN: Pattern[str] = re.compile(r"[^A-Za-z0-9]+")
GUARD_PRESENT_PATTERN: Pattern[str] = re.compile(
    r"^\s*(?:#\s*pragma\s+once\b|#\s*ifndef\s+(\w+)\s*\n\s*#\s*define\s+\1\b)",
    re.MULTILINE,
)

HEADER_RULE_WIDTH: int = 72
