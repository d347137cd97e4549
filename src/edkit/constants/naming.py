"""Suffix rules for related C/C++ file names.

Each rule table is evaluated top to bottom and the first match wins.
"""

from __future__ import annotations

import re
from re import Pattern

FORWARD_MARKER: str = "_fwd"

SOURCE_SUFFIXES: tuple[str, ...] = (".c", ".cpp")
HEADER_SUFFIXES: tuple[str, ...] = (".h", ".hpp")

TO_HEADER_RULES: tuple[tuple[Pattern[str], str], ...] = (
    (re.compile(r"(?:_fwd)?\.cpp$"), ".hpp"),
    (re.compile(r"(?:_fwd)?\.c$"), ".h"),
)

TO_SOURCE_RULES: tuple[tuple[Pattern[str], str], ...] = (
    (re.compile(r"(?:_fwd)?\.hpp$"), ".cpp"),
    (re.compile(r"(?:_fwd)?\.h$"), ".c"),
)

TO_FORWARD_HEADER_RULES: tuple[tuple[Pattern[str], str], ...] = (
    (re.compile(r"\.[ch]pp$"), "_fwd.hpp"),
    (re.compile(r"\.[ch]$"), "_fwd.h"),
)

CPP_SOURCE_SUFFIX: str = ".cpp"
C_HEADER_SUFFIX: str = ".h"
