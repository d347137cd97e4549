"""Best-effort trailing whitespace cleanup."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path

from edkit.constants.whitespace import TRAILING_WHITESPACE_PATTERN
from edkit.exceptions import PatternNotFoundError
from edkit.io import read_text, write_text_atomic

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CleanupResult:
    """Cleaned text plus the number of substitutions made."""

    text: str
    count: int
    message: str

    @property
    def changed(self) -> bool:
        return self.count > 0


def substitute(pattern: str, replacement: str, text: str) -> tuple[str, int]:
    """Substitute every match of multi-line *pattern*; raise when nothing matched."""
    updated, count = re.subn(pattern, replacement, text, flags=re.MULTILINE)
    if count == 0:
        raise PatternNotFoundError(pattern)
    return updated, count


def strip_trailing_whitespace(text: str) -> CleanupResult:
    """Remove trailing blanks from every line of *text*.

    Text without trailing blanks is reported through the result message
    rather than as an error.
    """
    try:
        updated, count = substitute(TRAILING_WHITESPACE_PATTERN, "", text)
    except PatternNotFoundError:
        logger.info("No trailing whitespace found")
        return CleanupResult(text=text, count=0, message="No trailing whitespace found")
    return CleanupResult(text=updated, count=count, message=f"Removed trailing whitespace on {count} line(s)")


def clean_file(path: Path) -> CleanupResult:
    """Strip trailing whitespace in *path*, rewriting it only when something changed."""
    result = strip_trailing_whitespace(read_text(path))
    if result.changed:
        write_text_atomic(path, result.text)
        logger.info("%s: %s", path, result.message)
    return result
